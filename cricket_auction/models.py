# cricket_auction/models.py
from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .config import TEAM_CREDITS
from .db import Base


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    # remaining budget / cumulative spend
    credits: Mapped[int] = mapped_column(Integer, nullable=False, default=TEAM_CREDITS)
    used_credits: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # bumped on every write; stale writers get StaleDataError
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    players = relationship("Player", back_populates="team", order_by="Player.id")

    __table_args__ = (UniqueConstraint("name", name="uq_team_name"),)
    __mapper_args__ = {"version_id_col": version}


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    class_name: Mapped[str | None] = mapped_column(String(64), nullable=True)  # e.g. "Batsman"
    base_price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    sold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True
    )
    sold_price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    team = relationship("Team", back_populates="players")

    __mapper_args__ = {"version_id_col": version}


class Auction(Base):
    """
    One player's in-progress bidding. Rows are deleted, never archived,
    once the auction is finalized, dropped or checkpointed.
    """

    __tablename__ = "auctions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    player_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    current_bid: Mapped[int] = mapped_column(Integer, nullable=False)
    highest_bidder_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True
    )

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    player = relationship("Player")
    highest_bidder = relationship("Team")

    # at most one open auction per player
    __table_args__ = (UniqueConstraint("player_id", name="uq_auction_player"),)
    __mapper_args__ = {"version_id_col": version}
