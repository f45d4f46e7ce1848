# cricket_auction/schemas.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from . import models
from .config import MAX_AMOUNT

# Wire format keeps the camelCase keys clients already send/expect
# (className, basePrice, teamId, bidAmount, ...); snake_case is accepted too.
CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -----------------------
# Requests
# -----------------------
class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)


class PlayerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    class_name: str | None = Field(default=None, max_length=64)
    base_price: int = Field(..., ge=0, le=MAX_AMOUNT)

    model_config = CAMEL


class StartAuctionIn(BaseModel):
    base_price: int = Field(..., ge=0, le=MAX_AMOUNT)

    model_config = CAMEL


class BidIn(BaseModel):
    team_id: int = Field(..., ge=1)
    bid_amount: int = Field(..., gt=0, le=MAX_AMOUNT)

    model_config = CAMEL


# -----------------------
# Responses
# -----------------------
class TeamBrief(BaseModel):
    id: int
    name: str
    credits: int
    used_credits: int

    model_config = CAMEL

    @classmethod
    def from_model(cls, t: models.Team) -> TeamBrief:
        return cls(id=t.id, name=t.name, credits=t.credits, used_credits=t.used_credits)


class PlayerBrief(BaseModel):
    id: int
    name: str
    class_name: str | None = None
    base_price: int
    sold: bool
    team_id: int | None = None
    sold_price: int

    model_config = CAMEL

    @classmethod
    def from_model(cls, p: models.Player) -> PlayerBrief:
        return cls(
            id=p.id,
            name=p.name,
            class_name=p.class_name,
            base_price=p.base_price,
            sold=bool(p.sold),
            team_id=p.team_id,
            sold_price=p.sold_price,
        )


class PlayerOut(PlayerBrief):
    """Player with its owning team resolved (null while unsold)."""

    team: TeamBrief | None = None

    @classmethod
    def from_model(cls, p: models.Player) -> PlayerOut:
        base = PlayerBrief.from_model(p)
        return cls(**base.model_dump(), team=TeamBrief.from_model(p.team) if p.team else None)


class TeamOut(TeamBrief):
    players: list[PlayerBrief] = Field(default_factory=list)

    @classmethod
    def from_model(cls, t: models.Team) -> TeamOut:
        base = TeamBrief.from_model(t)
        return cls(**base.model_dump(), players=[PlayerBrief.from_model(p) for p in t.players])


class AuctionOut(BaseModel):
    id: int
    player_id: int
    current_bid: int
    highest_bidder: int | None = None  # team id

    model_config = CAMEL

    @classmethod
    def from_model(cls, a: models.Auction) -> AuctionOut:
        return cls(
            id=a.id,
            player_id=a.player_id,
            current_bid=a.current_bid,
            highest_bidder=a.highest_bidder_id,
        )


class NewAuctionOut(BaseModel):
    player: PlayerBrief
    auction: AuctionOut


class FinalizeOut(BaseModel):
    message: str
    team: TeamOut
    player: PlayerBrief


class MessageOut(BaseModel):
    message: str
