"""auction baseline: teams, players, auctions

Revision ID: 5c1e0a7b9d21
Revises:
Create Date: 2026-10-18 00:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c1e0a7b9d21"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # teams
    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("credits", sa.Integer(), nullable=False, server_default=sa.text("10000")),
        sa.Column("used_credits", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("name", name="uq_team_name"),
    )
    op.create_index("ix_teams_id", "teams", ["id"])

    # players
    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("class_name", sa.String(length=64), nullable=True),
        sa.Column("base_price", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("sold", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "team_id",
            sa.Integer(),
            sa.ForeignKey("teams.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("sold_price", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_players_id", "players", ["id"])
    op.create_index("ix_players_team_id", "players", ["team_id"])

    # auctions (one open auction per player)
    op.create_table(
        "auctions",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column(
            "player_id",
            sa.Integer(),
            sa.ForeignKey("players.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("current_bid", sa.Integer(), nullable=False),
        sa.Column(
            "highest_bidder_id",
            sa.Integer(),
            sa.ForeignKey("teams.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("player_id", name="uq_auction_player"),
    )
    op.create_index("ix_auctions_id", "auctions", ["id"])
    op.create_index("ix_auctions_player_id", "auctions", ["player_id"])


def downgrade() -> None:
    op.drop_index("ix_auctions_player_id", table_name="auctions")
    op.drop_index("ix_auctions_id", table_name="auctions")
    op.drop_table("auctions")
    op.drop_index("ix_players_team_id", table_name="players")
    op.drop_index("ix_players_id", table_name="players")
    op.drop_table("players")
    op.drop_index("ix_teams_id", table_name="teams")
    op.drop_table("teams")
