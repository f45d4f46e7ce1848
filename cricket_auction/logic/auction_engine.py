# cricket_auction/logic/auction_engine.py
"""
Auction state transitions and the credit settlement around them.

Every public operation validates first and mutates second, then commits
once. Rows are versioned (see models), so a write based on a stale read
fails with AuctionConflict instead of silently overwriting a newer bid
or budget.
"""
from __future__ import annotations

import logging
from typing import Tuple

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from .. import models
from ..config import MAX_SQUAD_SIZE, TEAM_CREDITS
from ..errors import (
    AuctionConflict,
    BidTooLow,
    InsufficientCredits,
    NotFound,
    ProtectedState,
    RosterFull,
    StoreUnavailable,
)

logger = logging.getLogger("cricket_auction.engine")


def commit_changes(db: Session, conflict_message: str | None = None) -> None:
    try:
        db.commit()
    except (StaleDataError, IntegrityError) as exc:
        db.rollback()
        raise AuctionConflict(conflict_message) from exc
    except OperationalError as exc:
        db.rollback()
        raise StoreUnavailable() from exc


def _get_auction(db: Session, auction_id: int) -> models.Auction:
    auction = db.get(models.Auction, auction_id)
    if not auction:
        raise NotFound("Auction not found")
    return auction


def _reset_player(player: models.Player) -> None:
    player.sold = False
    player.sold_price = 0
    player.team = None


# ---------- Creation ----------
def create_player(
    db: Session, name: str, class_name: str | None, base_price: int, *, commit: bool = True
) -> models.Player:
    player = models.Player(name=name.strip(), class_name=class_name, base_price=base_price)
    db.add(player)
    if commit:
        commit_changes(db)
        db.refresh(player)
    return player


def start_auction(db: Session, player_id: int, base_price: int, *, commit: bool = True) -> models.Auction:
    player = db.get(models.Player, player_id)
    if not player:
        raise NotFound("Player not found")

    open_auction = db.query(models.Auction).filter(models.Auction.player_id == player_id).first()
    if open_auction:
        raise AuctionConflict("Player already has an open auction")

    auction = models.Auction(player=player, current_bid=base_price, highest_bidder_id=None)
    db.add(auction)
    if commit:
        commit_changes(db, "Player already has an open auction")
        db.refresh(auction)
    return auction


def create_player_and_start_auction(
    db: Session, name: str, class_name: str | None, base_price: int
) -> Tuple[models.Player, models.Auction]:
    player = create_player(db, name, class_name, base_price, commit=False)
    db.flush()
    auction = start_auction(db, player.id, base_price, commit=False)
    commit_changes(db)
    db.refresh(player)
    db.refresh(auction)
    return player, auction


# ---------- Bidding ----------
def place_bid(db: Session, auction_id: int, team_id: int, bid_amount: int) -> models.Auction:
    """
    Checks run in a fixed order and the first failure wins:
    auction exists, team exists, affordable, roster not full, strictly higher.
    """
    auction = _get_auction(db, auction_id)

    team = db.get(models.Team, team_id)
    if not team:
        raise NotFound("Team not found")

    if bid_amount > team.credits:
        raise InsufficientCredits()

    if len(team.players) >= MAX_SQUAD_SIZE:
        raise RosterFull(f"Team already has {MAX_SQUAD_SIZE} players")

    if bid_amount <= auction.current_bid:
        raise BidTooLow()

    auction.current_bid = bid_amount
    auction.highest_bidder_id = team.id
    commit_changes(db, "Auction was updated by another bid, please retry")
    db.refresh(auction)
    return auction


# ---------- Resolution ----------
def finalize_auction(db: Session, auction_id: int) -> Tuple[models.Team, models.Player]:
    auction = _get_auction(db, auction_id)

    team = auction.highest_bidder
    if not team:
        raise NotFound("Team not found")
    player = auction.player
    if not player:
        raise NotFound("Player not found")

    price = auction.current_bid
    # bids can be outstanding on several auctions at once, so re-check at settlement
    if player.sold:
        raise ProtectedState("Player is already sold")
    if len(team.players) >= MAX_SQUAD_SIZE:
        raise RosterFull(f"Team already has {MAX_SQUAD_SIZE} players")
    if price > team.credits:
        raise InsufficientCredits()

    team.credits -= price
    team.used_credits += price

    player.sold = True
    player.team = team
    player.sold_price = price

    db.delete(auction)
    commit_changes(db, "Auction or team was modified concurrently, please retry")

    db.refresh(team)
    db.refresh(player)
    logger.info("auction %s finalized: player %s -> team %s for %s", auction_id, player.id, team.id, price)
    return team, player


def drop_auction(db: Session, auction_id: int) -> None:
    auction = _get_auction(db, auction_id)

    player = auction.player
    if player:
        owner = player.team
        if player.sold and owner:
            # keep credits + used_credits constant for the previous owner
            owner.credits += player.sold_price
            owner.used_credits -= player.sold_price
        _reset_player(player)

    db.delete(auction)
    commit_changes(db)
    logger.info("auction %s dropped", auction_id)


# ---------- Bulk ----------
def checkpoint(db: Session) -> int:
    """Close every open auction; sale results stay as they are."""
    removed = db.query(models.Auction).delete(synchronize_session=False)
    commit_changes(db)
    logger.info("checkpoint: %s open auctions closed", removed)
    return removed


def _reset_teams(db: Session) -> None:
    db.query(models.Team).update(
        {
            models.Team.credits: TEAM_CREDITS,
            models.Team.used_credits: 0,
            models.Team.version: models.Team.version + 1,
        },
        synchronize_session=False,
    )


def save_and_reset(db: Session) -> int:
    """
    Revert every sold player to unsold, close all auctions and restore every
    team's budget and roster. Never-sold players are left alone.
    """
    reverted = (
        db.query(models.Player)
        .filter(or_(models.Player.sold == True, models.Player.team_id.isnot(None)))  # noqa: E712
        .update(
            {
                models.Player.sold: False,
                models.Player.sold_price: 0,
                models.Player.team_id: None,
                models.Player.version: models.Player.version + 1,
            },
            synchronize_session=False,
        )
    )
    db.query(models.Auction).delete(synchronize_session=False)
    _reset_teams(db)
    commit_changes(db)
    db.expire_all()
    logger.info("save-reset: %s sold players reverted, teams reset to %s credits", reverted, TEAM_CREDITS)
    return reverted


def wipe(db: Session) -> int:
    """Fresh auction: drop every auction and player, reset every team."""
    db.query(models.Auction).delete(synchronize_session=False)
    removed = db.query(models.Player).delete(synchronize_session=False)
    _reset_teams(db)
    commit_changes(db)
    db.expire_all()
    logger.info("wipe: %s players deleted, teams reset to %s credits", removed, TEAM_CREDITS)
    return removed


# ---------- Player removal ----------
def delete_player(db: Session, player_id: int) -> None:
    player = db.get(models.Player, player_id)
    if not player:
        raise NotFound("Player not found")
    if player.sold:
        raise ProtectedState("Cannot delete sold player")

    db.query(models.Auction).filter(models.Auction.player_id == player.id).delete(synchronize_session=False)
    db.delete(player)
    commit_changes(db)
