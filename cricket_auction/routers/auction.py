# cricket_auction/routers/auction.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import models
from ..db import get_db
from ..errors import NotFound
from ..logic import auction_engine
from ..schemas import (
    AuctionOut,
    BidIn,
    FinalizeOut,
    MessageOut,
    NewAuctionOut,
    PlayerBrief,
    PlayerCreate,
    StartAuctionIn,
    TeamOut,
)

router = APIRouter(tags=["auction"])


@router.get("/auctions", response_model=list[AuctionOut])
def list_open_auctions(db: Session = Depends(get_db)):
    rows = db.query(models.Auction).order_by(models.Auction.id.asc()).all()
    return [AuctionOut.from_model(a) for a in rows]


@router.get("/auction/{auction_id}", response_model=AuctionOut)
def get_auction(auction_id: int, db: Session = Depends(get_db)):
    auction = db.get(models.Auction, auction_id)
    if not auction:
        raise NotFound("Auction not found")
    return AuctionOut.from_model(auction)


@router.post("/auction/new", response_model=NewAuctionOut)
def new_player_auction(body: PlayerCreate, db: Session = Depends(get_db)):
    """Create a player and open its auction immediately."""
    player, auction = auction_engine.create_player_and_start_auction(
        db, body.name, body.class_name, body.base_price
    )
    return NewAuctionOut(player=PlayerBrief.from_model(player), auction=AuctionOut.from_model(auction))


@router.post("/auction/start/{player_id}", response_model=AuctionOut)
def start_auction(body: StartAuctionIn, player_id: int, db: Session = Depends(get_db)):
    auction = auction_engine.start_auction(db, player_id, body.base_price)
    return AuctionOut.from_model(auction)


@router.post("/auction/bid/{auction_id}", response_model=AuctionOut)
def place_bid(body: BidIn, auction_id: int, db: Session = Depends(get_db)):
    auction = auction_engine.place_bid(db, auction_id, body.team_id, body.bid_amount)
    return AuctionOut.from_model(auction)


@router.post("/auction/finalize/{auction_id}", response_model=FinalizeOut)
def finalize(auction_id: int, db: Session = Depends(get_db)):
    team, player = auction_engine.finalize_auction(db, auction_id)
    return FinalizeOut(
        message="Auction finalized",
        team=TeamOut.from_model(team),
        player=PlayerBrief.from_model(player),
    )


@router.post("/auction/save-reset", response_model=MessageOut)
def save_reset(db: Session = Depends(get_db)):
    auction_engine.save_and_reset(db)
    return MessageOut(message="All sold players reset. Unsold remain unchanged.")


@router.post("/auction/checkpoint", response_model=MessageOut)
def checkpoint(db: Session = Depends(get_db)):
    auction_engine.checkpoint(db)
    return MessageOut(message="Auctions closed - standings saved.")


@router.post("/auction/drop/{auction_id}", response_model=MessageOut)
def drop(auction_id: int, db: Session = Depends(get_db)):
    auction_engine.drop_auction(db, auction_id)
    return MessageOut(message="Player dropped and marked unsold.")
