# cricket_auction/routers/players.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session, joinedload

from .. import models
from ..db import get_db
from ..logic import auction_engine
from ..logic.player_import import import_players_csv
from ..schemas import MessageOut, PlayerBrief, PlayerCreate, PlayerOut

router = APIRouter(tags=["players"])


class ImportCSVBody(BaseModel):
    """
    CSV text with header. Columns supported (case-insensitive):
      name (required), className, basePrice (required)
    """

    csv: str = Field(..., description="Raw CSV text including header row")


@router.get("/players", response_model=list[PlayerOut])
def list_players(db: Session = Depends(get_db)):
    rows = db.query(models.Player).options(joinedload(models.Player.team)).order_by(models.Player.id.asc()).all()
    return [PlayerOut.from_model(p) for p in rows]


@router.post("/player", response_model=PlayerBrief)
def create_player(body: PlayerCreate, db: Session = Depends(get_db)):
    """Register an unsold player without opening an auction for it."""
    player = auction_engine.create_player(db, body.name, body.class_name, body.base_price)
    return PlayerBrief.from_model(player)


@router.post("/players/import_csv")
def import_csv(body: ImportCSVBody, db: Session = Depends(get_db)):
    created, skipped = import_players_csv(db, body.csv)
    return {
        "ok": True,
        "created": [PlayerBrief.from_model(p).model_dump(by_alias=True) for p in created],
        "skipped": skipped,
    }


@router.delete("/player/{player_id}", response_model=MessageOut)
def delete_player(player_id: int, db: Session = Depends(get_db)):
    auction_engine.delete_player(db, player_id)
    return MessageOut(message="Unsold player deleted")
