# cricket_auction/routers/teams.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from .. import models
from ..db import get_db
from ..errors import AuctionConflict, NotFound
from ..logic.auction_engine import commit_changes
from ..schemas import TeamCreate, TeamOut

router = APIRouter(tags=["teams"])


def _with_players(db: Session):
    return db.query(models.Team).options(selectinload(models.Team.players))


@router.post("/team", response_model=TeamOut)
def create_team(body: TeamCreate, db: Session = Depends(get_db)):
    name = body.name.strip()
    existing = db.query(models.Team).filter(models.Team.name == name).first()
    if existing:
        raise AuctionConflict("Team name already exists")

    team = models.Team(name=name)
    db.add(team)
    commit_changes(db, "Team name already exists")
    db.refresh(team)
    return TeamOut.from_model(team)


@router.get("/teams", response_model=List[TeamOut])
def list_teams(db: Session = Depends(get_db)):
    rows = _with_players(db).order_by(models.Team.id.asc()).all()
    return [TeamOut.from_model(t) for t in rows]


@router.get("/team/byName/{name}", response_model=TeamOut)
def get_team_by_name(name: str, db: Session = Depends(get_db)):
    # exact match, ignoring case
    team = _with_players(db).filter(func.lower(models.Team.name) == name.strip().lower()).first()
    if not team:
        raise NotFound("Team not found")
    return TeamOut.from_model(team)


@router.get("/team/{team_id}", response_model=TeamOut)
def get_team(team_id: int, db: Session = Depends(get_db)):
    team = db.get(models.Team, team_id)
    if not team:
        raise NotFound("Team not found")
    return TeamOut.from_model(team)
