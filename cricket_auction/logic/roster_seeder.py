# cricket_auction/logic/roster_seeder.py
from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from .. import models
from ..config import INITIAL_TEAMS, TEAM_CREDITS

logger = logging.getLogger("cricket_auction.seeder")


def ensure_teams(db: Session, names: Iterable[str] | None = None) -> list[models.Team]:
    """
    Create each configured franchise exactly once. Existing teams are never
    touched, so re-running on every boot keeps budgets and rosters intact.
    Returns only the teams created by this call.
    """
    wanted = list(dict.fromkeys(INITIAL_TEAMS if names is None else names))

    existing = {name for (name,) in db.query(models.Team.name).filter(models.Team.name.in_(wanted)).all()}
    missing = [n for n in wanted if n not in existing]

    created: list[models.Team] = []
    for name in missing:
        team = models.Team(name=name, credits=TEAM_CREDITS, used_credits=0)
        db.add(team)
        created.append(team)

    if created:
        # uq_team_name turns a concurrent double-seed into an IntegrityError
        db.commit()
        for team in created:
            db.refresh(team)
            logger.info("Team created: %s", team.name)
    return created
