# cricket_auction/logic/player_import.py
from __future__ import annotations

import csv
import io

from sqlalchemy.orm import Session

from .. import models
from ..config import MAX_AMOUNT
from ..errors import ValidationFailure
from .auction_engine import commit_changes, create_player

REQUIRED_COLUMNS = {"name", "baseprice"}


def _to_int(v: str | None) -> int | None:
    if v is None or str(v).strip() == "":
        return None
    try:
        return int(float(v))
    except (ValueError, OverflowError):
        return None


def import_players_csv(db: Session, text: str) -> tuple[list[models.Player], list[dict]]:
    """
    Bulk-create unsold players from CSV text with a header row.
    Columns (case-insensitive, "_" ignored): name, className, basePrice.
    Rows without a name or a usable non-negative price are skipped and reported.
    """
    reader = csv.DictReader(io.StringIO(text))

    header = {(h or "").strip().lower().replace("_", "") for h in reader.fieldnames or []}
    if not REQUIRED_COLUMNS.issubset(header):
        raise ValidationFailure(f"CSV must have columns: name, className, basePrice (got {sorted(header)})")

    created: list[models.Player] = []
    skipped: list[dict] = []
    for line_no, row in enumerate(reader, start=2):
        norm = {(k or "").strip().lower().replace("_", ""): v for k, v in row.items()}

        name = (norm.get("name") or "").strip()
        if not name:
            skipped.append({"line": line_no, "reason": "missing_name"})
            continue

        price = _to_int(norm.get("baseprice"))
        if price is None or not 0 <= price <= MAX_AMOUNT:
            skipped.append({"line": line_no, "reason": "bad_base_price"})
            continue

        class_name = (norm.get("classname") or "").strip() or None
        created.append(create_player(db, name, class_name, price, commit=False))

    commit_changes(db)
    for p in created:
        db.refresh(p)
    return created, skipped
