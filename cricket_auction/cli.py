# cricket_auction/cli.py
"""
Command-line entry point.

Usage:
    cricket-auction serve
    cricket-auction seed-teams
    cricket-auction import-players players.csv
    cricket-auction reset [--wipe]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import HOST, LOG_LEVEL, PORT
from .db import Base, SessionLocal, engine
from .errors import AuctionError
from .logic import auction_engine
from .logic.player_import import import_players_csv
from .logic.roster_seeder import ensure_teams

logger = logging.getLogger("cricket_auction.cli")


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("cricket_auction.main:app", host=args.host, port=args.port, log_level=LOG_LEVEL.lower())
    return 0


def _seed_teams(args: argparse.Namespace) -> int:
    with SessionLocal() as db:
        created = ensure_teams(db)
    print(f"{len(created)} team(s) created")
    return 0


def _import_players(args: argparse.Namespace) -> int:
    text = Path(args.csv_file).read_text(encoding="utf-8")
    with SessionLocal() as db:
        created, skipped = import_players_csv(db, text)
    print(f"{len(created)} player(s) imported, {len(skipped)} row(s) skipped")
    for s in skipped:
        print(f"  line {s['line']}: {s['reason']}")
    return 0


def _reset(args: argparse.Namespace) -> int:
    with SessionLocal() as db:
        if args.wipe:
            removed = auction_engine.wipe(db)
            print(f"Database cleared ({removed} players removed). Ready for fresh auction!")
        else:
            reverted = auction_engine.save_and_reset(db)
            print(f"{reverted} sold player(s) reset. Unsold remain unchanged.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cricket-auction",
        description="Cricket player auction backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=HOST)
    p_serve.add_argument("--port", type=int, default=PORT)
    p_serve.set_defaults(func=_serve)

    p_seed = sub.add_parser("seed-teams", help="Create the configured franchises if missing")
    p_seed.set_defaults(func=_seed_teams)

    p_import = sub.add_parser("import-players", help="Create unsold players from a CSV file")
    p_import.add_argument("csv_file", help="CSV with header: name,className,basePrice")
    p_import.set_defaults(func=_import_players)

    p_reset = sub.add_parser("reset", help="Revert sold players and team budgets")
    p_reset.add_argument(
        "--wipe",
        action="store_true",
        help="Also delete every player (fresh auction)",
    )
    p_reset.set_defaults(func=_reset)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = build_parser().parse_args(argv)

    if args.command != "serve":
        Base.metadata.create_all(bind=engine)

    try:
        return args.func(args)
    except AuctionError as exc:
        logger.error("%s", exc.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
