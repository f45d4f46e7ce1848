# cricket_auction/config.py
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cricket_auction.db")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))

# Optional common namespace for every route, e.g. "/api"
API_PREFIX = os.getenv("API_PREFIX", "").rstrip("/")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ---- Auction rules ----
TEAM_CREDITS = int(os.getenv("TEAM_CREDITS", "10000"))
MAX_SQUAD_SIZE = int(os.getenv("MAX_SQUAD_SIZE", "26"))

# Upper bound for any price, bid or credit value (signed 32-bit INTEGER column)
MAX_AMOUNT = 2**31 - 1

DEFAULT_TEAMS: list[str] = [
    "IMJ NINJAS",
    "IMJ IGNITORS",
    "IMJ TITANS",
    "IMJ FALCONS",
    "IMJ PHANTOMS",
    "IMJ HAWKS",
]


def _team_names(raw: str | None) -> list[str]:
    if not raw:
        return DEFAULT_TEAMS.copy()
    return [n.strip() for n in raw.split(",") if n.strip()]


INITIAL_TEAMS: list[str] = _team_names(os.getenv("INITIAL_TEAMS"))
