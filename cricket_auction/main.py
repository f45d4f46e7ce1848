# cricket_auction/main.py
from __future__ import annotations

import json
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cricket_auction import models  # noqa: F401  (import registers models with Base)

from .config import API_PREFIX, LOG_LEVEL
from .db import Base, SessionLocal, engine
from .errors import AuctionError, StoreUnavailable
from .logic.roster_seeder import ensure_teams

# Routers
from .routers import auction, health, players, teams

# ---------- App ----------
app = FastAPI(title="Cricket Auction", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------- Minimal structured logging ----------
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger("cricket_auction")


# Create tables and seed the franchises once on app start
@app.on_event("startup")
def _bootstrap() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        with SessionLocal() as db:
            ensure_teams(db)
    except OperationalError as exc:
        logger.exception("Database connection failed at startup")
        raise StoreUnavailable() from exc
    logger.info("Database ready: %s", engine.url.render_as_string(hide_password=True))


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    duration_ms = (time.perf_counter() - start) * 1000.0
    log_obj = {
        "msg": "request",
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": round(duration_ms, 2),
    }
    logger.info(json.dumps(log_obj, separators=(",", ":")))
    return response


# ---------- Error rendering: every failure is {"error": "..."} ----------
@app.exception_handler(AuctionError)
async def _auction_error(request: Request, exc: AuctionError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def _store_error(request: Request, exc: SQLAlchemyError):
    logger.error("database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": StoreUnavailable.default_message})


@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def _include_router_flex(app: FastAPI, module) -> None:
    for attr in ("router", "route"):
        if hasattr(module, attr):
            app.include_router(getattr(module, attr), prefix=API_PREFIX)
            return
    name = getattr(module, "__name__", str(module))
    raise RuntimeError(f"Module {name} does not define `router` or `route`")


# ---------- Include Routers ----------
_include_router_flex(app, health)  # /health
_include_router_flex(app, players)  # /players, /player
_include_router_flex(app, teams)  # /team, /teams
_include_router_flex(app, auction)  # /auction, /auctions
