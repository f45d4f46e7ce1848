# tests/conftest.py
import os

# App engine (used only by startup bootstrap) must never touch a real file
os.environ["DATABASE_URL"] = "sqlite+pysqlite://"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

# Make sure models are imported so Base has all tables
from cricket_auction import models  # noqa: E402,F401
from cricket_auction.db import Base, get_db  # noqa: E402
from cricket_auction.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+pysqlite://"


@pytest.fixture()
def engine():
    # fresh in-memory DB per test, shared by every connection of that test
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session):
    # Override app DB dependency to use our in-memory session
    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override

    from starlette.testclient import TestClient

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def make_team(db_session):
    def _make(name: str, credits: int = 10000, used_credits: int = 0) -> models.Team:
        team = models.Team(name=name, credits=credits, used_credits=used_credits)
        db_session.add(team)
        db_session.commit()
        db_session.refresh(team)
        return team

    return _make


@pytest.fixture()
def make_player(db_session):
    def _make(name: str, base_price: int = 500, class_name: str = "Batsman", team=None, sold_price: int = 0):
        player = models.Player(name=name, class_name=class_name, base_price=base_price)
        if team is not None:
            player.team = team
            player.sold = True
            player.sold_price = sold_price or base_price
        db_session.add(player)
        db_session.commit()
        db_session.refresh(player)
        return player

    return _make
