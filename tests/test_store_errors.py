# tests/test_store_errors.py
import pytest
from sqlalchemy.exc import OperationalError
from starlette.testclient import TestClient

from cricket_auction import main
from cricket_auction.errors import StoreUnavailable
from cricket_auction.main import app


def _down(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("unable to open database file"))


def test_startup_aborts_when_database_is_unreachable(monkeypatch, caplog):
    monkeypatch.setattr(main.Base.metadata, "create_all", _down)

    with pytest.raises(StoreUnavailable):
        with TestClient(app):
            pass

    assert "Database connection failed at startup" in caplog.text


def test_database_error_during_request_is_500(client, db_session, monkeypatch):
    monkeypatch.setattr(db_session, "query", _down)

    r = client.get("/players")
    assert r.status_code == 500
    assert r.json() == {"error": "Database unavailable"}

    r = client.get("/teams")
    assert r.status_code == 500
    assert r.json() == {"error": "Database unavailable"}


def test_database_error_on_commit_is_500(client, db_session, monkeypatch):
    monkeypatch.setattr(db_session, "commit", _down)

    r = client.post("/team", json={"name": "Offline"})
    assert r.status_code == 500
    assert r.json() == {"error": "Database unavailable"}
