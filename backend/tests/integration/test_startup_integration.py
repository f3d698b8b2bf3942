"""
Integration test: app startup creates the schema; entry check fails fast on a bad store.
"""

from __future__ import annotations

import asyncio

from fastapi.testclient import TestClient

import backend_entry
from core.config import Settings
from main import create_app


def test_startup_creates_schema_and_serves(tmp_path) -> None:
    db_url = f"sqlite+aiosqlite:///{(tmp_path / 'lb.db').as_posix()}"
    app = create_app(Settings(database_url=db_url))
    with TestClient(app) as client:
        r = client.post(
            "/api/ingest",
            json={"uid": "900000001", "characterId": 1205, "stats": {"cr": 60, "cd": 120}},
        )
        assert r.status_code == 200
        rows = client.get("/api/leaderboard/global").json()
        assert rows[0]["region"] == "TW"
        assert rows[0]["cv"] == 240


def test_check_store_succeeds_for_sqlite_file(tmp_path) -> None:
    db_url = f"sqlite+aiosqlite:///{(tmp_path / 'ok.db').as_posix()}"
    assert asyncio.run(backend_entry.check_store(db_url)) is True


def test_check_store_fails_for_unreachable_store(tmp_path) -> None:
    db_url = f"sqlite+aiosqlite:///{(tmp_path / 'missing' / 'nested' / 'x.db').as_posix()}"
    assert asyncio.run(backend_entry.check_store(db_url)) is False
