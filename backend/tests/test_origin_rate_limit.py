"""Per-origin sliding-window middleware."""

from __future__ import annotations

from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app


def test_origin_limit_rejects_after_cap() -> None:
    app = create_app(Settings(origin_rate_limit_per_minute=3))
    client = TestClient(app)
    for _ in range(3):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.headers["ratelimit-limit"] == "3"
    r = client.get("/api/health")
    assert r.status_code == 429
    assert r.json() == {"error": "too many requests"}
    assert "retry-after" in r.headers
    assert r.headers["ratelimit-remaining"] == "0"


def test_origin_limit_reports_remaining() -> None:
    app = create_app(Settings(origin_rate_limit_per_minute=5))
    client = TestClient(app)
    assert client.get("/api/health").headers["ratelimit-remaining"] == "4"
    assert client.get("/api/health").headers["ratelimit-remaining"] == "3"
