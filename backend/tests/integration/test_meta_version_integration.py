"""
Integration test: GET /api/meta/version returns version from VERSION file.
"""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from fastapi.testclient import TestClient

from main import create_app
from version import get_version, is_semver


def test_meta_version_returns_version() -> None:
    """GET /api/meta/version returns JSON with version key."""
    client = TestClient(create_app())
    resp = client.get("/api/meta/version")
    assert resp.status_code == 200
    data = resp.json()
    assert data["version"] == get_version()
    assert is_semver(data["version"])
