"""
Unit tests for leaderboard view helpers: normalization, formatting, loading.
"""

from __future__ import annotations

import math

import httpx
import pytest

from showcase_client.api_client import LeaderboardApiClient
from showcase_client.game_data import GameData
from showcase_client.leaderboard_view import (
    PLACEHOLDER,
    format_number,
    load_entries,
    normalize_entry,
    region_label,
    table_rows,
)

RAW = {
    "id": 12,
    "uid": "800000001",
    "region": "asia",
    "characterId": "1205",
    "level": 80,
    "eidolon": 1,
    "lightConeId": 23019,
    "cv": 260.4,
    "critRate": 70.2,
    "critDmg": 120.0,
    "atk": 3456,
    "spd": 134.2,
    "createdAt": "2025-01-01T00:00:00",
}


def test_normalize_entry_full_row() -> None:
    row = normalize_entry(RAW)
    assert row.id == "12"
    assert row.region == "ASIA"
    assert row.character_id == 1205
    assert row.cv == 260.4
    assert row.light_cone_id == 23019


def test_normalize_entry_missing_fields_degrade() -> None:
    row = normalize_entry({"id": 1, "uid": "u"})
    assert row.cv == 0.0
    assert row.level == 0
    assert row.eidolon == 0
    assert row.region is None
    assert row.light_cone_id is None
    assert row.crit_rate is None
    assert row.atk is None
    assert row.created_at == ""


def test_normalize_entry_junk_numbers_become_nan() -> None:
    row = normalize_entry({"id": 1, "uid": "u", "critRate": "bad"})
    assert math.isnan(row.crit_rate)
    assert format_number(row.crit_rate, 1, "%") == PLACEHOLDER


def test_format_number() -> None:
    assert format_number(None) == PLACEHOLDER
    assert format_number(3456.4) == "3,456"
    assert format_number(160.0, 1) == "160"
    assert format_number(65.34, 1, "%") == "65.3%"


def test_region_label() -> None:
    assert region_label("NA") == "North America"
    assert region_label("XX") == "XX"
    assert region_label(None) == PLACEHOLDER


def test_table_rows_sorted_and_labelled() -> None:
    low = dict(RAW, id=2, cv=100.0, lightConeId=0)
    game_data = GameData(characters={"1205": {"name": "Blade", "unreleased": False}})
    rows = table_rows([normalize_entry(low), normalize_entry(RAW)], game_data)
    assert [r["cv"] for r in rows] == ["260.4", "100"]
    assert rows[0]["character"] == "Blade"
    assert rows[0]["details"] == "Lv80 • E1 • #23019"
    assert rows[1]["details"] == "Lv80 • E1"
    assert rows[0]["region"] == "Asia"


def test_table_rows_light_cone_icon_only_when_equipped() -> None:
    game_data = GameData(asset_base_url="https://assets.test/")
    with_cone = normalize_entry(RAW)
    without_cone = normalize_entry(dict(RAW, id=2, cv=100.0, lightConeId=0))
    rows = table_rows([with_cone, without_cone], game_data)
    assert rows[0]["light_cone_icon"] == "https://assets.test/icon/light_cone/23019.webp"
    assert rows[1]["light_cone_icon"] is None


@pytest.mark.asyncio
async def test_load_entries_replaces_rows_and_tolerates_failures() -> None:
    responses = iter([
        httpx.Response(200, json=[RAW, "junk"]),
        httpx.Response(200, json={"error": "internal"}),
        httpx.Response(500, json={"error": "internal"}),
    ])

    def handler(request: httpx.Request) -> httpx.Response:
        return next(responses)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        api = LeaderboardApiClient(base_url="http://lb.test", client=http)
        first = await load_entries(api, character_id=1205, region="ASIA")
        second = await load_entries(api)
        third = await load_entries(api)

    assert [e.id for e in first] == ["12"]
    assert second == []
    assert third == []
