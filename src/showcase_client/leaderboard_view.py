"""
Leaderboard view model: defensive row normalization, number formatting and
the fetch that backs the table.

Rows from the API are coerced field by field so a malformed entry degrades to
placeholder cells instead of breaking the table.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .api_client import DEFAULT_LIMIT, LeaderboardApiClient, leaderboard_path
from .game_data import GameData

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"

REGION_LABELS: Dict[str, str] = {
    "ASIA": "Asia",
    "NA": "North America",
    "EU": "Europe",
    "TW": "Taiwan / HK / MO",
    "CN": "China",
}


@dataclass
class LeaderboardRow:
    id: str
    uid: str
    region: Optional[str]
    character_id: int
    level: int
    eidolon: int
    light_cone_id: Optional[int]
    cv: float
    crit_rate: Optional[float]
    crit_dmg: Optional[float]
    atk: Optional[float]
    spd: Optional[float]
    created_at: str


def _optional_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _number_or_zero(value: Any) -> float:
    number = _optional_number(value)
    return 0.0 if number is None else number


def _int_or_zero(value: Any) -> int:
    number = _number_or_zero(value)
    return int(number) if math.isfinite(number) else 0


def normalize_entry(entry: Mapping[str, Any]) -> LeaderboardRow:
    light_cone = _optional_number(entry.get("lightConeId"))
    region = entry.get("region")
    return LeaderboardRow(
        id=str(entry.get("id")),
        uid=str(entry.get("uid")),
        region=str(region).upper() if region is not None else None,
        character_id=_int_or_zero(entry.get("characterId")),
        level=_int_or_zero(entry.get("level")),
        eidolon=_int_or_zero(entry.get("eidolon")),
        light_cone_id=int(light_cone) if light_cone is not None and math.isfinite(light_cone) else None,
        cv=_number_or_zero(entry.get("cv")),
        crit_rate=_optional_number(entry.get("critRate")),
        crit_dmg=_optional_number(entry.get("critDmg")),
        atk=_optional_number(entry.get("atk")),
        spd=_optional_number(entry.get("spd")),
        created_at=str(entry.get("createdAt") or ""),
    )


def format_number(value: Optional[float], decimals: int = 0, suffix: str = "") -> str:
    """Grouped number with up to `decimals` fraction digits; placeholder for missing/NaN."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return PLACEHOLDER
    text = f"{value:,.{decimals}f}"
    if decimals and "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text}{suffix}"


def region_label(region: Optional[str]) -> str:
    if not region:
        return PLACEHOLDER
    return REGION_LABELS.get(region, region)


async def load_entries(
    api: LeaderboardApiClient,
    character_id: Optional[int] = None,
    region: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
) -> List[LeaderboardRow]:
    """Fetch the selected leaderboard; any failure or non-list payload yields no rows."""
    try:
        data = await api.get_json(leaderboard_path(character_id, region, limit))
    except Exception as e:
        logger.warning("Leaderboard fetch failed: %s", e)
        return []
    if not isinstance(data, list):
        return []
    return [normalize_entry(entry) for entry in data if isinstance(entry, Mapping)]


def table_rows(entries: List[LeaderboardRow], game_data: GameData) -> List[Dict[str, Any]]:
    """Display rows for the table, highest CV first."""
    rows = []
    for entry in sorted(entries, key=lambda e: e.cv, reverse=True):
        light_cone = game_data.light_cone_name(entry.light_cone_id)
        rows.append(
            {
                "avatar": game_data.character_avatar_url(entry.character_id),
                "character": game_data.character_name(entry.character_id),
                "light_cone_icon": game_data.light_cone_icon_url(entry.light_cone_id)
                if light_cone
                else None,
                "details": f"Lv{entry.level} • E{entry.eidolon}"
                + (f" • {light_cone}" if light_cone else ""),
                "cv": format_number(entry.cv, 1),
                "cr": format_number(entry.crit_rate, 1, "%"),
                "cd": format_number(entry.crit_dmg, 1, "%"),
                "atk": format_number(entry.atk, 0),
                "spd": format_number(entry.spd, 1),
                "uid": entry.uid,
                "region": region_label(entry.region),
            }
        )
    return rows
