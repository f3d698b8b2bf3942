"""
Showcase collector: turn locally computed character stats into ingestion
requests and submit them concurrently.

Stat computation is delegated to a preview calculator supplied by the caller;
it receives a ShowcaseCharacter and returns named stats as fractions
(0.5 == 50%).
"""

from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .api_client import LeaderboardApiClient

logger = logging.getLogger(__name__)

STAT_CR = "CRIT Rate"
STAT_CD = "CRIT DMG"
STAT_ATK = "ATK"
STAT_SPD = "SPD"

DEFAULT_LEVEL = 80


@dataclass
class ShowcaseCharacter:
    """A character as loaded in the showcase viewer."""

    id: Any
    equipped: Mapping[str, Any] = field(default_factory=dict)
    eidolon: Optional[int] = None
    light_cone: Any = None


PreviewCalculator = Callable[[ShowcaseCharacter], Mapping[str, Any]]


def _number(value: Any) -> float:
    """Missing counts as 0; anything unparseable becomes NaN."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _int_or_zero(value: Any) -> int:
    number = _number(value)
    if not math.isfinite(number):
        return 0
    return int(number)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5)) if math.isfinite(value) else 0


def round_to(value: float, precision: int = 1) -> float:
    return round(value, precision) if math.isfinite(value) else 0.0


def has_equipped_items(character: ShowcaseCharacter) -> bool:
    return any(bool(item) for item in (character.equipped or {}).values())


def build_ingest_body(
    uid: str,
    character: ShowcaseCharacter,
    stats: Mapping[str, Any],
    region: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Ingestion body for one character, or None when crit stats are unusable."""
    cr_percent = _number(stats.get(STAT_CR)) * 100
    cd_percent = _number(stats.get(STAT_CD)) * 100
    if (
        not math.isfinite(cr_percent)
        or not math.isfinite(cd_percent)
        or cr_percent <= 0
        or cd_percent <= 0
    ):
        logger.warning(
            "Skipping character %s - invalid CR or CD (cr=%s, cd=%s)",
            character.id,
            cr_percent,
            cd_percent,
        )
        return None

    atk = _number(stats.get(STAT_ATK))
    spd = _number(stats.get(STAT_SPD))
    return {
        "uid": uid,
        "region": region,
        "characterId": _int_or_zero(character.id),
        "level": DEFAULT_LEVEL,
        "eidolon": character.eidolon if character.eidolon is not None else 0,
        "lightConeId": _int_or_zero(character.light_cone),
        "stats": {
            "atk": round_half_up(atk),
            "spd": round_to(spd),
            "cr": round_to(cr_percent),
            "cd": round_to(cd_percent),
        },
    }


async def _submit_one(
    api: LeaderboardApiClient,
    uid: str,
    character: ShowcaseCharacter,
    preview: PreviewCalculator,
    region: Optional[str],
) -> bool:
    if not has_equipped_items(character):
        return False
    body = build_ingest_body(uid, character, preview(character), region)
    if body is None:
        return False
    await api.ingest_build(body)
    return True


async def ingest_from_showcase(
    api: LeaderboardApiClient,
    uid: str,
    characters: Iterable[ShowcaseCharacter],
    preview: PreviewCalculator,
    region: Optional[str] = None,
) -> int:
    """Upload every eligible character; returns how many uploads succeeded.

    Uploads run concurrently. A failure for one character is logged and
    does not affect the others.
    """
    characters = list(characters)
    results = await asyncio.gather(
        *(_submit_one(api, uid, c, preview, region) for c in characters),
        return_exceptions=True,
    )
    successful = 0
    for character, result in zip(characters, results):
        if isinstance(result, Exception):
            logger.warning("Failed for character %s: %s", character.id, result)
        elif result:
            successful += 1
    return successful
