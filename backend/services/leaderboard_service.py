"""Leaderboard queries: ranked builds joined with character slot and player."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from ingestion.validation import to_bounded_int, to_finite_number
from models.build import Build
from models.character import Character
from models.player import Player
from repositories.build_repo import BuildRepository

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


class LeaderboardEntry(BaseModel):
    """One leaderboard row as served to clients (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    cv: float
    crit_rate: float = Field(..., alias="critRate")
    crit_dmg: float = Field(..., alias="critDmg")
    atk: Optional[float] = None
    spd: Optional[float] = None
    character_id: int = Field(..., alias="characterId")
    level: int
    eidolon: int
    light_cone_id: int = Field(..., alias="lightConeId")
    uid: str
    region: Optional[str] = None
    created_at: datetime = Field(..., alias="createdAt")


def parse_limit(raw: Any) -> int:
    """Requested row cap: default for missing/non-numeric/non-positive, clamped to MAX_LIMIT."""
    number = to_finite_number(raw)
    if number is None or int(number) <= 0:
        return DEFAULT_LIMIT
    return min(int(number), MAX_LIMIT)


def parse_region_filter(raw: Optional[str]) -> Optional[str]:
    """Region filter as given; empty means no filter."""
    return raw if raw else None


def parse_character_id(raw: Any) -> Optional[int]:
    """Integer character id from a path segment, None when not numeric or out of range."""
    return to_bounded_int(raw)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_entry(build: Build, character: Character, player: Player) -> LeaderboardEntry:
    return LeaderboardEntry(
        id=str(build.id),
        cv=build.cv,
        crit_rate=build.crit_rate,
        crit_dmg=build.crit_dmg,
        atk=build.atk,
        spd=build.spd,
        character_id=character.character_id,
        level=character.level,
        eidolon=character.eidolon,
        light_cone_id=character.light_cone_id,
        uid=character.uid,
        region=player.region,
        created_at=_as_utc(build.created_at),
    )


async def get_leaderboard(
    session: AsyncSession,
    limit: int = DEFAULT_LIMIT,
    character_id: Optional[int] = None,
    region: Optional[str] = None,
) -> List[LeaderboardEntry]:
    """Top builds by CV, optionally scoped to one character and/or region."""
    rows = await BuildRepository(session).list_ranked(
        limit=min(max(1, limit), MAX_LIMIT),
        character_id=character_id,
        region=region,
    )
    return [to_entry(build, character, player) for build, character, player in rows]
