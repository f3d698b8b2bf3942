"""
Boundary coercion for ingestion payloads.

Client bodies are loosely typed (numbers may arrive as strings, optional
fields may be missing or junk). Everything is turned into an IngestRequest
here or rejected with IngestRejected; nothing unchecked reaches persistence.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_LEVEL = 80
DEFAULT_EIDOLON = 0
DEFAULT_LIGHT_CONE_ID = 0

# Signed 64-bit, the widest INTEGER the store accepts.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

UID_INVALID = "uid_invalid"
RATE_LIMITED = "rate_limited"
CHARACTER_ID_REQUIRED = "character_id_required"
CRIT_STATS_REQUIRED = "crit_stats_required"
CHARACTER_ID_NOT_NUMBER = "character_id_not_number"

_MESSAGES = {
    UID_INVALID: "uid invalid",
    RATE_LIMITED: "too many requests",
    CHARACTER_ID_REQUIRED: "characterId required",
    CRIT_STATS_REQUIRED: "cr/cd required",
    CHARACTER_ID_NOT_NUMBER: "characterId must be number",
}


class IngestRejected(Exception):
    """An ingestion request refused before any write, with a client-facing message."""

    def __init__(self, reason: str, status_code: int = 400) -> None:
        self.reason = reason
        self.status_code = status_code
        self.message = _MESSAGES[reason]
        super().__init__(self.message)


@dataclass(frozen=True)
class BuildStats:
    cr: float
    cd: float
    atk: Optional[float] = None
    spd: Optional[float] = None


@dataclass(frozen=True)
class IngestRequest:
    """Validated ingestion payload."""

    uid: str
    region: Optional[str]
    character_id: int
    level: int
    eidolon: int
    light_cone_id: int
    stats: BuildStats


def to_finite_number(value: Any) -> Optional[float]:
    """Coerce ints, floats and numeric strings to a finite float, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def to_bounded_int(value: Any) -> Optional[int]:
    """Integral finite number within the storable INTEGER range, else None."""
    number = to_finite_number(value)
    if number is None or not number.is_integer():
        return None
    integer = int(number)
    if not INT_MIN <= integer <= INT_MAX:
        return None
    return integer


def coerce_int(value: Any, default: int) -> int:
    """Integer value of a loosely-typed field; default when missing, junk, zero or out of range."""
    number = to_finite_number(value)
    if number is None or number == 0:
        return default
    integer = int(number)
    if not INT_MIN <= integer <= INT_MAX:
        return default
    return integer


def parse_uid(body: Mapping[str, Any]) -> str:
    """Return the stripped uid or raise IngestRejected."""
    uid = body.get("uid")
    if not isinstance(uid, str) or not uid.strip():
        raise IngestRejected(UID_INVALID)
    return uid.strip()


def _parse_character_id(value: Any) -> int:
    if value is None:
        raise IngestRejected(CHARACTER_ID_REQUIRED)
    character_id = to_bounded_int(value)
    if character_id is None:
        raise IngestRejected(CHARACTER_ID_NOT_NUMBER)
    return character_id


def _parse_stats(raw: Any) -> BuildStats:
    if not isinstance(raw, Mapping):
        raise IngestRejected(CRIT_STATS_REQUIRED)
    cr = to_finite_number(raw.get("cr"))
    cd = to_finite_number(raw.get("cd"))
    if cr is None or cd is None:
        raise IngestRejected(CRIT_STATS_REQUIRED)
    return BuildStats(
        cr=cr,
        cd=cd,
        atk=to_finite_number(raw.get("atk")),
        spd=to_finite_number(raw.get("spd")),
    )


def validate_ingest_body(body: Any) -> IngestRequest:
    """Coerce a decoded JSON body into an IngestRequest.

    Checks run in a fixed order so each failure maps to one message:
    uid, characterId presence, crit stats, characterId numeric.
    """
    if not isinstance(body, Mapping):
        body = {}
    uid = parse_uid(body)
    if body.get("characterId") is None:
        raise IngestRejected(CHARACTER_ID_REQUIRED)
    stats = _parse_stats(body.get("stats"))
    character_id = _parse_character_id(body.get("characterId"))
    region = body.get("region")
    return IngestRequest(
        uid=uid,
        region=region if isinstance(region, str) else None,
        character_id=character_id,
        level=coerce_int(body.get("level"), DEFAULT_LEVEL),
        eidolon=coerce_int(body.get("eidolon"), DEFAULT_EIDOLON),
        light_cone_id=coerce_int(body.get("lightConeId"), DEFAULT_LIGHT_CONE_ID),
        stats=stats,
    )
