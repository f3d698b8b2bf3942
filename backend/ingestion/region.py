"""
Region resolution: normalize an explicit region code or infer one from the
first character of a uid.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

UID_REGION_MAP: Dict[str, str] = {
    "1": "CN",
    "6": "NA",
    "7": "EU",
    "8": "ASIA",
    "9": "TW",
}


def normalize_region(region: Any) -> Optional[str]:
    """Trim and upper-case; None for absent, non-string or blank input."""
    if not isinstance(region, str):
        return None
    trimmed = region.strip().upper()
    return trimmed or None


def infer_region_from_uid(uid: str) -> Optional[str]:
    """Map the uid's leading character to a region, None when unknown."""
    stripped = (uid or "").strip()
    if not stripped:
        return None
    return UID_REGION_MAP.get(stripped[0])


def resolve_region(region: Any, uid: str) -> Optional[str]:
    """Explicit region wins, then inference from uid, else None."""
    return normalize_region(region) or infer_region_from_uid(uid)
