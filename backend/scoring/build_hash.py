"""
Deterministic build fingerprint (versioning metadata stored with each build).
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Mapping


def stable_json_dumps(obj: Any) -> str:
    """Serialize to JSON with sorted keys for deterministic output."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"))


def sha256_hex(text: str) -> str:
    """Return SHA-256 hash of text as hex string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def make_build_hash(record: Mapping[str, Any]) -> str:
    """SHA-256 hex digest of the canonical JSON form of record."""
    return sha256_hex(stable_json_dumps(dict(record)))


def build_fingerprint_fields(
    uid: str, character_id: int, eidolon: int, light_cone_id: int
) -> Dict[str, Any]:
    """Fields that identify a build for fingerprinting."""
    return {
        "uid": uid,
        "characterId": character_id,
        "eidolon": eidolon,
        "lightConeId": light_cone_id,
    }
