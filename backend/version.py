"""
Application version, read from the VERSION file at the repository root.
"""

from __future__ import annotations

import re
from pathlib import Path

_FALLBACK_VERSION = "0.0.0"

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$")


def _version_file_path() -> Path:
    return Path(__file__).resolve().parent.parent / "VERSION"


def get_version() -> str:
    """First line of VERSION, or 0.0.0 when the file is missing or unreadable."""
    path = _version_file_path()
    if not path.is_file():
        return _FALLBACK_VERSION
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError:
        return _FALLBACK_VERSION
    return raw.splitlines()[0].strip() if raw else _FALLBACK_VERSION


def is_semver(s: str) -> bool:
    """True for major.minor.patch with an optional -pre suffix."""
    return bool(s and SEMVER_PATTERN.match(s.strip()))
