"""Build scoring: crit value and build fingerprint."""

from .build_hash import build_fingerprint_fields, make_build_hash, stable_json_dumps
from .cv import compute_cv

__all__ = [
    "build_fingerprint_fields",
    "compute_cv",
    "make_build_hash",
    "stable_json_dumps",
]
