"""Crit value (CV): the single comparable quality number for a build."""

from __future__ import annotations


def compute_cv(cr: float, cd: float) -> float:
    """Return 2 * crit rate % + crit damage %.

    No range checks and no rounding: the result is a pure function of the
    two inputs.
    """
    return 2 * cr + cd
