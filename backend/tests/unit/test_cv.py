"""CV score: 2 * crit rate + crit damage, no rounding."""

from __future__ import annotations

import pytest

from scoring.cv import compute_cv


def test_compute_cv_examples() -> None:
    assert compute_cv(50, 100) == 200
    assert compute_cv(0, 0) == 0
    assert compute_cv(35.5, 89.1) == pytest.approx(160.1, abs=1e-9)


def test_compute_cv_matches_formula_exactly() -> None:
    for cr, cd in [(70.2, 140.8), (5.0, 50.0), (100.0, 300.5)]:
        assert compute_cv(cr, cd) == 2 * cr + cd


def test_compute_cv_passes_through_out_of_range_values() -> None:
    assert compute_cv(-10, 5) == -15
    assert compute_cv(1e6, 1e6) == 3e6


def test_compute_cv_is_idempotent() -> None:
    assert compute_cv(62.3, 124.9) == compute_cv(62.3, 124.9)
