"""Region normalization and uid-prefix inference."""

from __future__ import annotations

from ingestion.region import infer_region_from_uid, normalize_region, resolve_region


def test_normalize_region() -> None:
    assert normalize_region("na") == "NA"
    assert normalize_region("  eu ") == "EU"
    assert normalize_region("") is None
    assert normalize_region("   ") is None
    assert normalize_region(None) is None
    assert normalize_region(7) is None


def test_infer_region_from_uid() -> None:
    assert infer_region_from_uid("100000000") == "CN"
    assert infer_region_from_uid("600000000") == "NA"
    assert infer_region_from_uid("700000000") == "EU"
    assert infer_region_from_uid("800000000") == "ASIA"
    assert infer_region_from_uid("900000000") == "TW"
    assert infer_region_from_uid("500000000") is None
    assert infer_region_from_uid("") is None


def test_resolve_region_explicit_wins() -> None:
    assert resolve_region("na", "800000000") == "NA"


def test_resolve_region_falls_back_to_inference() -> None:
    assert resolve_region(None, "800000000") == "ASIA"
    assert resolve_region("", "800000000") == "ASIA"
    assert resolve_region("  ", "700000000") == "EU"


def test_resolve_region_unknown() -> None:
    assert resolve_region(None, "500000000") is None
