"""Ingestion body coercion: typed request or a specific rejection."""

from __future__ import annotations

import pytest

from ingestion.validation import (
    CHARACTER_ID_NOT_NUMBER,
    CHARACTER_ID_REQUIRED,
    CRIT_STATS_REQUIRED,
    UID_INVALID,
    IngestRejected,
    INT_MAX,
    coerce_int,
    parse_uid,
    to_bounded_int,
    to_finite_number,
    validate_ingest_body,
)


def _body(**overrides):
    body = {
        "uid": "800000001",
        "characterId": 1205,
        "stats": {"cr": 70.5, "cd": 140.2, "atk": 3500, "spd": 134.2},
    }
    body.update(overrides)
    return body


def _reason(body) -> str:
    with pytest.raises(IngestRejected) as exc_info:
        validate_ingest_body(body)
    return exc_info.value.reason


def test_valid_body_defaults() -> None:
    req = validate_ingest_body(_body())
    assert req.uid == "800000001"
    assert req.character_id == 1205
    assert (req.level, req.eidolon, req.light_cone_id) == (80, 0, 0)
    assert req.stats.cr == 70.5
    assert req.stats.cd == 140.2
    assert req.stats.atk == 3500.0
    assert req.region is None


def test_numeric_strings_are_coerced() -> None:
    req = validate_ingest_body(
        _body(characterId="1205", level="70", eidolon="2", lightConeId="23019",
              stats={"cr": "50", "cd": "100"})
    )
    assert req.character_id == 1205
    assert (req.level, req.eidolon, req.light_cone_id) == (70, 2, 23019)
    assert req.stats.cr == 50.0
    assert req.stats.atk is None


def test_junk_optional_fields_fall_back_to_defaults() -> None:
    req = validate_ingest_body(_body(level="abc", eidolon=None, lightConeId={"x": 1}))
    assert (req.level, req.eidolon, req.light_cone_id) == (80, 0, 0)


def test_non_finite_optional_stats_become_none() -> None:
    req = validate_ingest_body(_body(stats={"cr": 1, "cd": 2, "atk": "NaN", "spd": float("inf")}))
    assert req.stats.atk is None
    assert req.stats.spd is None


def test_missing_uid() -> None:
    assert _reason(_body(uid=None)) == UID_INVALID
    assert _reason(_body(uid="")) == UID_INVALID
    assert _reason(_body(uid=12345)) == UID_INVALID


def test_missing_character_id() -> None:
    body = _body()
    del body["characterId"]
    assert _reason(body) == CHARACTER_ID_REQUIRED


def test_missing_or_non_finite_crit_stats() -> None:
    assert _reason(_body(stats=None)) == CRIT_STATS_REQUIRED
    assert _reason(_body(stats={"cr": 50})) == CRIT_STATS_REQUIRED
    assert _reason(_body(stats={"cr": "nan", "cd": 100})) == CRIT_STATS_REQUIRED
    assert _reason(_body(stats={"cr": 50, "cd": float("inf")})) == CRIT_STATS_REQUIRED


def test_non_numeric_character_id() -> None:
    assert _reason(_body(characterId="abc")) == CHARACTER_ID_NOT_NUMBER
    assert _reason(_body(characterId=12.5)) == CHARACTER_ID_NOT_NUMBER


def test_rejection_messages_are_distinct() -> None:
    messages = {
        IngestRejected(reason).message
        for reason in (UID_INVALID, CHARACTER_ID_REQUIRED, CRIT_STATS_REQUIRED, CHARACTER_ID_NOT_NUMBER)
    }
    assert len(messages) == 4


def test_helpers() -> None:
    assert to_finite_number(True) is None
    assert to_finite_number(" 3.5 ") == 3.5
    assert to_finite_number("") is None
    assert coerce_int(0, 80) == 80
    assert coerce_int("7", 80) == 7


def test_character_id_outside_integer_range() -> None:
    assert _reason(_body(characterId=1e20)) == CHARACTER_ID_NOT_NUMBER
    assert _reason(_body(characterId="-1e20")) == CHARACTER_ID_NOT_NUMBER


def test_out_of_range_optional_ints_fall_back_to_defaults() -> None:
    req = validate_ingest_body(_body(level=1e20, eidolon="-1e30", lightConeId=2**64))
    assert (req.level, req.eidolon, req.light_cone_id) == (80, 0, 0)


def test_to_bounded_int() -> None:
    assert to_bounded_int("1205") == 1205
    assert to_bounded_int(INT_MAX + 1) is None
    assert to_bounded_int(12.5) is None
    assert to_bounded_int(None) is None


def test_uid_is_trimmed() -> None:
    assert parse_uid({"uid": " 800000001 "}) == "800000001"
    assert validate_ingest_body(_body(uid="800000001\n")).uid == "800000001"
