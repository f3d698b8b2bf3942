"""Build fingerprint: deterministic SHA-256 over canonical JSON."""

from __future__ import annotations

from scoring.build_hash import (
    build_fingerprint_fields,
    make_build_hash,
    stable_json_dumps,
)


def test_stable_json_dumps_sorted_keys() -> None:
    assert stable_json_dumps({"b": 1, "a": 2}) == stable_json_dumps({"a": 2, "b": 1})


def test_hash_is_64_hex_chars() -> None:
    digest = make_build_hash(build_fingerprint_fields("800000001", 1205, 0, 23019))
    assert len(digest) == 64
    int(digest, 16)


def test_same_fields_same_hash_regardless_of_key_order() -> None:
    a = make_build_hash({"uid": "1", "characterId": 1, "eidolon": 0, "lightConeId": 2})
    b = make_build_hash({"lightConeId": 2, "eidolon": 0, "characterId": 1, "uid": "1"})
    assert a == b


def test_changing_any_field_changes_hash() -> None:
    base = build_fingerprint_fields("800000001", 1205, 0, 23019)
    digest = make_build_hash(base)
    for key, value in [("uid", "800000002"), ("characterId", 1206), ("eidolon", 1), ("lightConeId", 0)]:
        changed = dict(base, **{key: value})
        assert make_build_hash(changed) != digest
