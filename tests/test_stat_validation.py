from __future__ import annotations

from aipe.domain.stat_validation import validate_stat_modification


def test_client_cannot_touch_server_only_fields() -> None:
    result = validate_stat_modification({"prestige_level": 1, "paragon_points": 5}, "client")
    assert result.valid is False
    assert any("prestige_level" in error for error in result.errors)
    assert any("paragon_points" in error for error in result.errors)


def test_server_may_set_prestige_within_bounds() -> None:
    assert validate_stat_modification({"prestige_level": 3}, "server").valid is True
    result = validate_stat_modification({"prestige_level": 10001}, "server")
    assert result.valid is False


def test_base_stats_must_be_in_range() -> None:
    assert validate_stat_modification({"base_strength": 100}).valid is True
    assert validate_stat_modification({"base_strength": 0}).valid is False
    assert validate_stat_modification({"base_wisdom": 101}).valid is False
    assert validate_stat_modification({"base_wisdom": "50"}).valid is False


def test_tiers_cannot_be_negative() -> None:
    assert validate_stat_modification({"charisma_tier": 0}).valid is True
    result = validate_stat_modification({"charisma_tier": -1})
    assert result.valid is False
    assert result.errors == ("charisma_tier cannot be negative",)


def test_unrelated_fields_pass_through() -> None:
    result = validate_stat_modification({"name": "Renamed"})
    assert result.valid is True
    assert result.errors == ()
