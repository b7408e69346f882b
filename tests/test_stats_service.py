from __future__ import annotations

import logging

import pytest

from aipe.data.repositories import TemplatesRepository
from aipe.domain.stat_formula import FormulaOptions
from aipe.services import StatsService
from aipe.services.factories import create_snapshot_from_template
from tests.helpers.snapshot_builders import make_uniform_snapshot


def test_stat_sheet_for_fresh_template() -> None:
    snapshot = create_snapshot_from_template("fresh", TemplatesRepository())
    sheet = StatsService().build_stat_sheet(snapshot)
    assert sheet.name == "FreshRecruit"
    assert sheet.effective.strength == 10.0
    assert sheet.combat.physical_damage == 28
    assert sheet.combat.max_hp == 400
    assert sheet.paragon_unlocked is False
    assert sheet.prestige_available is False


def test_stat_sheet_does_not_mutate_snapshot() -> None:
    snapshot = make_uniform_snapshot(base=150, tier=2, bonus=500, level=120, prestige_level=1)
    before = repr(snapshot)
    service = StatsService()
    first = service.build_stat_sheet(snapshot)
    second = service.build_stat_sheet(snapshot)
    assert repr(snapshot) == before
    assert first == second


def test_infinite_template_stays_finite_and_capped() -> None:
    snapshot = create_snapshot_from_template("infinite", TemplatesRepository())
    sheet = StatsService().build_stat_sheet(snapshot)
    assert sheet.combat.critical_chance <= 75
    assert sheet.combat.dodge_chance <= 50
    assert sheet.effective.constitution > 1000
    assert sheet.prestige_available is False


def test_soft_cap_option_compresses_large_stats() -> None:
    snapshot = create_snapshot_from_template("infinite", TemplatesRepository())
    uncapped = StatsService().build_stat_sheet(snapshot)
    capped = StatsService(options=FormulaOptions(soft_cap_enabled=True)).build_stat_sheet(snapshot)
    assert capped.effective.constitution < uncapped.effective.constitution
    assert capped.effective.constitution > 1000


def test_breakdown_matches_effective_value() -> None:
    snapshot = make_uniform_snapshot(base=100, tier=2, bonus=200, prestige_level=1)
    service = StatsService()
    breakdown = service.get_stat_breakdown(snapshot, "wisdom")
    sheet = service.build_stat_sheet(snapshot)
    assert breakdown.effective_value == sheet.effective.wisdom
    assert breakdown.effective_value == pytest.approx(270.67, abs=0.01)
    assert set(service.get_all_breakdowns(snapshot)) == {
        "strength",
        "dexterity",
        "intelligence",
        "wisdom",
        "constitution",
        "charisma",
    }


def test_breakdown_rejects_unknown_stat() -> None:
    with pytest.raises(ValueError):
        StatsService().get_stat_breakdown(make_uniform_snapshot(), "luck")  # type: ignore[arg-type]


def test_rejected_modification_is_logged(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="aipe.services.stats_service"):
        result = StatsService().validate_modification({"prestige_level": 4})
    assert result.valid is False
    assert "Rejected client stat modification" in caplog.text
