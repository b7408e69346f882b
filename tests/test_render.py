from __future__ import annotations

from aipe.domain.stat_formula import FormulaOptions
from aipe.presentation.cli.render import format_breakdown, format_stat_sheet, render_menu
from aipe.services import StatsService
from tests.helpers.snapshot_builders import make_uniform_snapshot


def test_stat_sheet_lines_include_core_values() -> None:
    sheet = StatsService().build_stat_sheet(make_uniform_snapshot())
    lines = format_stat_sheet(sheet, decimal_places=2)
    assert lines[0] == "Tester (Lvl 1, Prestige 0)"
    assert any(line.startswith("Strength:") and line.endswith("10.00") for line in lines)
    assert any(line.startswith("Max HP:") and line.endswith("400") for line in lines)
    assert any(line.startswith("Critical Chance:") and line.endswith("5.30%") for line in lines)


def test_breakdown_hides_formula_without_debug(monkeypatch) -> None:
    monkeypatch.delenv("AIPE_DEBUG", raising=False)
    breakdown = StatsService().get_stat_breakdown(make_uniform_snapshot(), "strength")
    lines = format_breakdown("strength", breakdown)
    assert all(not line.startswith("[strength]") for line in lines)


def test_breakdown_shows_formula_with_debug(monkeypatch) -> None:
    monkeypatch.setenv("AIPE_DEBUG", "1")
    breakdown = StatsService().get_stat_breakdown(make_uniform_snapshot(), "strength")
    lines = format_breakdown("strength", breakdown)
    assert lines[-1].startswith("[strength] (10 + 0 + 0.0 + 0.0) x 1")


def test_breakdown_reports_soft_cap(monkeypatch) -> None:
    monkeypatch.delenv("AIPE_DEBUG", raising=False)
    service = StatsService(options=FormulaOptions(soft_cap_enabled=True))
    breakdown = service.get_stat_breakdown(make_uniform_snapshot(base=100, tier=40), "strength")
    lines = format_breakdown("strength", breakdown)
    assert any(line.startswith("Soft Cap:") for line in lines)


def test_render_menu_numbers_options(capsys) -> None:
    render_menu("Main Menu", ["First", "Second"])
    output = capsys.readouterr().out
    assert "=== Main Menu ===" in output
    assert "1. First" in output
    assert "2. Second" in output
