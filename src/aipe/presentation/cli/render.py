"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from aipe.core.types import STAT_NAMES
from aipe.domain.stat_formula import StatBreakdown
from aipe.services.stats_service import StatSheet

_LABEL_WIDTH = 18


def debug_enabled() -> bool:
    """Return True only when AIPE_DEBUG is explicitly set to '1'."""
    return os.getenv("AIPE_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def _row(label: str, value: str) -> str:
    return f"{label + ':':<{_LABEL_WIDTH}} {value}"


def format_stat_sheet(sheet: StatSheet, *, decimal_places: int = 1) -> list[str]:
    """Return the printable lines of a stat sheet."""
    combat = sheet.combat
    lines = [
        f"{sheet.name} (Lvl {sheet.level}, Prestige {sheet.prestige_level})",
        "",
        "Effective Stats",
    ]
    for stat in STAT_NAMES:
        lines.append(_row(stat.capitalize(), f"{sheet.effective.get(stat):.{decimal_places}f}"))
    lines.extend(
        [
            "",
            "Combat Stats",
            _row("Physical Damage", str(combat.physical_damage)),
            _row("Magical Damage", str(combat.magical_damage)),
            _row("Physical Defense", str(combat.physical_defense)),
            _row("Magical Defense", str(combat.magical_defense)),
            _row("Critical Chance", f"{combat.critical_chance:.2f}%"),
            _row("Critical Damage", f"{combat.critical_damage:.{decimal_places}f}%"),
            _row("Dodge Chance", f"{combat.dodge_chance:.2f}%"),
            _row("Block Chance", f"{combat.block_chance:.2f}%"),
            "",
            "Resources",
            _row("Max HP", str(combat.max_hp)),
            _row("Max MP", str(combat.max_mp)),
            _row("Max Stamina", str(combat.max_stamina)),
            _row("HP Regen", f"{combat.hp_regen:.{decimal_places}f}/s"),
            _row("MP Regen", f"{combat.mp_regen:.{decimal_places}f}/s"),
            _row("Stamina Regen", f"{combat.stamina_regen:.{decimal_places}f}/s"),
            "",
            "Utility",
            _row("Move Speed", f"{combat.move_speed:.0f}%"),
            _row("Attack Speed", f"{combat.attack_speed:.0f}%"),
            _row("Cast Speed", f"{combat.cast_speed:.0f}%"),
            _row("Item Find", f"{combat.item_find_bonus:.0f}%"),
            _row("Exp Bonus", f"{combat.exp_bonus:.0f}%"),
            _row("Power Rating", str(combat.power_rating)),
            "",
            _row("Paragon", "unlocked" if sheet.paragon_unlocked else "locked"),
            _row("Prestige", "available" if sheet.prestige_available else "not available"),
        ]
    )
    return lines


def format_breakdown(stat: str, breakdown: StatBreakdown, *, decimal_places: int = 1) -> list[str]:
    lines = [
        _row("Base Contribution", f"{breakdown.base} points"),
        _row("Tier Bonus", f"{breakdown.tier_bonus} points"),
        _row("Gear Bonus", f"{breakdown.gear_bonus:.{decimal_places}f} points"),
        _row("Paragon Bonus", f"{breakdown.paragon_bonus:.{decimal_places}f} points"),
        _row("Prestige", f"{breakdown.prestige_multiplier:.1f}x"),
        _row("Effective", f"{breakdown.effective_value:.{decimal_places}f}"),
    ]
    if breakdown.soft_capped:
        lines.append(_row("Soft Cap", f"raw {breakdown.raw_value:.{decimal_places}f} compressed"))
    if debug_enabled():
        lines.append(f"[{stat}] {breakdown.formula}")
    return lines


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
