"""Stat sheet service: effective and derived stats for a snapshot."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from aipe.core.types import STAT_NAMES, RequestSource, StatName
from aipe.domain.derived_stats import (
    CombatStats,
    EffectiveStats,
    compute_combat_stats,
    compute_effective_stats,
)
from aipe.domain.entities import CharacterStatsSnapshot, StatLine
from aipe.domain.progression import can_prestige, has_paragon_unlocked
from aipe.domain.stat_formula import DEFAULT_OPTIONS, FormulaOptions, StatBreakdown, build_stat_breakdown
from aipe.domain.stat_validation import ValidationResult, validate_stat_modification

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StatSheet:
    name: str
    level: int
    prestige_level: int
    effective: EffectiveStats
    combat: CombatStats
    paragon_unlocked: bool
    prestige_available: bool


class StatsService:
    """Recompute effective and derived stats on demand from a raw snapshot."""

    def __init__(self, *, options: FormulaOptions = DEFAULT_OPTIONS) -> None:
        self._options = options

    @property
    def options(self) -> FormulaOptions:
        return self._options

    def build_stat_sheet(self, snapshot: CharacterStatsSnapshot) -> StatSheet:
        effective = compute_effective_stats(snapshot, options=self._options)
        combat = compute_combat_stats(
            effective,
            level=snapshot.level,
            prestige_level=snapshot.prestige_level,
        )
        return StatSheet(
            name=snapshot.name,
            level=snapshot.level,
            prestige_level=snapshot.prestige_level,
            effective=effective,
            combat=combat,
            paragon_unlocked=has_paragon_unlocked(snapshot.level),
            prestige_available=can_prestige(snapshot.level, snapshot.prestige_level),
        )

    def get_stat_breakdown(self, snapshot: CharacterStatsSnapshot, stat: StatName) -> StatBreakdown:
        if stat not in STAT_NAMES:
            raise ValueError(f"Unknown stat '{stat}'.")
        line = snapshot.stats.get(stat, StatLine())
        return build_stat_breakdown(
            line.base,
            line.tier,
            line.bonus,
            snapshot.paragon_for(stat),
            snapshot.prestige_level,
            options=self._options,
        )

    def get_all_breakdowns(self, snapshot: CharacterStatsSnapshot) -> dict[StatName, StatBreakdown]:
        return {stat: self.get_stat_breakdown(snapshot, stat) for stat in STAT_NAMES}

    def validate_modification(
        self,
        updates: Mapping[str, object],
        source: RequestSource = "client",
    ) -> ValidationResult:
        result = validate_stat_modification(updates, source)
        if not result.valid:
            logger.warning("Rejected %s stat modification: %s", source, "; ".join(result.errors))
        return result
