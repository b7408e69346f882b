"""Progression service: the only place raw snapshots are mutated."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from aipe.core.types import STAT_NAMES
from aipe.domain.entities import CharacterStatsSnapshot
from aipe.domain.progression import (
    calculate_stat_tier_progress,
    can_prestige,
    has_paragon_unlocked,
)
from aipe.domain.stat_validation import is_int
from aipe.services.errors import ProgressionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProgressionSummary:
    level: int
    prestige_level: int
    paragon_points_available: int
    paragon_points_distributed: int
    paragon_unlocked: bool
    prestige_available: bool


@dataclass(frozen=True, slots=True)
class ProgressionResult:
    success: bool
    message: str
    summary: ProgressionSummary


class ProgressionService:
    """Apply leveling, gear, tier-up, paragon and prestige events to a snapshot."""

    def get_summary(self, snapshot: CharacterStatsSnapshot) -> ProgressionSummary:
        return ProgressionSummary(
            level=snapshot.level,
            prestige_level=snapshot.prestige_level,
            paragon_points_available=max(0, snapshot.paragon_points),
            paragon_points_distributed=sum(snapshot.paragon_distribution.values()),
            paragon_unlocked=has_paragon_unlocked(snapshot.level),
            prestige_available=can_prestige(snapshot.level, snapshot.prestige_level),
        )

    def gain_levels(self, snapshot: CharacterStatsSnapshot, levels: int = 1) -> ProgressionResult:
        self._require_snapshot(snapshot)
        if not is_int(levels):
            return self._fail(snapshot, "Level gain must be a whole number.")
        if levels <= 0:
            return self._fail(snapshot, "Level gain must be at least 1.")
        snapshot.level += levels
        logger.info("%s reached level %d", snapshot.name, snapshot.level)
        return self._ok(snapshot, f"Reached level {snapshot.level}.")

    def allocate_base_points(self, snapshot: CharacterStatsSnapshot, stat: str, points: int) -> ProgressionResult:
        """Spend stat points on a base stat, rolling a capped stat into a new tier."""
        self._require_snapshot(snapshot)
        if stat not in STAT_NAMES:
            return self._fail(snapshot, "Invalid stat selection.")
        if not is_int(points):
            return self._fail(snapshot, "Stat points must be a whole number.")
        if points <= 0:
            return self._fail(snapshot, "Stat points must be at least 1.")
        line = snapshot.stat(stat)  # type: ignore[arg-type]
        progress = calculate_stat_tier_progress(line.base, points)
        line.base = progress.new_base
        if progress.should_upgrade:
            line.tier += progress.tiers_gained
            logger.info("%s %s advanced to tier %d", snapshot.name, stat, line.tier)
            return self._ok(snapshot, f"{stat} advanced to tier {line.tier}.")
        return self._ok(snapshot, f"{stat} base increased to {line.base}.")

    def adjust_gear_bonus(self, snapshot: CharacterStatsSnapshot, stat: str, delta: int) -> ProgressionResult:
        """Apply an equip (positive) or unequip (negative) bonus change."""
        self._require_snapshot(snapshot)
        if stat not in STAT_NAMES:
            return self._fail(snapshot, "Invalid stat selection.")
        if not is_int(delta):
            return self._fail(snapshot, "Bonus change must be a whole number.")
        line = snapshot.stat(stat)  # type: ignore[arg-type]
        if line.bonus + delta < 0:
            return self._fail(snapshot, f"{stat} bonus cannot drop below 0.")
        line.bonus += delta
        return self._ok(snapshot, f"{stat} bonus is now {line.bonus}.")

    def grant_paragon_points(self, snapshot: CharacterStatsSnapshot, amount: int) -> ProgressionResult:
        self._require_snapshot(snapshot)
        if not has_paragon_unlocked(snapshot.level):
            return self._fail(snapshot, "Paragon system is locked.")
        if not is_int(amount):
            return self._fail(snapshot, "Grant amount must be a whole number.")
        if amount <= 0:
            return self._fail(snapshot, "Grant amount must be at least 1.")
        snapshot.paragon_points = max(0, snapshot.paragon_points) + amount
        return self._ok(snapshot, f"Granted {amount} paragon points.")

    def distribute_paragon_points(
        self,
        snapshot: CharacterStatsSnapshot,
        stat: str,
        amount: int,
    ) -> ProgressionResult:
        self._require_snapshot(snapshot)
        if stat not in STAT_NAMES:
            return self._fail(snapshot, "Invalid stat selection.")
        if not has_paragon_unlocked(snapshot.level):
            return self._fail(snapshot, "Paragon system is locked.")
        if not is_int(amount):
            return self._fail(snapshot, "Paragon amount must be a whole number.")
        if amount <= 0:
            return self._fail(snapshot, "Paragon amount must be at least 1.")
        if amount > snapshot.paragon_points:
            return self._fail(snapshot, "Not enough paragon points available.")
        snapshot.paragon_points -= amount
        snapshot.paragon_distribution[stat] = snapshot.paragon_for(stat) + amount  # type: ignore[index]
        return self._ok(
            snapshot,
            f"{stat} paragon increased to {snapshot.paragon_distribution[stat]}.",  # type: ignore[index]
        )

    def prestige(self, snapshot: CharacterStatsSnapshot) -> ProgressionResult:
        self._require_snapshot(snapshot)
        if not can_prestige(snapshot.level, snapshot.prestige_level):
            return self._fail(snapshot, "Prestige is not available yet.")
        snapshot.prestige_level += 1
        logger.info("%s prestiged to %d", snapshot.name, snapshot.prestige_level)
        return self._ok(snapshot, f"Prestige level is now {snapshot.prestige_level}.")

    def _ok(self, snapshot: CharacterStatsSnapshot, message: str) -> ProgressionResult:
        return ProgressionResult(success=True, message=message, summary=self.get_summary(snapshot))

    def _fail(self, snapshot: CharacterStatsSnapshot, message: str) -> ProgressionResult:
        return ProgressionResult(success=False, message=message, summary=self.get_summary(snapshot))

    @staticmethod
    def _require_snapshot(snapshot: CharacterStatsSnapshot) -> None:
        if not isinstance(snapshot, CharacterStatsSnapshot):
            raise ProgressionError("A character snapshot is required.")
