"""Tier, paragon and prestige progression rules."""
from __future__ import annotations

from dataclasses import dataclass

from aipe.domain.stat_formula import BASE_STAT_SOFT_CAP

# Stat points needed on a capped stat before it rolls over into a new tier.
TIER_THRESHOLD = 100
TIER_RESET_BASE = 10
PARAGON_UNLOCK_LEVEL = 100
PRESTIGE_UNLOCK_LEVEL = 500
PRESTIGE_LEVEL_MAX = 10000


@dataclass(frozen=True, slots=True)
class TierProgress:
    should_upgrade: bool
    new_base: int
    tiers_gained: int


def calculate_stat_tier_progress(current_base: int, stat_points: int) -> TierProgress:
    """Resolve spending ``stat_points`` on a stat currently at ``current_base``."""
    if current_base >= BASE_STAT_SOFT_CAP and stat_points >= TIER_THRESHOLD:
        return TierProgress(should_upgrade=True, new_base=TIER_RESET_BASE, tiers_gained=1)
    return TierProgress(
        should_upgrade=False,
        new_base=min(current_base + stat_points, BASE_STAT_SOFT_CAP),
        tiers_gained=0,
    )


def has_paragon_unlocked(level: int) -> bool:
    return level >= PARAGON_UNLOCK_LEVEL


def can_prestige(level: int, prestige_level: int) -> bool:
    """Each block of PRESTIGE_UNLOCK_LEVEL levels allows one more prestige."""
    if prestige_level >= PRESTIGE_LEVEL_MAX:
        return False
    return level >= PRESTIGE_UNLOCK_LEVEL and prestige_level < level // PRESTIGE_UNLOCK_LEVEL
