"""Effective stat formula for infinite progression."""
from __future__ import annotations

import math
from dataclasses import dataclass

from aipe.domain.errors import InvalidStatInputError

BASE_STAT_MIN = 0
BASE_STAT_SOFT_CAP = 100
TIER_POINTS = 50
GEAR_BONUS_WEIGHT = 20
PARAGON_BONUS_WEIGHT = 10
PRESTIGE_MULTIPLIER_PER_LEVEL = 0.1
# Optional log-scaled soft cap above this value (disabled unless requested).
EFFECTIVE_SOFT_CAP = 1000
EFFECTIVE_SOFT_CAP_WEIGHT = 100


@dataclass(frozen=True, slots=True)
class FormulaOptions:
    soft_cap_enabled: bool = False


DEFAULT_OPTIONS = FormulaOptions()


@dataclass(frozen=True, slots=True)
class StatBreakdown:
    base: int
    tier_bonus: int
    gear_bonus: float
    paragon_bonus: float
    prestige_multiplier: float
    pre_multiplier: float
    raw_value: float
    effective_value: float
    soft_capped: bool
    formula: str


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStatInputError(f"{name} must be an integer, got {value!r}.")
    return value


def _require_non_negative_int(value: object, name: str) -> int:
    number = _require_int(value, name)
    if number < 0:
        raise InvalidStatInputError(f"{name} cannot be negative (got {number}).")
    return number


def clamp_base(base: int) -> int:
    """Clamp a stored base stat into the soft-capped range."""
    return max(BASE_STAT_MIN, min(base, BASE_STAT_SOFT_CAP))


def tier_bonus(tier: int) -> int:
    return tier * TIER_POINTS


def log_bonus(value: int, weight: int) -> float:
    """Return ``log10(value + 1) * weight``, or 0 when value is 0.

    ``math.log10`` accepts arbitrarily large ints, so late-game bonus totals
    never go through a lossy float conversion before the log.
    """
    if value <= 0:
        return 0.0
    return math.log10(value + 1) * weight


def prestige_multiplier(prestige_level: int) -> float:
    return 1 + prestige_level * PRESTIGE_MULTIPLIER_PER_LEVEL


def apply_soft_cap(raw_value: float) -> float:
    if raw_value <= EFFECTIVE_SOFT_CAP:
        return raw_value
    return EFFECTIVE_SOFT_CAP + math.log10(raw_value - (EFFECTIVE_SOFT_CAP - 1)) * EFFECTIVE_SOFT_CAP_WEIGHT


def build_stat_breakdown(
    base: int,
    tier: int,
    bonus: int,
    paragon_points: int = 0,
    prestige_level: int = 0,
    *,
    options: FormulaOptions = DEFAULT_OPTIONS,
) -> StatBreakdown:
    """Compute every term of the effective stat formula for UI transparency."""
    base = _require_int(base, "base")
    tier = _require_non_negative_int(tier, "tier")
    bonus = _require_non_negative_int(bonus, "bonus")
    paragon_points = _require_non_negative_int(paragon_points, "paragon_points")
    prestige_level = _require_non_negative_int(prestige_level, "prestige_level")

    capped_base = clamp_base(base)
    tier_points = tier_bonus(tier)
    gear = log_bonus(bonus, GEAR_BONUS_WEIGHT)
    paragon = log_bonus(paragon_points, PARAGON_BONUS_WEIGHT)
    multiplier = prestige_multiplier(prestige_level)
    try:
        pre_multiplier = capped_base + tier_points + gear + paragon
        raw_value = pre_multiplier * multiplier
    except OverflowError as exc:
        raise InvalidStatInputError("Effective stat is too large to represent.") from exc
    if not math.isfinite(raw_value):
        raise InvalidStatInputError("Effective stat overflowed to a non-finite value.")
    effective = apply_soft_cap(raw_value) if options.soft_cap_enabled else raw_value
    formula = (
        f"({capped_base} + {tier_points} + {gear:.1f} + {paragon:.1f}) x {multiplier:g}"
        f" = {raw_value:.1f}"
    )
    return StatBreakdown(
        base=capped_base,
        tier_bonus=tier_points,
        gear_bonus=gear,
        paragon_bonus=paragon,
        prestige_multiplier=multiplier,
        pre_multiplier=pre_multiplier,
        raw_value=raw_value,
        effective_value=effective,
        soft_capped=effective != raw_value,
        formula=formula,
    )


def calculate_effective_stat(
    base: int,
    tier: int,
    bonus: int,
    paragon_points: int = 0,
    prestige_level: int = 0,
    *,
    options: FormulaOptions = DEFAULT_OPTIONS,
) -> float:
    """Return the effective value of one primary stat."""
    return build_stat_breakdown(
        base,
        tier,
        bonus,
        paragon_points,
        prestige_level,
        options=options,
    ).effective_value
