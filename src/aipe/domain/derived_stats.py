"""Derived combat stat helpers built on top of effective primary stats."""
from __future__ import annotations

import math
from dataclasses import dataclass

from aipe.core.types import STAT_NAMES, StatName
from aipe.domain.entities import CharacterStatsSnapshot, StatLine
from aipe.domain.errors import InvalidStatInputError
from aipe.domain.stat_formula import (
    DEFAULT_OPTIONS,
    FormulaOptions,
    calculate_effective_stat,
    prestige_multiplier,
)

CRIT_BASE = 5
CRIT_CAP = 75
DODGE_CAP = 50
BLOCK_CAP = 40
CRIT_DAMAGE_BASE = 150
CRIT_DAMAGE_BONUS_CAP = 350
HP_REGEN_CAP = 100
MP_REGEN_CAP = 50
STAMINA_REGEN_CAP = 100
MOVE_SPEED_BONUS_CAP = 100
ACTION_SPEED_BONUS_CAP = 80
ITEM_FIND_CAP = 200
EXP_BONUS_CAP = 500
POWER_PER_LEVEL = 10
POWER_PER_PRESTIGE = 1000


@dataclass(frozen=True, slots=True)
class EffectiveStats:
    strength: float
    dexterity: float
    intelligence: float
    wisdom: float
    constitution: float
    charisma: float

    def get(self, stat: StatName) -> float:
        return getattr(self, stat)

    def total(self) -> float:
        return sum(self.get(stat) for stat in STAT_NAMES)


@dataclass(frozen=True, slots=True)
class CombatStats:
    """Secondary stats derived from effective stats, level and prestige.

    Resource pools (max_hp, max_mp, max_stamina) multiply by
    ``prestige_level + 1`` on top of the prestige factor already inside the
    effective stats.
    """

    physical_damage: int
    magical_damage: int
    physical_defense: int
    magical_defense: int
    critical_chance: float
    dodge_chance: float
    max_hp: int
    max_mp: int
    critical_damage: float
    block_chance: float
    max_stamina: int
    hp_regen: float
    mp_regen: float
    stamina_regen: float
    move_speed: float
    attack_speed: float
    cast_speed: float
    item_find_bonus: float
    exp_bonus: float
    power_rating: int


def compute_effective_stats(
    snapshot: CharacterStatsSnapshot,
    *,
    options: FormulaOptions = DEFAULT_OPTIONS,
) -> EffectiveStats:
    values: dict[str, float] = {}
    for stat in STAT_NAMES:
        line = snapshot.stats.get(stat, StatLine())
        values[stat] = calculate_effective_stat(
            line.base,
            line.tier,
            line.bonus,
            snapshot.paragon_for(stat),
            snapshot.prestige_level,
            options=options,
        )
    return EffectiveStats(**values)


def _floor_finite(name: str, value: float) -> int:
    if not math.isfinite(value):
        raise InvalidStatInputError(f"{name} is too large to represent.")
    return math.floor(value)


def compute_combat_stats(effective: EffectiveStats, *, level: int, prestige_level: int = 0) -> CombatStats:
    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise InvalidStatInputError(f"level must be a non-negative integer, got {level!r}.")
    if isinstance(prestige_level, bool) or not isinstance(prestige_level, int) or prestige_level < 0:
        raise InvalidStatInputError(
            f"prestige_level must be a non-negative integer, got {prestige_level!r}."
        )
    try:
        return _build_combat_stats(effective, level, prestige_level)
    except OverflowError as exc:
        raise InvalidStatInputError("Combat stats are too large to represent.") from exc


def _build_combat_stats(effective: EffectiveStats, level: int, prestige_level: int) -> CombatStats:
    strength = effective.strength
    dexterity = effective.dexterity
    intelligence = effective.intelligence
    wisdom = effective.wisdom
    constitution = effective.constitution
    charisma = effective.charisma
    pool_multiplier = prestige_level + 1

    return CombatStats(
        physical_damage=_floor_finite("physical_damage", strength * 2 + dexterity * 0.5 + level * 3),
        magical_damage=_floor_finite("magical_damage", intelligence * 2 + wisdom * 0.5 + level * 3),
        physical_defense=_floor_finite("physical_defense", constitution * 1.5 + strength * 0.5 + level * 2),
        magical_defense=_floor_finite("magical_defense", wisdom * 1.5 + intelligence * 0.5 + level * 2),
        critical_chance=min(CRIT_BASE + dexterity * 0.02 + intelligence * 0.01, CRIT_CAP),
        dodge_chance=min(dexterity * 0.03 + level * 0.01, DODGE_CAP),
        max_hp=_floor_finite("max_hp", 100 + constitution * 20 + level * 50 + strength * 5) * pool_multiplier,
        max_mp=_floor_finite("max_mp", 50 + intelligence * 15 + level * 20 + wisdom * 10) * pool_multiplier,
        critical_damage=CRIT_DAMAGE_BASE + min(strength * 0.1, CRIT_DAMAGE_BONUS_CAP),
        block_chance=min(strength * 0.02 + constitution * 0.01, BLOCK_CAP),
        max_stamina=_floor_finite(
            "max_stamina", 100 + constitution * 10 + level * 15 + dexterity * 5
        )
        * pool_multiplier,
        hp_regen=min(1 + constitution * 0.02 + level * 0.01, HP_REGEN_CAP),
        mp_regen=min(1 + wisdom * 0.03 + intelligence * 0.01, MP_REGEN_CAP),
        stamina_regen=min(2 + constitution * 0.02 + dexterity * 0.01, STAMINA_REGEN_CAP),
        move_speed=100 + min(dexterity * 0.05, MOVE_SPEED_BONUS_CAP),
        attack_speed=100 + min(dexterity * 0.03, ACTION_SPEED_BONUS_CAP),
        cast_speed=100 + min(intelligence * 0.03, ACTION_SPEED_BONUS_CAP),
        item_find_bonus=min(charisma * 0.05, ITEM_FIND_CAP),
        exp_bonus=min((wisdom * 0.03 + charisma * 0.02) * prestige_multiplier(prestige_level), EXP_BONUS_CAP),
        power_rating=_floor_finite(
            "power_rating",
            effective.total() + level * POWER_PER_LEVEL + prestige_level * POWER_PER_PRESTIGE,
        ),
    )
