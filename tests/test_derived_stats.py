from __future__ import annotations

import pytest

from aipe.domain.derived_stats import (
    CRIT_CAP,
    DODGE_CAP,
    EffectiveStats,
    compute_combat_stats,
    compute_effective_stats,
)
from aipe.domain.entities import CharacterStatsSnapshot, StatLine
from aipe.domain.errors import InvalidStatInputError
from tests.helpers.snapshot_builders import make_uniform_snapshot


def _uniform_effective(value: float) -> EffectiveStats:
    return EffectiveStats(
        strength=value,
        dexterity=value,
        intelligence=value,
        wisdom=value,
        constitution=value,
        charisma=value,
    )


def test_fresh_character_combat_stats() -> None:
    combat = compute_combat_stats(_uniform_effective(10.0), level=1)
    assert combat.physical_damage == 28  # 10*2 + 10*0.5 + 1*3
    assert combat.magical_damage == 28
    assert combat.physical_defense == 22  # 10*1.5 + 10*0.5 + 1*2
    assert combat.magical_defense == 22
    assert combat.critical_chance == pytest.approx(5.3)
    assert combat.dodge_chance == pytest.approx(0.31)
    assert combat.max_hp == 400  # 100 + 200 + 50 + 50
    assert combat.max_mp == 320  # 50 + 150 + 20 + 100


def test_secondary_stats_for_fresh_character() -> None:
    combat = compute_combat_stats(_uniform_effective(10.0), level=1)
    assert combat.critical_damage == pytest.approx(151.0)
    assert combat.block_chance == pytest.approx(0.3)
    assert combat.max_stamina == 265  # 100 + 100 + 15 + 50
    assert combat.move_speed == pytest.approx(100.5)
    assert combat.item_find_bonus == pytest.approx(0.5)
    assert combat.power_rating == 70  # 60 + 1*10


def test_damage_values_are_floored() -> None:
    combat = compute_combat_stats(_uniform_effective(10.3), level=0)
    assert combat.physical_damage == 25  # floor(20.6 + 5.15)
    assert isinstance(combat.physical_damage, int)


def test_percentage_stats_are_capped() -> None:
    combat = compute_combat_stats(_uniform_effective(1_000_000.0), level=10_000)
    assert combat.critical_chance == CRIT_CAP
    assert combat.dodge_chance == DODGE_CAP
    assert combat.block_chance == 40
    assert combat.critical_damage == 500
    assert combat.attack_speed == 180
    assert combat.exp_bonus == 500


def test_resource_pools_apply_prestige_a_second_time() -> None:
    snapshot = make_uniform_snapshot(base=10, prestige_level=1)
    effective = compute_effective_stats(snapshot)
    assert effective.strength == pytest.approx(11.0)
    combat = compute_combat_stats(effective, level=1, prestige_level=1)
    assert combat.max_hp == 425 * 2
    assert combat.max_mp == 345 * 2  # floor(50 + 165 + 20 + 110)


def test_effective_stats_use_paragon_distribution_per_stat() -> None:
    snapshot = make_uniform_snapshot(base=10)
    snapshot.paragon_distribution["strength"] = 9
    effective = compute_effective_stats(snapshot)
    assert effective.strength == pytest.approx(20.0)
    assert effective.dexterity == pytest.approx(10.0)


def test_missing_stat_lines_count_as_zero() -> None:
    snapshot = CharacterStatsSnapshot(stats={"strength": StatLine(base=40)})
    effective = compute_effective_stats(snapshot)
    assert effective.strength == 40.0
    assert effective.charisma == 0.0


def test_negative_level_is_rejected() -> None:
    with pytest.raises(InvalidStatInputError):
        compute_combat_stats(_uniform_effective(10.0), level=-1)


def test_overflowing_combat_stats_raise_invalid_input() -> None:
    snapshot = CharacterStatsSnapshot(stats={"constitution": StatLine(base=10, tier=10**306)})
    effective = compute_effective_stats(snapshot)
    assert effective.constitution > 1e307
    with pytest.raises(InvalidStatInputError):
        compute_combat_stats(effective, level=1)


def test_huge_level_raises_invalid_input() -> None:
    with pytest.raises(InvalidStatInputError):
        compute_combat_stats(_uniform_effective(10.0), level=10**400)
