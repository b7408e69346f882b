"""Character progression snapshot model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from aipe.core.types import STAT_NAMES, StatName

from .stat_line import StatLine


def _default_stat_lines() -> Dict[StatName, StatLine]:
    return {stat: StatLine() for stat in STAT_NAMES}


@dataclass(slots=True)
class CharacterStatsSnapshot:
    """Raw progression data for one character.

    This is the single source of truth for stat math: effective and derived
    values are always recomputed from it and never stored back.
    """

    name: str = "Adventurer"
    race: str = "human"
    class_id: str = "warrior"
    level: int = 1
    prestige_level: int = 0
    paragon_points: int = 0
    stats: Dict[StatName, StatLine] = field(default_factory=_default_stat_lines)
    paragon_distribution: Dict[StatName, int] = field(default_factory=dict)

    def stat(self, stat: StatName) -> StatLine:
        """Return the raw stat line, creating an empty one if it is missing."""
        line = self.stats.get(stat)
        if line is None:
            line = StatLine()
            self.stats[stat] = line
        return line

    def paragon_for(self, stat: StatName) -> int:
        return self.paragon_distribution.get(stat, 0)
