"""Runtime entity exports."""

from .snapshot import CharacterStatsSnapshot
from .stat_line import StatLine

__all__ = [
    "CharacterStatsSnapshot",
    "StatLine",
]
