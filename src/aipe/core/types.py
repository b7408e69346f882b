"""Shared type aliases for the core and domain layers."""
from typing import Literal

StatName = Literal[
    "strength",
    "dexterity",
    "intelligence",
    "wisdom",
    "constitution",
    "charisma",
]
RequestSource = Literal["server", "client"]

STAT_NAMES: tuple[StatName, ...] = (
    "strength",
    "dexterity",
    "intelligence",
    "wisdom",
    "constitution",
    "charisma",
)

__all__ = ["RequestSource", "STAT_NAMES", "StatName"]
