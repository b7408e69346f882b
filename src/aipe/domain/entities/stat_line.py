"""Raw per-stat progression components."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StatLine:
    """Stores the raw components of one primary stat (no formula applied yet)."""

    base: int = 0
    tier: int = 0
    bonus: int = 0
