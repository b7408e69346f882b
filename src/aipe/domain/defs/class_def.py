"""Character class definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from aipe.core.types import StatName


@dataclass(slots=True)
class ClassDef:
    """Defines the starting stat bonus a class adds on top of the shared baseline."""

    id: str
    name: str
    starting_bonus: Dict[StatName, int] = field(default_factory=dict)
