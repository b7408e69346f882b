"""Race definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from aipe.core.types import StatName


@dataclass(slots=True)
class RaceDef:
    """Defines flat base stat modifiers applied at character creation."""

    id: str
    name: str
    modifiers: Dict[StatName, int] = field(default_factory=dict)
