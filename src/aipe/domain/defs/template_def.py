"""Character template definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(slots=True)
class CharacterTemplateDef:
    """A named, pre-built progression snapshot used for inspection and testing."""

    id: str
    name: str
    description: str
    snapshot_payload: Mapping[str, Any]
