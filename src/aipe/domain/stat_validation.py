"""Server-authoritative validation of raw stat modification requests."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from aipe.core.types import STAT_NAMES, RequestSource
from aipe.domain.progression import PRESTIGE_LEVEL_MAX

SERVER_ONLY_FIELDS = ("prestige_level", "paragon_points", "experience")
BASE_STAT_FIELDS = tuple(f"base_{stat}" for stat in STAT_NAMES)
TIER_FIELDS = tuple(f"{stat}_tier" for stat in STAT_NAMES)
BASE_STAT_RANGE = (1, 100)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...]


def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_stat_modification(
    updates: Mapping[str, object],
    source: RequestSource = "client",
) -> ValidationResult:
    """Check a requested stat update; never mutates anything."""
    errors: list[str] = []

    if source == "client":
        for field_name in SERVER_ONLY_FIELDS:
            if field_name in updates:
                errors.append(f"Client cannot modify {field_name} - server authoritative only")

    low, high = BASE_STAT_RANGE
    for key in BASE_STAT_FIELDS:
        if key in updates:
            value = updates[key]
            if not is_int(value) or not low <= value <= high:
                errors.append(f"{key} must be between {low} and {high}")

    for key in TIER_FIELDS:
        if key in updates:
            value = updates[key]
            if not is_int(value) or value < 0:
                errors.append(f"{key} cannot be negative")

    if "prestige_level" in updates:
        value = updates["prestige_level"]
        if not is_int(value) or not 0 <= value <= PRESTIGE_LEVEL_MAX:
            errors.append(f"Prestige level must be between 0 and {PRESTIGE_LEVEL_MAX}")

    return ValidationResult(valid=not errors, errors=tuple(errors))
