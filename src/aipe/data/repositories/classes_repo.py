"""Classes repository."""
from __future__ import annotations

from typing import Dict

from aipe.data.errors import DataValidationError
from aipe.data.repositories.base import RepositoryBase
from aipe.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads character classes and their starting stat bonuses."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_exact_fields(
                class_data,
                {"name"},
                f"class '{raw_id}'",
                optional_fields={"starting_bonus"},
            )
            starting_bonus = self._require_stat_map(
                class_data.get("starting_bonus", {}), f"class '{raw_id}' starting_bonus"
            )
            if any(amount < 0 for amount in starting_bonus.values()):
                raise DataValidationError(f"class '{raw_id}' starting_bonus cannot be negative.")
            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"class '{raw_id}' name"),
                starting_bonus=starting_bonus,
            )
        return classes
