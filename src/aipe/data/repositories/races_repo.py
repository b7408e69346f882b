"""Races repository."""
from __future__ import annotations

from typing import Dict

from aipe.data.repositories.base import RepositoryBase
from aipe.domain.defs import RaceDef


class RacesRepository(RepositoryBase[RaceDef]):
    """Loads playable races and their base stat modifiers (may be negative)."""

    def __init__(self, base_path=None) -> None:
        super().__init__("races.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RaceDef]:
        races: Dict[str, RaceDef] = {}
        for raw_id, payload in raw.items():
            race_data = self._require_mapping(payload, f"race '{raw_id}'")
            self._assert_exact_fields(
                race_data,
                {"name"},
                f"race '{raw_id}'",
                optional_fields={"modifiers"},
            )
            races[raw_id] = RaceDef(
                id=raw_id,
                name=self._require_str(race_data["name"], f"race '{raw_id}' name"),
                modifiers=self._require_stat_map(
                    race_data.get("modifiers", {}), f"race '{raw_id}' modifiers"
                ),
            )
        return races
