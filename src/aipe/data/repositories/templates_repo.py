"""Character templates repository with reference validation."""
from __future__ import annotations

from typing import Dict

from aipe.data.errors import DataReferenceError
from aipe.data.repositories.base import RepositoryBase
from aipe.data.repositories.classes_repo import ClassesRepository
from aipe.data.repositories.races_repo import RacesRepository
from aipe.data.snapshot_codec import decode_snapshot
from aipe.domain.defs import CharacterTemplateDef


class TemplatesRepository(RepositoryBase[CharacterTemplateDef]):
    """Loads template snapshots and ensures their class and race exist."""

    def __init__(
        self,
        classes_repo: ClassesRepository | None = None,
        races_repo: RacesRepository | None = None,
        base_path=None,
    ) -> None:
        super().__init__("templates.json", base_path)
        self._classes_repo = classes_repo or ClassesRepository(base_path=base_path)
        self._races_repo = races_repo or RacesRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CharacterTemplateDef]:
        class_ids = {class_def.id for class_def in self._classes_repo.all()}
        race_ids = {race_def.id for race_def in self._races_repo.all()}

        templates: Dict[str, CharacterTemplateDef] = {}
        for raw_id, payload in raw.items():
            template_data = self._require_mapping(payload, f"template '{raw_id}'")
            self._assert_exact_fields(
                template_data,
                {"name", "description", "snapshot"},
                f"template '{raw_id}'",
            )
            snapshot_payload = self._require_mapping(
                template_data["snapshot"], f"template '{raw_id}' snapshot"
            )
            # Decode once up front so bad templates fail at load time.
            snapshot = decode_snapshot(snapshot_payload, f"template '{raw_id}' snapshot")
            if snapshot.class_id not in class_ids:
                raise DataReferenceError(
                    f"template '{raw_id}' references missing class '{snapshot.class_id}'."
                )
            if snapshot.race not in race_ids:
                raise DataReferenceError(
                    f"template '{raw_id}' references missing race '{snapshot.race}'."
                )
            templates[raw_id] = CharacterTemplateDef(
                id=raw_id,
                name=self._require_str(template_data["name"], f"template '{raw_id}' name"),
                description=self._require_str(
                    template_data["description"], f"template '{raw_id}' description"
                ),
                snapshot_payload=snapshot_payload,
            )
        return templates
