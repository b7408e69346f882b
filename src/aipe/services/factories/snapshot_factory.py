"""Factory for creating progression snapshots from definitions."""
from __future__ import annotations

import logging

from aipe.core.types import STAT_NAMES
from aipe.data.repositories import ClassesRepository, RacesRepository, TemplatesRepository
from aipe.data.snapshot_codec import decode_snapshot
from aipe.domain.entities import CharacterStatsSnapshot, StatLine
from aipe.domain.stat_formula import BASE_STAT_SOFT_CAP
from aipe.services.errors import FactoryError

STARTING_BASE_STAT = 10

logger = logging.getLogger(__name__)


def create_snapshot_for_new_character(
    name: str,
    class_id: str,
    race_id: str,
    classes_repo: ClassesRepository,
    races_repo: RacesRepository,
) -> CharacterStatsSnapshot:
    """Build a level 1 snapshot: shared baseline + class bonus + race modifiers."""
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc

    try:
        race_def = races_repo.get(race_id)
    except KeyError as exc:
        raise FactoryError(f"Race '{race_id}' not found.") from exc

    stats = {}
    for stat in STAT_NAMES:
        base = STARTING_BASE_STAT + class_def.starting_bonus.get(stat, 0)
        base += race_def.modifiers.get(stat, 0)
        stats[stat] = StatLine(base=max(1, min(base, BASE_STAT_SOFT_CAP)))

    logger.info("Created snapshot for %s (%s %s)", name, race_id, class_id)
    return CharacterStatsSnapshot(
        name=name,
        race=race_id,
        class_id=class_id,
        level=1,
        stats=stats,
    )


def create_snapshot_from_template(
    template_id: str,
    templates_repo: TemplatesRepository,
) -> CharacterStatsSnapshot:
    """Return a fresh copy of a template snapshot; callers may mutate it freely."""
    try:
        template = templates_repo.get(template_id)
    except KeyError as exc:
        raise FactoryError(f"Template '{template_id}' not found.") from exc
    return decode_snapshot(template.snapshot_payload, f"template '{template_id}' snapshot")
