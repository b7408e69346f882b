"""JSON codec for character progression snapshots.

Bonus and paragon amounts are unbounded integers, so they are written as
decimal strings to survive JSON consumers that parse numbers as doubles.
Plain JSON integers are accepted on read.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from aipe.core.types import STAT_NAMES, StatName
from aipe.data.errors import DataValidationError
from aipe.domain.entities import CharacterStatsSnapshot, StatLine

SnapshotPayload = Dict[str, Any]

_SNAPSHOT_FIELDS = {
    "name",
    "race",
    "class_id",
    "level",
    "prestige_level",
    "paragon_points",
    "stats",
    "paragon_distribution",
}
_STAT_LINE_FIELDS = {"base", "tier", "bonus"}


def encode_snapshot(snapshot: CharacterStatsSnapshot) -> SnapshotPayload:
    """Return a JSON-serializable payload for a snapshot."""
    stats: Dict[str, Dict[str, Any]] = {}
    for stat in STAT_NAMES:
        line = snapshot.stat(stat)
        stats[stat] = {"base": line.base, "tier": line.tier, "bonus": str(line.bonus)}
    return {
        "name": snapshot.name,
        "race": snapshot.race,
        "class_id": snapshot.class_id,
        "level": snapshot.level,
        "prestige_level": snapshot.prestige_level,
        "paragon_points": str(snapshot.paragon_points),
        "stats": stats,
        "paragon_distribution": {
            stat: str(points)
            for stat, points in sorted(snapshot.paragon_distribution.items())
            if points
        },
    }


def decode_snapshot(payload: object, context: str = "snapshot") -> CharacterStatsSnapshot:
    """Rebuild a snapshot from a payload, raising DataValidationError on bad data."""
    data = _require_mapping(payload, context)
    unknown = set(data.keys()) - _SNAPSHOT_FIELDS
    if unknown:
        raise DataValidationError(f"{context} has unknown fields: {sorted(unknown)}.")

    snapshot = CharacterStatsSnapshot()
    if "name" in data:
        snapshot.name = _require_str(data["name"], f"{context}.name")
    if "race" in data:
        snapshot.race = _require_str(data["race"], f"{context}.race")
    if "class_id" in data:
        snapshot.class_id = _require_str(data["class_id"], f"{context}.class_id")
    snapshot.level = _require_non_negative_int(data.get("level", 1), f"{context}.level")
    snapshot.prestige_level = _require_non_negative_int(
        data.get("prestige_level", 0), f"{context}.prestige_level"
    )
    snapshot.paragon_points = _coerce_big_int(data.get("paragon_points", 0), f"{context}.paragon_points")

    raw_stats = _require_mapping(data.get("stats", {}), f"{context}.stats")
    for raw_stat, raw_line in raw_stats.items():
        stat = _require_stat_name(raw_stat, f"{context}.stats")
        snapshot.stats[stat] = _decode_stat_line(raw_line, f"{context}.stats.{stat}")

    raw_paragon = _require_mapping(data.get("paragon_distribution", {}), f"{context}.paragon_distribution")
    for raw_stat, raw_points in raw_paragon.items():
        stat = _require_stat_name(raw_stat, f"{context}.paragon_distribution")
        points = _coerce_big_int(raw_points, f"{context}.paragon_distribution.{stat}")
        if points:
            snapshot.paragon_distribution[stat] = points
    return snapshot


def _decode_stat_line(payload: object, context: str) -> StatLine:
    data = _require_mapping(payload, context)
    unknown = set(data.keys()) - _STAT_LINE_FIELDS
    if unknown:
        raise DataValidationError(f"{context} has unknown fields: {sorted(unknown)}.")
    # Stored base values may sit outside 0-100; the formula clamps them.
    base = data.get("base", 0)
    if isinstance(base, bool) or not isinstance(base, int):
        raise DataValidationError(f"{context}.base must be an integer.")
    return StatLine(
        base=base,
        tier=_require_non_negative_int(data.get("tier", 0), f"{context}.tier"),
        bonus=_coerce_big_int(data.get("bonus", 0), f"{context}.bonus"),
    )


def _require_mapping(value: object, context: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise DataValidationError(f"{context} must be an object/dict.")
    return value


def _require_str(value: object, context: str) -> str:
    if not isinstance(value, str) or not value:
        raise DataValidationError(f"{context} must be a non-empty string.")
    return value


def _require_non_negative_int(value: object, context: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DataValidationError(f"{context} must be a non-negative integer.")
    return value


def _require_stat_name(value: object, context: str) -> StatName:
    if value not in STAT_NAMES:
        raise DataValidationError(f"{context} references unknown stat '{value}'.")
    return value  # type: ignore[return-value]


def _coerce_big_int(value: object, context: str) -> int:
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise DataValidationError(f"{context} must be a non-negative integer string.")
        try:
            return int(text)
        except ValueError as exc:
            raise DataValidationError(f"{context} is too long to parse: {exc}") from exc
    return _require_non_negative_int(value, context)
