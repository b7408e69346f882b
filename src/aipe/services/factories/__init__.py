"""Factory helpers for progression snapshots."""

from .snapshot_factory import create_snapshot_for_new_character, create_snapshot_from_template

__all__ = [
    "create_snapshot_for_new_character",
    "create_snapshot_from_template",
]
