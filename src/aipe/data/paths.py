"""Helpers for resolving data file locations."""
from __future__ import annotations

import sys
from pathlib import Path


def get_repo_root() -> Path:
    """Return the repository root (or the unpacked bundle root when frozen)."""
    bundle_root = getattr(sys, "_MEIPASS", None)
    if getattr(sys, "frozen", False) and bundle_root:
        return Path(bundle_root)
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON definition files."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data" / "definitions"
