"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from aipe.data.json_loader import dump_json

_DEFAULT_DECIMAL_PLACES = 1
_MAX_DECIMAL_PLACES = 4

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "AIPE"
        return Path.home() / "AIPE"
    return Path.home() / ".config" / "aipe"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {"soft_cap_enabled": False, "decimal_places": _DEFAULT_DECIMAL_PLACES}


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    soft_cap = raw.get("soft_cap_enabled") is True
    places = raw.get("decimal_places")
    if isinstance(places, bool) or not isinstance(places, int):
        places = _DEFAULT_DECIMAL_PLACES
    places = max(0, min(places, _MAX_DECIMAL_PLACES))
    return {"soft_cap_enabled": soft_cap, "decimal_places": places}


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk, raising DataLoadError when the file cannot be written."""
    dump_json(path or get_default_config_path(), _normalize(config))
