"""
App configuration — form defaults, export size, chart size.

Read from config/apex_rhythm.json when present; any missing key falls back to
DEFAULT_CONFIG. This is application config only, no user data is stored.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "apex_rhythm.json"

DEFAULT_CONFIG = {
    "form_defaults": {
        "username": "",
        "wake_time": "06:00",
        "sleep_time": "22:30",
        "genre": "FPS",
        "intensity": "Casual",
    },
    "export": {
        "width": 1920,
        "height": 1080,
        "directory": "",
    },
    "chart": {
        "height": 300,
    },
}


def load_config(path: Optional[Path] = None) -> dict:
    """Load config JSON merged over the defaults (one level deep)."""
    config_path = path or CONFIG_PATH
    merged = copy.deepcopy(DEFAULT_CONFIG)
    if not config_path.exists():
        return merged

    try:
        with open(config_path, encoding="utf-8") as f:
            cfg = json.load(f)
    except json.JSONDecodeError:
        logger.warning("Bad config at %s, using defaults.", config_path)
        return merged

    if not isinstance(cfg, dict):
        logger.warning("Config at %s is not an object, using defaults.", config_path)
        return merged

    for section, values in cfg.items():
        if isinstance(merged.get(section), dict):
            if not isinstance(values, dict):
                logger.warning(
                    "Config section '%s' is not an object, using defaults.", section
                )
                continue
            merged[section].update(values)
        else:
            merged[section] = values
    logger.info("Loaded config from %s", config_path)
    return merged
