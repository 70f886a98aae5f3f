"""Global configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

VALID_KEYS = {
    "on_missing_front_matter": {"skip", "error"},
    "log_level": {"warning", "info", "debug"},
}

DEFAULTS = {
    "on_missing_front_matter": "skip",
    "log_level": "warning",
}


def global_config_dir() -> Path:
    return Path.home() / ".config" / "j2z"


def load_global_config() -> dict:
    path = global_config_dir() / "config.json"
    if not path.exists():
        return {}
    try:
        config = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        logger.warning("Ignoring malformed config %s: %s", path, e)
        return {}
    if not isinstance(config, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return {}
    return config


def resolve_settings(config: dict | None = None) -> dict[str, str]:
    """Merge config values over DEFAULTS, ignoring unknown keys and bad values."""
    if config is None:
        config = load_global_config()
    settings = dict(DEFAULTS)
    for key, value in config.items():
        if key not in VALID_KEYS:
            logger.warning("Ignoring unknown config key: %s", key)
        elif value not in VALID_KEYS[key]:
            logger.warning("Ignoring invalid value for %s: %r", key, value)
        else:
            settings[key] = value
    return settings
