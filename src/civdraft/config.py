"""
Engine configuration persistence.

Settings live in ``.civdraft_config.json`` under a config directory and
are edited through ``civdraft config``. Values read back from disk are
checked field by field; a bad value falls back to its default instead
of failing later in the replay or the orchestrator.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypedDict

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".civdraft_config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config(TypedDict, total=False):
    """Engine configuration."""
    turn_timer_seconds: int  # Countdown shown to players after each turn
    default_preset: str  # Built-in preset used when none is given
    log_level: str  # One of LOG_LEVELS


DEFAULT_CONFIG: Config = {
    "turn_timer_seconds": 30,
    "default_preset": "sample",
    "log_level": "INFO",
}


def _turn_timer(value: Any) -> int | None:
    # bool is an int subclass; true/false in the file is a mistake
    if isinstance(value, bool):
        return None
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def _default_preset(value: Any) -> str | None:
    return value.strip().lower() if isinstance(value, str) and value.strip() else None


def _log_level(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    level = value.strip().upper()
    return level if level in LOG_LEVELS else None


_CHECKS = {
    "turn_timer_seconds": _turn_timer,
    "default_preset": _default_preset,
    "log_level": _log_level,
}


def normalize_config(raw: Any) -> Config:
    """
    Merge ``raw`` over the defaults, keeping only known, well-formed values.

    Unknown keys are dropped; a malformed value is logged and replaced
    by its default.
    """
    config: Config = DEFAULT_CONFIG.copy()
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning(f"Config must be a JSON object, got {type(raw).__name__}")
        return config

    for key, value in raw.items():
        check = _CHECKS.get(key)
        if check is None:
            logger.debug(f"Ignoring unknown config key {key!r}")
            continue
        checked = check(value)
        if checked is None:
            logger.warning(
                f"Invalid config value {key}={value!r}, using {DEFAULT_CONFIG[key]!r}"
            )
            continue
        config[key] = checked
    return config


def get_config_path(config_dir: Path | str = ".") -> Path:
    """Get path to config file."""
    return Path(config_dir) / CONFIG_FILENAME


def load_config(config_dir: Path | str = ".") -> Config:
    """Load config from file, or return defaults if not found."""
    path = get_config_path(config_dir)

    if not path.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Cannot read {path}, using defaults: {e}")
        return DEFAULT_CONFIG.copy()
    return normalize_config(saved)


def save_config(config: Config, config_dir: Path | str = ".") -> bool:
    """Save config to file. Returns True on success."""
    path = get_config_path(config_dir)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(normalize_config(config), f, indent=2)
        return True
    except OSError as e:
        logger.error(f"Cannot write {path}: {e}")
        return False


def update_config(config_dir: Path | str = ".", **changes: Any) -> Config:
    """
    Apply ``changes`` to the saved config and write it back.

    Raises:
        ValueError: If a key is unknown or its value is malformed
        OSError: If the file cannot be written
    """
    config = load_config(config_dir)
    for key, value in changes.items():
        check = _CHECKS.get(key)
        if check is None:
            raise ValueError(f"Unknown config key: {key}")
        checked = check(value)
        if checked is None:
            raise ValueError(f"Invalid value for {key}: {value!r}")
        config[key] = checked

    if not save_config(config, config_dir):
        raise OSError(f"Cannot write {get_config_path(config_dir)}")
    return config
