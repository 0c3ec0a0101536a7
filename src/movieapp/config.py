# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from movieapp.constants import DEFAULT_SETTINGS_FILE, LOG_LEVELS, TABS
from movieapp.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "window": {"width": 480, "height": 800},
    "ui": {"start_tab": 0, "show_posters": True},
    "logging": {"level": "DEBUG", "session_file": True},
}

ENV_OVERRIDES = ("MOVIEAPP_START_TAB", "MOVIEAPP_LOG_LEVEL")


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _collect_env(env_path: Path) -> dict[str, str]:
    """Merge .env values with the process environment, which wins."""
    values = _load_env_file(env_path)
    for name in ENV_OVERRIDES:
        if name in os.environ:
            values[name] = os.environ[name]
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    start_tab = env_values.get("MOVIEAPP_START_TAB", "").strip()
    log_level = env_values.get("MOVIEAPP_LOG_LEVEL", "").strip()

    if start_tab:
        try:
            merged.setdefault("ui", {})["start_tab"] = int(start_tab)
        except ValueError as e:
            raise ConfigError(f"MOVIEAPP_START_TAB must be an integer, got {start_tab!r}") from e
    if log_level:
        merged.setdefault("logging", {})["level"] = log_level.upper()
    return merged


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the GUI reads at startup."""
    window = config.get("window", {})
    for key in ("width", "height"):
        value = window.get(key)
        if not _is_int(value) or not (200 <= value <= 4000):
            raise ConfigError(f"window.{key} must be an int in range 200..4000")

    ui = config.get("ui", {})
    start_tab = ui.get("start_tab")
    if not _is_int(start_tab) or not (0 <= start_tab < len(TABS)):
        raise ConfigError(f"ui.start_tab must be an int in range 0..{len(TABS) - 1}")
    if not isinstance(ui.get("show_posters"), bool):
        raise ConfigError("ui.show_posters must be a boolean")

    logging_cfg = config.get("logging", {})
    if logging_cfg.get("level") not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")
    if not isinstance(logging_cfg.get("session_file"), bool):
        raise ConfigError("logging.session_file must be a boolean")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON, merge into defaults and apply env overrides."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _collect_env(config_path.parent / ".env")
    if config_path.exists():
        merged = _deep_merge(get_default_config(), read_json_file(config_path))
    else:
        merged = get_default_config()
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path
