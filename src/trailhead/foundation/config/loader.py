"""Trailhead configuration management.

Loads configuration from <home>/config.yaml with sensible defaults.
All settings can be overridden via environment variables (TRAILHEAD_*).

Config locations (in priority order):
1. Environment variables (TRAILHEAD_<SECTION>_<KEY>)
2. Explicit path passed to load_config()
3. <home>/config.yaml, where <home> is $TRAILHEAD_HOME or ~/.trailhead
4. Built-in defaults
"""

import logging
import os
import shlex
from dataclasses import asdict
from pathlib import Path
from typing import Any

from trailhead.foundation.errors import ConfigError
from trailhead.foundation.types.config import (
    LauncherConfig,
    LoggingConfig,
    RegistryConfig,
    TrailheadConfig,
)
from trailhead.foundation.utils import safe_yaml_load, trailhead_home

logger = logging.getLogger(__name__)

_ENV_PREFIX = "TRAILHEAD_"
_SECTIONS = ("registry", "launcher", "logging")


def default_config_path() -> Path:
    return trailhead_home() / "config.yaml"


def _defaults() -> dict[str, Any]:
    """Defaults from the dataclass definitions (single source of truth)."""
    data = asdict(TrailheadConfig())
    data["launcher"]["terminal"] = list(data["launcher"]["terminal"])
    return data


def _deep_update(base: dict, updates: dict) -> dict:
    """Recursively update a dict with another dict."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _coerce(value: str) -> Any:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    return value


def _apply_env_overrides(config_dict: dict, environ: dict[str, str] | None = None) -> dict:
    """Apply environment variable overrides.

    Environment variables follow pattern: TRAILHEAD_SECTION_KEY

    Examples:
        TRAILHEAD_LAUNCHER_EDITOR_COMMAND=hx
        TRAILHEAD_LAUNCHER_TERMINAL="kitty --title {title} {shell} -c {command}"
        TRAILHEAD_LOGGING_PERSIST=false
    """
    environ = os.environ if environ is None else environ

    for key, value in environ.items():
        if not key.startswith(_ENV_PREFIX):
            continue
        path_str = key[len(_ENV_PREFIX):].lower()

        section = next((s for s in _SECTIONS if path_str.startswith(s + "_")), None)
        if section is None:
            # TRAILHEAD_HOME, TRAILHEAD_DEBUG and friends are not config keys
            continue
        final_key = path_str[len(section) + 1:]
        if final_key not in config_dict[section]:
            logger.debug("Ignoring unknown config override %s", key)
            continue

        if final_key == "terminal":
            config_dict[section][final_key] = shlex.split(value)
        else:
            config_dict[section][final_key] = _coerce(value)

    return config_dict


def _dict_to_config(data: dict, source: Path | str) -> TrailheadConfig:
    """Convert a dict to TrailheadConfig."""
    try:
        launcher_data = dict(data.get("launcher") or {})
        terminal = launcher_data.get("terminal")
        if terminal is not None:
            valid = not isinstance(terminal, str) and all(isinstance(t, str) for t in terminal)
            if not valid or not terminal:
                raise ValueError("launcher.terminal must be a non-empty list of strings")
            launcher_data["terminal"] = tuple(terminal)

        return TrailheadConfig(
            registry=RegistryConfig(**(data.get("registry") or {})),
            launcher=LauncherConfig(**launcher_data),
            logging=LoggingConfig(**(data.get("logging") or {})),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(source, str(e), e) from e


def load_config(path: str | Path | None = None) -> TrailheadConfig:
    """Load configuration from file with defaults and env overrides.

    Args:
        path: Optional explicit config file path. Must exist when given.

    Returns:
        Merged TrailheadConfig instance.

    Raises:
        ConfigError: If the config file is missing (explicit path only),
            unreadable, or does not match the config schema.
    """
    config_dict = _defaults()

    config_path = Path(path).expanduser() if path else default_config_path()
    if config_path.exists():
        try:
            file_config = safe_yaml_load(config_path)
        except (OSError, ValueError) as e:
            raise ConfigError(config_path, str(e), e) from e
        unknown = set(file_config) - set(_SECTIONS)
        if unknown:
            raise ConfigError(config_path, f"unknown sections: {', '.join(sorted(unknown))}")
        _deep_update(config_dict, file_config)
        logger.debug("Loaded config from %s", config_path)
    elif path:
        raise ConfigError(config_path, "file not found")

    config_dict = _apply_env_overrides(config_dict)

    return _dict_to_config(config_dict, config_path)


def registry_path(config: TrailheadConfig) -> Path:
    """Resolve the registry file location for a config."""
    if config.registry.path:
        return Path(config.registry.path).expanduser()
    return trailhead_home() / "projects.json"


def log_dir() -> Path:
    """Directory for per-session log files."""
    return trailhead_home() / "logs"

