"""Configuration management for Trailhead."""

from trailhead.foundation.config.loader import (
    default_config_path,
    load_config,
    log_dir,
    registry_path,
)
from trailhead.foundation.types.config import TrailheadConfig

__all__ = [
    "TrailheadConfig",
    "default_config_path",
    "load_config",
    "log_dir",
    "registry_path",
]
