"""Shared type definitions."""

from trailhead.foundation.types.config import (
    DEFAULT_STARTUP_COMMAND,
    DEFAULT_TERMINAL,
    LauncherConfig,
    LoggingConfig,
    RegistryConfig,
    TrailheadConfig,
)

__all__ = [
    "DEFAULT_STARTUP_COMMAND",
    "DEFAULT_TERMINAL",
    "LauncherConfig",
    "LoggingConfig",
    "RegistryConfig",
    "TrailheadConfig",
]
