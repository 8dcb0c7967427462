"""Error system for Trailhead."""

from trailhead.foundation.errors.errors import (
    ERROR_MESSAGES,
    RECOVERY_HINTS,
    ConfigError,
    DuplicateSlugError,
    ErrorCode,
    InvalidRootPathError,
    InvalidSlugError,
    LaunchStepFailedError,
    ProjectNotFoundError,
    StorageCorruptError,
    StorageWriteError,
    TrailheadError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "RECOVERY_HINTS",
    "TrailheadError",
    "ConfigError",
    "DuplicateSlugError",
    "InvalidRootPathError",
    "InvalidSlugError",
    "LaunchStepFailedError",
    "ProjectNotFoundError",
    "StorageCorruptError",
    "StorageWriteError",
]
