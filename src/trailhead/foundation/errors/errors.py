"""Trailhead Error System.

Provides structured error handling with:
- Numeric error codes for programmatic handling
- User-friendly messages
- Recovery hints
- Context for debugging

Each failure the registry, launcher and config layers can produce has its own
subclass so callers can catch exactly what they recover from.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes organized by category.

    Format: XYYY where X = category, YYY = specific error

    Categories:
        1xxx - Registry storage errors
        2xxx - Project errors
        3xxx - Launch errors
        5xxx - Configuration errors
        9xxx - Unexpected errors
    """

    # 1xxx - Registry storage errors
    STORAGE_CORRUPT = 1001
    STORAGE_WRITE_FAILED = 1002

    # 2xxx - Project errors
    PROJECT_NOT_FOUND = 2001
    PROJECT_DUPLICATE_SLUG = 2002
    PROJECT_INVALID_SLUG = 2003

    # 3xxx - Launch errors
    LAUNCH_INVALID_ROOT = 3001
    LAUNCH_STEP_FAILED = 3002

    # 5xxx - Configuration errors
    CONFIG_INVALID = 5001

    # 9xxx - Unexpected errors
    INTERNAL_ERROR = 9001

    @property
    def category(self) -> str:
        """Get the category name for this error code."""
        categories = {
            1: "storage",
            2: "project",
            3: "launch",
            5: "config",
            9: "internal",
        }
        return categories.get(self.value // 1000, "unknown")

    @property
    def is_recoverable(self) -> bool:
        """Whether the current command can carry on after this error."""
        return self in {
            ErrorCode.PROJECT_DUPLICATE_SLUG,
            ErrorCode.PROJECT_INVALID_SLUG,
            ErrorCode.LAUNCH_STEP_FAILED,
        }


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.STORAGE_CORRUPT: "Project registry at {path} is unreadable: {detail}",
    ErrorCode.STORAGE_WRITE_FAILED: "Failed to save project registry to {path}: {detail}",
    ErrorCode.PROJECT_NOT_FOUND: "Project with slug {slug} not found.",
    ErrorCode.PROJECT_DUPLICATE_SLUG: "Slug {slug} already exists. Please choose another.",
    ErrorCode.PROJECT_INVALID_SLUG: "Invalid slug {slug!r}: {detail}",
    ErrorCode.LAUNCH_INVALID_ROOT: "Root path for {slug} is not a directory: {path}",
    ErrorCode.LAUNCH_STEP_FAILED: "Could not open {step} session for {slug}: {detail}",
    ErrorCode.CONFIG_INVALID: "Invalid configuration in {path}: {detail}",
    ErrorCode.INTERNAL_ERROR: "Unexpected error: {detail}",
}

RECOVERY_HINTS: dict[ErrorCode, list[str]] = {
    ErrorCode.STORAGE_CORRUPT: [
        "Fix or delete {path} by hand; it must hold a JSON array of projects",
    ],
    ErrorCode.STORAGE_WRITE_FAILED: [
        "Check that the directory containing {path} exists and is writable",
        "Point registry.path in config.yaml at a writable location",
    ],
    ErrorCode.PROJECT_NOT_FOUND: [
        "Run 'trailhead projects --list' to see registered slugs",
    ],
    ErrorCode.LAUNCH_INVALID_ROOT: [
        "Create the directory, or remove and re-add {slug} with the right path",
    ],
    ErrorCode.LAUNCH_STEP_FAILED: [
        "Check that the terminal in launcher.terminal is installed and on PATH",
    ],
    ErrorCode.CONFIG_INVALID: [
        "Fix the YAML syntax in {path}, or delete it to use defaults",
    ],
}


class TrailheadError(Exception):
    """Base error type for all Trailhead errors.

    Example:
        >>> err = TrailheadError(
        ...     code=ErrorCode.PROJECT_NOT_FOUND,
        ...     context={"slug": "web"},
        ... )
        >>> print(err)
        [TH-2001] Project with slug web not found.
    """

    def __init__(
        self,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.context = context or {}
        self.cause = cause
        super().__init__(str(self))

    @property
    def message(self) -> str:
        """Get the formatted user-friendly message."""
        template = ERROR_MESSAGES.get(self.code, "An error occurred: {detail}")
        try:
            return template.format(**self.context)
        except KeyError:
            return template

    @property
    def recovery_hints(self) -> list[str]:
        """Get recovery suggestions for this error."""
        formatted = []
        for hint in RECOVERY_HINTS.get(self.code, []):
            try:
                formatted.append(hint.format(**self.context))
            except KeyError:
                formatted.append(hint)
        return formatted

    @property
    def is_recoverable(self) -> bool:
        return self.code.is_recoverable

    @property
    def category(self) -> str:
        return self.code.category

    @property
    def error_id(self) -> str:
        """Get the error ID string (e.g., 'TH-2001')."""
        return f"TH-{self.code.value}"

    def __str__(self) -> str:
        return f"[{self.error_id}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, context={self.context!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for logging and JSON output."""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category,
            "message": self.message,
            "recoverable": self.is_recoverable,
            "recovery_hints": self.recovery_hints,
            "context": self.context,
        }


class StorageCorruptError(TrailheadError):
    """The registry file exists but does not hold a valid project list."""

    def __init__(self, path: object, detail: str, cause: Exception | None = None):
        super().__init__(
            ErrorCode.STORAGE_CORRUPT,
            {"path": str(path), "detail": detail},
            cause,
        )


class StorageWriteError(TrailheadError):
    """The registry file could not be written."""

    def __init__(self, path: object, detail: str, cause: Exception | None = None):
        super().__init__(
            ErrorCode.STORAGE_WRITE_FAILED,
            {"path": str(path), "detail": detail},
            cause,
        )


class ProjectNotFoundError(TrailheadError):
    """No registered project has the requested slug."""

    def __init__(self, slug: str):
        super().__init__(ErrorCode.PROJECT_NOT_FOUND, {"slug": slug})

    @property
    def slug(self) -> str:
        return self.context["slug"]


class DuplicateSlugError(TrailheadError):
    """A project with this slug is already registered."""

    def __init__(self, slug: str):
        super().__init__(ErrorCode.PROJECT_DUPLICATE_SLUG, {"slug": slug})


class InvalidSlugError(TrailheadError):
    """The slug cannot be used as a lookup key and command name."""

    def __init__(self, slug: str, detail: str):
        super().__init__(ErrorCode.PROJECT_INVALID_SLUG, {"slug": slug, "detail": detail})


class InvalidRootPathError(TrailheadError):
    """A project's root path is missing or not a directory at launch time."""

    def __init__(self, slug: str, path: object):
        super().__init__(ErrorCode.LAUNCH_INVALID_ROOT, {"slug": slug, "path": str(path)})


class LaunchStepFailedError(TrailheadError):
    """A single session spawn failed. Recorded, never raised past the launcher."""

    def __init__(self, slug: str, step: str, cause: Exception):
        super().__init__(
            ErrorCode.LAUNCH_STEP_FAILED,
            {"slug": slug, "step": step, "detail": str(cause)},
            cause,
        )

    @property
    def step(self) -> str:
        return self.context["step"]


class ConfigError(TrailheadError):
    """The config file could not be read or parsed."""

    def __init__(self, path: object, detail: str, cause: Exception | None = None):
        super().__init__(
            ErrorCode.CONFIG_INVALID,
            {"path": str(path), "detail": detail},
            cause,
        )
