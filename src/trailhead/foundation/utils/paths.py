"""Filesystem path utilities."""

import os
from pathlib import Path

HOME_ENV_VAR = "TRAILHEAD_HOME"


def normalize_path(path: str | Path) -> Path:
    """Normalize path (expand user, make absolute).

    Example:
        >>> normalize_path("~/code/api")
        Path('/home/user/code/api')
    """
    return Path(path).expanduser().resolve()


def trailhead_home() -> Path:
    """Directory holding the registry, config and logs.

    ``$TRAILHEAD_HOME`` when set, otherwise ``~/.trailhead``.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return normalize_path(override)
    return Path.home() / ".trailhead"


def ensure_dir(path: Path) -> Path:
    """Ensure directory exists, return Path."""
    path.mkdir(parents=True, exist_ok=True)
    return path
