"""Trailhead - open a project's terminal sessions with one command.

Projects are registered once (root folder, slug, which sessions to open) and
started later by slug, one at a time or all together.
"""

from trailhead.foundation.errors import ErrorCode, TrailheadError
from trailhead.launch import Launcher, LaunchResult, TerminalSpawner
from trailhead.orchestration import RunOutcome, Workspace
from trailhead.project import Project, Registry, RegistryStore

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ErrorCode",
    "TrailheadError",
    # Registry
    "Project",
    "Registry",
    "RegistryStore",
    # Launching
    "Launcher",
    "LaunchResult",
    "TerminalSpawner",
    "RunOutcome",
    "Workspace",
]
