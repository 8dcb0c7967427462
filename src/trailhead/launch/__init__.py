"""Launching project sessions."""

from trailhead.launch.launcher import Launcher, resolve_root
from trailhead.launch.spawn import (
    SessionSpawner,
    TerminalSpawner,
    build_terminal_argv,
    default_shell,
)
from trailhead.launch.types import (
    LaunchResult,
    LaunchStep,
    SessionRequest,
    SpawnedSession,
    StepOutcome,
)

__all__ = [
    "Launcher",
    "LaunchResult",
    "LaunchStep",
    "SessionRequest",
    "SessionSpawner",
    "SpawnedSession",
    "StepOutcome",
    "TerminalSpawner",
    "build_terminal_argv",
    "default_shell",
    "resolve_root",
]
