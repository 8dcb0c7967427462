"""Launch types: what gets spawned and what came of it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from trailhead.foundation.errors import LaunchStepFailedError


class LaunchStep(Enum):
    """Sessions a project can open, in launch order."""

    STARTUP = "startup"
    """The project's own startup command."""

    EDITOR = "editor"
    """The editor session."""

    CONTAINERS = "containers"
    """The container stack."""


@dataclass(frozen=True, slots=True)
class SessionRequest:
    """One new interactive terminal session to start."""

    title: str
    """Window/tab title."""

    command: str
    """Shell command line run inside the session."""

    cwd: Path
    """Working directory of the session."""


@dataclass(frozen=True, slots=True)
class SpawnedSession:
    """Acknowledgement that a session process was started."""

    pid: int


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of issuing one launch step."""

    step: LaunchStep
    request: SessionRequest
    session: SpawnedSession | None = None
    error: LaunchStepFailedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class LaunchResult:
    """Everything one project launch issued, in order.

    A launch that reached the spawn stage always has one outcome per enabled
    step, whether or not the spawn succeeded.
    """

    slug: str
    root: Path
    outcomes: list[StepOutcome] = field(default_factory=list)

    @property
    def issued(self) -> list[StepOutcome]:
        """Steps whose session process was started."""
        return [o for o in self.outcomes if o.ok]

    @property
    def failures(self) -> list[LaunchStepFailedError]:
        return [o.error for o in self.outcomes if o.error is not None]

    @property
    def ok(self) -> bool:
        return not self.failures
