"""Command orchestration over the registry and launcher."""

from trailhead.orchestration.workspace import RunOutcome, Workspace

__all__ = ["RunOutcome", "Workspace"]
