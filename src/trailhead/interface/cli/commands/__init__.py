"""CLI commands."""

from trailhead.interface.cli.commands.projects_cmd import projects
from trailhead.interface.cli.commands.run_cmd import build_shortcuts, run, run_project

__all__ = ["build_shortcuts", "projects", "run", "run_project"]
