"""Helpers shared by CLI commands."""

from trailhead.interface.cli.helpers.prompts import prompt_project
from trailhead.interface.cli.helpers.render import render_launch, render_run_all
from trailhead.interface.cli.helpers.workspace import fail, get_workspace, wants_json_errors

__all__ = [
    "fail",
    "get_workspace",
    "prompt_project",
    "render_launch",
    "render_run_all",
    "wants_json_errors",
]
