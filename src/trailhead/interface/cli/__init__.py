"""Command-line interface.

Usage:
    >>> from trailhead.interface.cli import main
    >>> main(["projects", "--list"])
"""

from trailhead.interface.cli.core.main import cli_entrypoint, main

__all__ = ["cli_entrypoint", "main"]
