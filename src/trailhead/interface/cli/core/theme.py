"""CLI theme.

Named styles so commands say what a line means, not which color it is.
"""

from rich.console import Console
from rich.theme import Theme

TRAILHEAD_THEME = Theme({
    "th.success": "bold green",      # ✓ Session started, project saved
    "th.error": "bold red",          # ✗ Failed step, fatal error
    "th.warning": "yellow",          # △ Skipped project
    "th.slug": "bold cyan",          # Project slugs
    "th.path": "dim",                # Paths and commands
    "th.muted": "dim white",         # Secondary text
})


def create_trailhead_console(stderr: bool = False) -> Console:
    """Create a Rich console with the Trailhead theme."""
    return Console(theme=TRAILHEAD_THEME, stderr=stderr)


# Module-level console instances for convenience
console = create_trailhead_console()
err_console = create_trailhead_console(stderr=True)
