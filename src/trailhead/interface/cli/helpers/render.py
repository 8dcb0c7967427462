"""Rendering of launch results."""

from rich.console import Console
from rich.text import Text

from trailhead.launch import LaunchResult
from trailhead.orchestration import RunOutcome


def render_launch(console: Console, err_console: Console, result: LaunchResult) -> None:
    """Print one line per issued step; failed steps go to stderr."""
    header = Text("Launching ")
    header.append(result.slug, style="th.slug")
    header.append(f" ({result.root})", style="th.path")
    console.print(header, soft_wrap=True)

    if not result.outcomes:
        console.print(Text("  nothing to start", style="th.muted"), soft_wrap=True)
        return

    for outcome in result.outcomes:
        if outcome.ok:
            line = Text("  ✓ ", style="th.success")
            line.append(f"{outcome.step.value}: ")
            line.append(outcome.request.command, style="th.path")
            console.print(line, soft_wrap=True)
        else:
            line = Text("  ✗ ", style="th.error")
            line.append(outcome.error.message)
            err_console.print(line, soft_wrap=True)


def render_run_all(console: Console, err_console: Console, outcomes: list[RunOutcome]) -> None:
    """Print every project's launch, then a summary line."""
    if not outcomes:
        console.print("No projects found.")
        return

    for outcome in outcomes:
        if outcome.launched:
            render_launch(console, err_console, outcome.result)
        else:
            line = Text("△ ", style="th.warning")
            line.append(outcome.slug, style="th.slug")
            line.append(f" skipped: {outcome.error.message}")
            err_console.print(line, soft_wrap=True)

    launched = sum(1 for o in outcomes if o.launched)
    console.print(
        Text(f"{launched}/{len(outcomes)} projects launched", style="th.muted"),
        soft_wrap=True,
    )
