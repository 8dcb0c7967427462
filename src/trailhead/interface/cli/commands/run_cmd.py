"""Run command and per-project shortcuts."""

import click

from trailhead.foundation.errors import TrailheadError
from trailhead.interface.cli.core.async_runner import run_async
from trailhead.interface.cli.core.theme import console, err_console
from trailhead.interface.cli.helpers import fail, get_workspace, render_launch, render_run_all
from trailhead.project import Registry


def run_project(ctx: click.Context, slug: str) -> None:
    """Launch one project, exiting 1 if it cannot be launched.

    Failed launch steps are reported but do not change the exit code.
    """
    workspace = get_workspace(ctx)
    try:
        result = run_async(workspace.run(slug))
    except TrailheadError as e:
        fail(ctx, e)
    render_launch(console, err_console, result)


def run_every_project(ctx: click.Context) -> None:
    """Launch all projects in order, exiting 1 if any could not be launched."""
    workspace = get_workspace(ctx)
    outcomes = run_async(workspace.run_all())
    render_run_all(console, err_console, outcomes)
    if any(not o.launched for o in outcomes):
        ctx.exit(1)


@click.command("run")
@click.argument("slug", required=False)
@click.option("--all", "-a", "run_all", is_flag=True, help="Run every registered project")
@click.pass_context
def run(ctx: click.Context, slug: str | None, run_all: bool) -> None:
    """Open the terminal sessions for a project.

    \b
    Examples:
        trailhead run api        # Start the project with slug "api"
        trailhead run --all      # Start every project, in registry order
    """
    if run_all and slug:
        raise click.UsageError("Give a slug or --all, not both.", ctx=ctx)
    if run_all:
        run_every_project(ctx)
        return
    if not slug:
        raise click.UsageError("Missing SLUG (or pass --all).", ctx=ctx)
    run_project(ctx, slug)


def shortcut_command(slug: str) -> click.Command:
    """Build the ``trailhead <slug>`` command for one project."""

    @click.pass_context
    def callback(ctx: click.Context) -> None:
        run_project(ctx, slug)

    return click.Command(slug, callback=callback, help=f"Shortcut to start {slug}")


def build_shortcuts(registry: Registry, reserved: set[str]) -> dict[str, click.Command]:
    """One shortcut per slug; names in ``reserved`` are skipped."""
    return {
        slug: shortcut_command(slug)
        for slug in registry.slugs
        if slug not in reserved
    }
