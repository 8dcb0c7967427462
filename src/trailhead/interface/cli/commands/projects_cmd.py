"""Projects command - add, list, run and remove registered projects."""

import json

import click
from rich.text import Text

from trailhead.foundation.errors import TrailheadError
from trailhead.interface.cli.commands.run_cmd import run_project
from trailhead.interface.cli.core.theme import console
from trailhead.interface.cli.helpers import fail, get_workspace, prompt_project


@click.command("projects")
@click.option("--add", "-a", "add", is_flag=True, help="Register a new project interactively")
@click.option("--list", "-l", "list_", is_flag=True, help="List registered projects")
@click.option("--run", "-r", "run_slug", metavar="SLUG", help="Run the project with this slug")
@click.option("--remove", "remove_slug", metavar="SLUG", help="Remove the project with this slug")
@click.option("--json", "json_output", is_flag=True, help="With --list, print the registry as JSON")
@click.pass_context
def projects(
    ctx: click.Context,
    add: bool,
    list_: bool,
    run_slug: str | None,
    remove_slug: str | None,
    json_output: bool,
) -> None:
    """Manage registered projects.

    When several options are given only the first of add, list, run,
    remove is carried out.

    \b
    Examples:
        trailhead projects --add
        trailhead projects --list
        trailhead projects --run api
        trailhead projects --remove api
    """
    if add:
        _add(ctx)
    elif list_:
        _list(ctx, json_output)
    elif run_slug is not None:
        run_project(ctx, run_slug)
    elif remove_slug is not None:
        _remove(ctx, remove_slug)
    else:
        click.echo(ctx.get_help())


def _add(ctx: click.Context) -> None:
    workspace = get_workspace(ctx)
    project = prompt_project(
        workspace.registry,
        workspace.launcher.config.default_startup_command,
    )
    try:
        workspace.register(project)
    except TrailheadError as e:
        fail(ctx, e)

    line = Text("✓ ", style="th.success")
    line.append("Project ")
    line.append(project.slug, style="th.slug")
    line.append(" added successfully!")
    console.print(line, soft_wrap=True)


def _list(ctx: click.Context, json_output: bool) -> None:
    workspace = get_workspace(ctx)
    if json_output:
        click.echo(json.dumps(workspace.registry.to_registry_data(), indent=2))
        return

    lines = workspace.listing()
    if not lines:
        click.echo("No projects found.")
        return
    for line in lines:
        click.echo(line)


def _remove(ctx: click.Context, slug: str) -> None:
    workspace = get_workspace(ctx)
    try:
        workspace.unregister(slug)
    except TrailheadError as e:
        fail(ctx, e)

    line = Text("✓ ", style="th.success")
    line.append("Project ")
    line.append(slug, style="th.slug")
    line.append(" removed successfully!")
    console.print(line, soft_wrap=True)
