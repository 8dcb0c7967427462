"""Interactive collection of a new project.

Questions are asked in a fixed order: root path, slug, container stack,
editor, startup command. A slug that is taken or unusable is rejected on the
spot and asked again, so the registry is never touched with a bad slug.
"""

import click

from trailhead.foundation.errors import TrailheadError
from trailhead.foundation.types.config import DEFAULT_STARTUP_COMMAND
from trailhead.project import Project, Registry, validate_new_slug


def _slug_checker(registry: Registry):
    def check(value: str) -> str:
        slug = value.strip()
        try:
            validate_new_slug(registry, slug)
        except TrailheadError as e:
            # click.prompt shows UsageError messages and asks again
            raise click.UsageError(e.message) from e
        return slug

    return check


def prompt_project(
    registry: Registry,
    default_startup_command: str = DEFAULT_STARTUP_COMMAND,
) -> Project:
    """Ask the operator for a new project.

    Raises:
        click.Abort: If input ends or the operator presses Ctrl+C
    """
    root_path = click.prompt("Enter the root folder path of the project")
    slug = click.prompt(
        "Enter a unique slug for the project",
        value_proc=_slug_checker(registry),
    )
    run_docker = click.confirm(
        "Should the project automatically run docker compose up?",
        default=True,
    )
    run_nvim = click.confirm("Should the project automatically run neovim?", default=True)
    startup_commands = click.prompt("Enter startup commands", default=default_startup_command)

    return Project(
        slug=slug,
        root_path=root_path.strip(),
        run_docker=run_docker,
        run_nvim=run_nvim,
        startup_commands=startup_commands,
    )
