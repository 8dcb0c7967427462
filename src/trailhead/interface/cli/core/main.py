"""Main CLI entry point.

    trailhead projects --add        # register a project
    trailhead run api               # open its sessions
    trailhead api                   # same, through the project's shortcut

Every registered slug becomes a command of its own. Built-in commands always
win over a slug with the same name.
"""

import sys

import click

from trailhead import __version__
from trailhead.interface.cli.commands import build_shortcuts, projects, run
from trailhead.interface.cli.core.error_handler import handle_error
from trailhead.interface.cli.core.theme import err_console
from trailhead.interface.cli.helpers import get_workspace


def cli_entrypoint() -> None:
    """Wrapped entrypoint with global error handling.

    Called from pyproject.toml [project.scripts].
    """
    try:
        # ctx.exit(code) comes back as the return value in non-standalone mode
        exit_code = main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        err_console.print("\n[th.muted]Cancelled[/]")
        sys.exit(130)
    except Exception as e:
        handle_error(e, json_output="--json-errors" in sys.argv)

    if isinstance(exit_code, int) and exit_code:
        sys.exit(exit_code)


class ShortcutGroup(click.Group):
    """Group whose commands are the built-ins plus one per registered slug.

    The registry is read on the first lookup that needs it; click resolves the
    subcommand before the group callback runs, so this cannot wait for it.
    """

    def _shortcuts(self, ctx: click.Context) -> dict[str, click.Command]:
        root = ctx.find_root()
        root.ensure_object(dict)
        shortcuts = root.obj.get("shortcuts")
        if shortcuts is None:
            workspace = get_workspace(ctx)
            shortcuts = build_shortcuts(workspace.registry, reserved=set(self.commands))
            root.obj["shortcuts"] = shortcuts
        return shortcuts

    def list_commands(self, ctx: click.Context) -> list[str]:
        builtins = super().list_commands(ctx)
        if ctx.resilient_parsing:
            return builtins
        return builtins + list(self._shortcuts(ctx))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        return self._shortcuts(ctx).get(cmd_name)


@click.group(cls=ShortcutGroup)
@click.option("--debug", is_flag=True, help="Verbose logging to stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Config file (default: <home>/config.yaml)",
)
@click.option("--json-errors", is_flag=True, help="Report errors as JSON on stderr")
@click.version_option(__version__, prog_name="trailhead")
@click.pass_context
def main(ctx: click.Context, debug: bool, config_path: str | None, json_errors: bool) -> None:
    """Trailhead - open a project's terminal sessions with one command.

    \b
    Examples:
        trailhead projects --add
        trailhead projects --list
        trailhead run --all
        trailhead <slug>
    """
    ctx.ensure_object(dict)


main.add_command(projects)
main.add_command(run)
