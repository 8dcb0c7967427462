"""Per-invocation bootstrap: config, logging and the Workspace.

The Workspace is created the first time any command (or the shortcut lookup)
asks for it and is stored on the root click context, so the registry is read
exactly once per invocation. Tests inject a ready Workspace through
``obj={"workspace": ...}``.
"""

import logging
from typing import NoReturn

import click

from trailhead.foundation.config import load_config, log_dir
from trailhead.foundation.errors import TrailheadError
from trailhead.foundation.logging import configure_logging
from trailhead.interface.cli.core.error_handler import handle_error
from trailhead.orchestration import Workspace

logger = logging.getLogger(__name__)


def wants_json_errors(ctx: click.Context) -> bool:
    return bool(ctx.find_root().params.get("json_errors"))


def fail(ctx: click.Context, error: TrailheadError) -> NoReturn:
    """Report a fatal error for the current command and exit 1."""
    handle_error(error, json_output=wants_json_errors(ctx))


def get_workspace(ctx: click.Context) -> Workspace:
    """Get the invocation's Workspace, opening it on first use.

    Opening loads config, configures logging and reads the registry. Any
    TrailheadError on the way is fatal for the invocation.
    """
    root = ctx.find_root()
    root.ensure_object(dict)

    workspace = root.obj.get("workspace")
    if workspace is not None:
        return workspace

    try:
        config = load_config(root.params.get("config_path"))
        configure_logging(
            debug=bool(root.params.get("debug")) or config.logging.debug,
            log_dir=log_dir() if config.logging.persist else None,
            max_sessions=config.logging.max_sessions,
        )
        workspace = Workspace.open(config)
    except TrailheadError as e:
        fail(ctx, e)

    root.obj["config"] = config
    root.obj["workspace"] = workspace
    logger.debug("Workspace opened with %d projects", len(workspace.registry))
    return workspace
