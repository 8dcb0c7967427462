"""Process-spawn capability: start a terminal session and return once it exists.

The launcher only depends on ``SessionSpawner``. ``TerminalSpawner`` is the
real implementation: it fills an argv template for the configured terminal
emulator and starts it detached with ``subprocess.Popen``. The spawned terminal
is never waited on, killed or supervised afterwards.

The terminal command line is built as an argument list, never as a shell
string, so titles and paths are passed through verbatim. Only the session
command itself is interpreted, by the session's own shell.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from trailhead.foundation.types.config import LauncherConfig
from trailhead.launch.types import SessionRequest, SpawnedSession

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(title|shell|command)\}")


@runtime_checkable
class SessionSpawner(Protocol):
    """Starts one interactive terminal session per request.

    Implementations return as soon as the session process has been started
    and raise ``OSError`` when it could not be started at all, or
    ``ValueError`` when the command line cannot be passed to the OS.
    """

    async def spawn(self, request: SessionRequest) -> SpawnedSession: ...


def build_terminal_argv(
    template: Sequence[str],
    *,
    title: str,
    shell: str,
    command: str,
) -> list[str]:
    """Fill a terminal argv template.

    Each element is substituted independently; values are never re-split.

    Example:
        >>> build_terminal_argv(
        ...     ["alacritty", "-T", "{title}", "-e", "{shell}", "-c", "{command}"],
        ...     title="Workspace - api: nvim",
        ...     shell="/bin/zsh",
        ...     command="nvim",
        ... )
        ['alacritty', '-T', 'Workspace - api: nvim', '-e', '/bin/zsh', '-c', 'nvim']
    """
    values = {"title": title, "shell": shell, "command": command}
    return [_PLACEHOLDER.sub(lambda m: values[m.group(1)], part) for part in template]


def default_shell(configured: str | None = None) -> str:
    return configured or os.environ.get("SHELL") or "/bin/sh"


class TerminalSpawner:
    """Opens sessions in a terminal emulator.

    Example:
        >>> spawner = TerminalSpawner.from_config(load_config().launcher)
        >>> session = await spawner.spawn(request)
        >>> session.pid
        48213
    """

    def __init__(self, terminal: Sequence[str], shell: str) -> None:
        if not terminal:
            raise ValueError("terminal template must not be empty")
        self.terminal = tuple(terminal)
        self.shell = shell

    @classmethod
    def from_config(cls, config: LauncherConfig) -> TerminalSpawner:
        return cls(config.terminal, default_shell(config.shell))

    def argv_for(self, request: SessionRequest) -> list[str]:
        return build_terminal_argv(
            self.terminal,
            title=request.title,
            shell=self.shell,
            command=request.command,
        )

    async def spawn(self, request: SessionRequest) -> SpawnedSession:
        """Start the terminal and return once its process exists.

        Raises:
            OSError: If the terminal could not be started (e.g. not installed)
        """
        argv = self.argv_for(request)
        logger.debug("Spawning %s in %s", argv, request.cwd)
        proc = await asyncio.to_thread(
            subprocess.Popen,
            argv,
            cwd=request.cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        return SpawnedSession(pid=proc.pid)
