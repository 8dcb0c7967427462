"""Project launcher.

Turns one Project into an ordered list of session requests and issues them
through a SessionSpawner:

    1. startup command   (when non-empty)
    2. editor            (when run_nvim)
    3. container stack   (when run_docker)

Each spawn is awaited only until the session process exists. A failed spawn is
recorded and the remaining steps still run.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from trailhead.foundation.errors import InvalidRootPathError, LaunchStepFailedError
from trailhead.foundation.types.config import LauncherConfig
from trailhead.launch.spawn import SessionSpawner
from trailhead.launch.types import LaunchResult, LaunchStep, SessionRequest, StepOutcome
from trailhead.project.types import Project

logger = logging.getLogger(__name__)


def resolve_root(project: Project) -> Path:
    """Get the project root as an existing directory.

    Raises:
        InvalidRootPathError: If the path is missing or not a directory
    """
    root = Path(project.root_path).expanduser()
    if not root.is_dir():
        raise InvalidRootPathError(project.slug, root)
    return root


class Launcher:
    """Opens the sessions of a project.

    Example:
        >>> launcher = Launcher(TerminalSpawner.from_config(config), config)
        >>> result = await launcher.launch(project)
        >>> [o.step for o in result.issued]
        [<LaunchStep.STARTUP: 'startup'>, <LaunchStep.EDITOR: 'editor'>]
    """

    def __init__(self, spawner: SessionSpawner, config: LauncherConfig | None = None) -> None:
        self.spawner = spawner
        self.config = config or LauncherConfig()

    def title_for(self, project: Project, command: str) -> str:
        return f"{self.config.title_prefix} - {project.slug}: {command}"

    def plan(self, project: Project, root: Path) -> list[tuple[LaunchStep, SessionRequest]]:
        """Session requests for a project, in launch order."""
        commands: list[tuple[LaunchStep, str]] = []
        if project.has_startup_command:
            commands.append((LaunchStep.STARTUP, project.startup_commands))
        if project.run_nvim:
            commands.append((LaunchStep.EDITOR, self.config.editor_command))
        if project.run_docker:
            commands.append((LaunchStep.CONTAINERS, self.config.container_command))

        return [
            (step, SessionRequest(title=self.title_for(project, command), command=command, cwd=root))
            for step, command in commands
        ]

    async def launch(self, project: Project) -> LaunchResult:
        """Issue every enabled session of a project, in order.

        Raises:
            InvalidRootPathError: If the root path is not a directory. Nothing
                is spawned in that case.
        """
        root = resolve_root(project)
        result = LaunchResult(slug=project.slug, root=root)

        for step, request in self.plan(project, root):
            try:
                session = await self.spawner.spawn(request)
            except (OSError, ValueError, subprocess.SubprocessError) as e:
                # ValueError: argv Popen refuses, e.g. an embedded NUL
                error = LaunchStepFailedError(project.slug, step.value, e)
                logger.info("%s", error.message)
                result.outcomes.append(StepOutcome(step=step, request=request, error=error))
                continue

            logger.info("Started %s session for %s (pid %d)", step.value, project.slug, session.pid)
            result.outcomes.append(StepOutcome(step=step, request=request, session=session))

        return result
