"""Workspace: the registry and launcher behind every command.

A Workspace reads the registry once when it is opened and keeps that value for
the rest of the invocation. Mutations save the whole registry and replace the
in-memory value; nothing re-reads the file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from trailhead.foundation.config import registry_path
from trailhead.foundation.errors import (
    InvalidRootPathError,
    ProjectNotFoundError,
    TrailheadError,
)
from trailhead.foundation.types.config import TrailheadConfig
from trailhead.launch import Launcher, LaunchResult, SessionSpawner, TerminalSpawner
from trailhead.project import Project, Registry, RegistryStore, validate_new_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """What happened to one project during ``run_all``."""

    slug: str
    result: LaunchResult | None = None
    error: TrailheadError | None = None

    @property
    def launched(self) -> bool:
        return self.result is not None


class Workspace:
    """Project registry plus launcher for one invocation.

    Example:
        >>> workspace = Workspace.open(load_config())
        >>> workspace.register(Project(slug="api", root_path="~/code/api", run_docker=True))
        >>> result = await workspace.run("api")
    """

    def __init__(self, store: RegistryStore, launcher: Launcher, registry: Registry) -> None:
        self.store = store
        self.launcher = launcher
        self._registry = registry

    @classmethod
    def open(
        cls,
        config: TrailheadConfig,
        spawner: SessionSpawner | None = None,
    ) -> Workspace:
        """Load the registry and wire up the launcher from config.

        Raises:
            StorageCorruptError: If the registry file cannot be parsed
            StorageWriteError: If a missing registry cannot be created
        """
        store = RegistryStore(registry_path(config))
        spawner = spawner or TerminalSpawner.from_config(config.launcher)
        return cls(store, Launcher(spawner, config.launcher), store.load())

    @property
    def registry(self) -> Registry:
        return self._registry

    def register(self, project: Project) -> Project:
        """Add a project and save the registry.

        Raises:
            DuplicateSlugError: If the slug is taken (registry unchanged)
            InvalidSlugError: If the slug is not usable as a command
            StorageWriteError: If the registry cannot be saved
        """
        validate_new_slug(self._registry, project.slug)
        registry = self._registry.add(project)
        self.store.save(registry)
        self._registry = registry
        logger.info("Registered %s (%s)", project.slug, project.root_path)
        return project

    def unregister(self, slug: str) -> Project:
        """Remove a project and save the registry.

        Raises:
            ProjectNotFoundError: If no project has the slug (nothing saved)
            StorageWriteError: If the registry cannot be saved
        """
        project = self._registry.find(slug)
        registry = self._registry.remove(slug)
        self.store.save(registry)
        self._registry = registry
        logger.info("Removed %s", slug)
        return project

    def listing(self) -> list[str]:
        """One line per project, in registry order."""
        return [f"- {p.slug} ({p.root_path})" for p in self._registry]

    def get(self, slug: str) -> Project:
        """Get a project by slug.

        Raises:
            ProjectNotFoundError: If no project has the slug
        """
        project = self._registry.find(slug)
        if project is None:
            raise ProjectNotFoundError(slug)
        return project

    async def run(self, slug: str) -> LaunchResult:
        """Launch one project.

        Raises:
            ProjectNotFoundError: If no project has the slug
            InvalidRootPathError: If its root path is not a directory
        """
        project = self.get(slug)
        logger.debug("Launching %r", project)
        return await self.launcher.launch(project)

    async def run_all(self) -> list[RunOutcome]:
        """Launch every project in registry order, one after another.

        A project that cannot be launched is reported in its outcome and the
        remaining projects still run.
        """
        outcomes = []
        for project in self._registry:
            try:
                result = await self.run(project.slug)
            except (InvalidRootPathError, ProjectNotFoundError) as e:
                logger.info("%s", e.message)
                outcomes.append(RunOutcome(slug=project.slug, error=e))
                continue
            outcomes.append(RunOutcome(slug=project.slug, result=result))
        return outcomes
