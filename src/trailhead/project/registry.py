"""Project registry.

Tracks known projects in <home>/projects.json as a JSON array, in the order
they were added. The whole file is read once per invocation and rewritten as a
whole on every change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from trailhead.foundation.errors import (
    ProjectNotFoundError,
    StorageCorruptError,
    StorageWriteError,
)
from trailhead.foundation.utils import atomic_json_dump, safe_json_loads
from trailhead.project.types import Project

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Registry:
    """An ordered, slug-unique sequence of projects.

    Registry values are immutable; ``add`` and ``remove`` return a new one.

    Example:
        >>> registry = Registry().add(Project(slug="api", root_path="/srv/api"))
        >>> registry.find("api").root_path
        '/srv/api'
        >>> registry = registry.remove("api")
        >>> len(registry)
        0
    """

    projects: tuple[Project, ...] = ()

    def __iter__(self) -> Iterator[Project]:
        return iter(self.projects)

    def __len__(self) -> int:
        return len(self.projects)

    def __contains__(self, slug: object) -> bool:
        return any(p.slug == slug for p in self.projects)

    @property
    def slugs(self) -> list[str]:
        return [p.slug for p in self.projects]

    def find(self, slug: str) -> Project | None:
        """Get a project by exact slug match.

        Returns:
            Project or None if not registered
        """
        for project in self.projects:
            if project.slug == slug:
                return project
        return None

    def add(self, project: Project) -> Registry:
        """Append a project.

        Slug uniqueness is checked during registration, not here.
        """
        return Registry((*self.projects, project))

    def remove(self, slug: str) -> Registry:
        """Remove the project with this slug.

        Raises:
            ProjectNotFoundError: If no project has the slug
        """
        if slug not in self:
            raise ProjectNotFoundError(slug)
        return Registry(tuple(p for p in self.projects if p.slug != slug))

    def to_registry_data(self) -> list[dict]:
        return [p.to_registry_entry() for p in self.projects]

    @classmethod
    def from_registry_data(cls, data: object) -> Registry:
        """Build a Registry from parsed registry JSON.

        Raises:
            ValueError: If the data is not a list of valid, slug-unique entries
        """
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")

        projects: list[Project] = []
        seen: set[str] = set()
        for index, entry in enumerate(data):
            try:
                project = Project.from_registry_entry(entry)
            except ValueError as e:
                raise ValueError(f"entry {index}: {e}") from e
            if project.slug in seen:
                raise ValueError(f"entry {index}: duplicate slug {project.slug!r}")
            seen.add(project.slug)
            projects.append(project)
        return cls(tuple(projects))


class RegistryStore:
    """Loads and saves the registry file.

    Example:
        >>> store = RegistryStore(Path("~/.trailhead/projects.json").expanduser())
        >>> registry = store.load()
        >>> store.save(registry.add(project))
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Registry:
        """Read the registry, creating an empty one on first use.

        Raises:
            StorageCorruptError: If the file cannot be read or parsed
            StorageWriteError: If the empty registry cannot be created
        """
        if not self.path.exists():
            logger.info("No registry at %s, creating an empty one", self.path)
            registry = Registry()
            self.save(registry)
            return registry

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageCorruptError(self.path, str(e), e) from e

        try:
            registry = Registry.from_registry_data(safe_json_loads(content))
        except ValueError as e:
            raise StorageCorruptError(self.path, str(e), e) from e

        logger.debug("Loaded %d projects from %s", len(registry), self.path)
        return registry

    def save(self, registry: Registry) -> None:
        """Overwrite the registry file with the whole sequence.

        Raises:
            StorageWriteError: On any I/O failure
        """
        try:
            atomic_json_dump(registry.to_registry_data(), self.path)
        except OSError as e:
            raise StorageWriteError(self.path, str(e), e) from e
        logger.debug("Saved %d projects to %s", len(registry), self.path)
