"""Project definitions and the registry that stores them.

Example:
    >>> from trailhead.project import Project, RegistryStore
    >>>
    >>> store = RegistryStore(path)
    >>> registry = store.load()
    >>> validate_new_slug(registry, "api")
    >>> store.save(registry.add(Project(slug="api", root_path="/srv/api")))
"""

from trailhead.project.registry import Registry, RegistryStore
from trailhead.project.types import REGISTRY_KEYS, Project
from trailhead.project.validation import (
    RESERVED_SLUGS,
    validate_new_slug,
    validate_slug,
)

__all__ = [
    # Types
    "Project",
    "REGISTRY_KEYS",
    # Registry
    "Registry",
    "RegistryStore",
    # Validation
    "RESERVED_SLUGS",
    "validate_new_slug",
    "validate_slug",
]
