"""Registration checks for new projects.

A slug is both the registry key and a top-level command name, so it must be
unique, non-empty and parseable as a command. Nothing else about a project is
checked at registration: root paths are allowed to not exist yet.
"""

from trailhead.foundation.errors import DuplicateSlugError, InvalidSlugError
from trailhead.project.registry import Registry

# Top-level commands a slug shortcut must not shadow
RESERVED_SLUGS = frozenset({"projects", "run", "help"})


def validate_slug(slug: str) -> None:
    """Check that a slug can be used as a command name.

    Raises:
        InvalidSlugError: If the slug is empty, starts with '-', contains
            whitespace or names a built-in command
    """
    if not slug:
        raise InvalidSlugError(slug, "slug must not be empty")
    if slug.startswith("-"):
        raise InvalidSlugError(slug, "slug must not start with '-'")
    if any(ch.isspace() for ch in slug):
        raise InvalidSlugError(slug, "slug must not contain whitespace")
    if slug in RESERVED_SLUGS:
        raise InvalidSlugError(slug, "slug is a built-in command name")


def validate_new_slug(registry: Registry, slug: str) -> None:
    """Check a candidate slug before registration.

    Raises:
        InvalidSlugError: If the slug is not usable as a command name
        DuplicateSlugError: If a project with this slug is already registered
    """
    validate_slug(slug)
    if slug in registry:
        raise DuplicateSlugError(slug)
