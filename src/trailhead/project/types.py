"""Project types.

Defines the Project entity stored in the registry and its on-disk form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Project", "REGISTRY_KEYS"]

# Keys of a persisted registry entry, in the order they are written
REGISTRY_KEYS = ("rootPath", "slug", "runDocker", "runNvim", "startupCommands")


@dataclass(frozen=True, slots=True)
class Project:
    """A registered project and what to open when it is launched.

    Attributes:
        slug: Unique identifier, also usable as a top-level command name
        root_path: Working directory for every session of this project
        run_docker: Open a session running the container stack
        run_nvim: Open an editor session
        startup_commands: Shell command line for the first session; empty means none
    """

    slug: str
    """Unique identifier (e.g., 'api')."""

    root_path: str
    """Project root. Not checked until launch."""

    run_docker: bool = False
    """Whether to launch the container stack."""

    run_nvim: bool = False
    """Whether to launch the editor."""

    startup_commands: str = ""
    """Command line for the startup session."""

    @property
    def has_startup_command(self) -> bool:
        return bool(self.startup_commands)

    def to_registry_entry(self) -> dict[str, Any]:
        """Convert to registry JSON format."""
        return {
            "rootPath": self.root_path,
            "slug": self.slug,
            "runDocker": self.run_docker,
            "runNvim": self.run_nvim,
            "startupCommands": self.startup_commands,
        }

    @classmethod
    def from_registry_entry(cls, entry: Any) -> Project:
        """Create Project from a registry entry.

        ``startupCommands`` may be absent or null and then means no startup
        session. Every other key is required.

        Raises:
            ValueError: If the entry does not match the registry schema
        """
        if not isinstance(entry, dict):
            raise ValueError(f"entry must be an object, got {type(entry).__name__}")

        for key in ("rootPath", "slug", "runDocker", "runNvim"):
            if key not in entry:
                raise ValueError(f"entry is missing {key!r}")

        slug = entry["slug"]
        root_path = entry["rootPath"]
        startup = entry.get("startupCommands")
        if startup is None:
            startup = ""

        if not isinstance(slug, str) or not slug:
            raise ValueError("'slug' must be a non-empty string")
        if not isinstance(root_path, str) or not root_path:
            raise ValueError(f"'rootPath' of {slug} must be a non-empty string")
        for key in ("runDocker", "runNvim"):
            if not isinstance(entry[key], bool):
                raise ValueError(f"{key!r} of {slug} must be true or false")
        if not isinstance(startup, str):
            raise ValueError(f"'startupCommands' of {slug} must be a string")

        return cls(
            slug=slug,
            root_path=root_path,
            run_docker=entry["runDocker"],
            run_nvim=entry["runNvim"],
            startup_commands=startup,
        )
