"""Configuration type definitions - single source of truth for all config classes."""

from dataclasses import dataclass, field

DEFAULT_TERMINAL: tuple[str, ...] = (
    "alacritty",
    "-T",
    "{title}",
    "-e",
    "{shell}",
    "-c",
    "{command} && exec {shell}",
)

DEFAULT_STARTUP_COMMAND = "echo 'Project is getting started'"


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Where the project registry lives."""

    path: str | None = None
    """Registry file. None means <home>/projects.json."""


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """How sessions are opened for a project."""

    terminal: tuple[str, ...] = DEFAULT_TERMINAL
    """Terminal argv template. Placeholders: {title}, {shell}, {command}."""

    shell: str | None = None
    """Shell that runs session commands. None means $SHELL, then /bin/sh."""

    editor_command: str = "nvim"
    """Command for the editor session."""

    container_command: str = "docker compose up"
    """Command for the container stack session."""

    title_prefix: str = "Workspace"
    """Prefix of every session title."""

    default_startup_command: str = DEFAULT_STARTUP_COMMAND
    """Offered as the default answer when registering a project."""


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging behavior for the CLI."""

    debug: bool = False
    """Enable DEBUG output on stderr by default."""

    persist: bool = True
    """Write per-session log files under <home>/logs."""

    max_sessions: int = 10
    """Session log files to keep."""


@dataclass(frozen=True, slots=True)
class TrailheadConfig:
    """Root configuration for Trailhead."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)
    launcher: LauncherConfig = field(default_factory=LauncherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
