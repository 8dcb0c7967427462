"""Pytest fixtures for Trailhead tests."""

import logging
import os
from pathlib import Path

import pytest

from trailhead.foundation.types.config import LauncherConfig
from trailhead.launch import Launcher, SessionRequest, SpawnedSession
from trailhead.orchestration import Workspace
from trailhead.project import Project, RegistryStore


class RecordingSpawner:
    """Spawner that records requests instead of opening terminals.

    Requests whose command is in ``fail_on`` raise OSError, like a terminal
    that is not installed. ``raise_on`` maps a command to any other exception.
    """

    def __init__(self) -> None:
        self.requests: list[SessionRequest] = []
        self.fail_on: set[str] = set()
        self.raise_on: dict[str, Exception] = {}
        self._next_pid = 1000

    async def spawn(self, request: SessionRequest) -> SpawnedSession:
        self.requests.append(request)
        if request.command in self.raise_on:
            raise self.raise_on[request.command]
        if request.command in self.fail_on:
            raise OSError(2, "No such file or directory", "alacritty")
        self._next_pid += 1
        return SpawnedSession(pid=self._next_pid)

    @property
    def commands(self) -> list[str]:
        return [r.command for r in self.requests]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point TRAILHEAD_HOME at a temp dir and clear TRAILHEAD_* overrides."""
    home = tmp_path / "trailhead-home"
    for key in list(os.environ):
        if key.startswith("TRAILHEAD_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("TRAILHEAD_HOME", str(home))
    monkeypatch.setenv("TRAILHEAD_LOGGING_PERSIST", "false")
    yield home


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def spawner() -> RecordingSpawner:
    return RecordingSpawner()


@pytest.fixture
def launcher_config() -> LauncherConfig:
    return LauncherConfig(
        title_prefix="Workspace",
        editor_command="nvim",
        container_command="docker compose up",
    )


@pytest.fixture
def launcher(spawner: RecordingSpawner, launcher_config: LauncherConfig) -> Launcher:
    return Launcher(spawner, launcher_config)


@pytest.fixture
def store(tmp_path: Path) -> RegistryStore:
    return RegistryStore(tmp_path / "projects.json")


@pytest.fixture
def workspace(store: RegistryStore, launcher: Launcher) -> Workspace:
    return Workspace(store, launcher, store.load())


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "code" / "api"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def sample_project(project_dir: Path) -> Project:
    return Project(
        slug="api",
        root_path=str(project_dir),
        run_docker=True,
        run_nvim=True,
        startup_commands="npm run dev",
    )
