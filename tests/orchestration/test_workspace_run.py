"""Tests for Workspace: registration and running projects."""

import json
from pathlib import Path

import pytest

from trailhead.foundation.config import load_config
from trailhead.foundation.errors import (
    DuplicateSlugError,
    InvalidRootPathError,
    InvalidSlugError,
    ProjectNotFoundError,
)
from trailhead.launch import TerminalSpawner
from trailhead.orchestration import Workspace
from trailhead.project import Project


class TestOpen:
    def test_open_creates_registry_under_home(self, isolated_home: Path) -> None:
        workspace = Workspace.open(load_config())

        assert workspace.store.path == isolated_home / "projects.json"
        assert json.loads(workspace.store.path.read_text()) == []
        assert isinstance(workspace.launcher.spawner, TerminalSpawner)

    def test_open_uses_given_spawner(self, spawner) -> None:
        workspace = Workspace.open(load_config(), spawner=spawner)
        assert workspace.launcher.spawner is spawner


class TestRegistration:
    def test_register_saves(self, workspace: Workspace, sample_project: Project) -> None:
        workspace.register(sample_project)

        assert workspace.store.load().find("api") == sample_project
        assert workspace.registry.slugs == ["api"]

    def test_register_duplicate(self, workspace: Workspace, sample_project: Project) -> None:
        workspace.register(sample_project)
        before = workspace.store.path.read_bytes()

        with pytest.raises(DuplicateSlugError):
            workspace.register(Project(slug="api", root_path="/elsewhere"))

        assert workspace.store.path.read_bytes() == before
        assert len(workspace.registry) == 1

    def test_register_reserved_slug(self, workspace: Workspace) -> None:
        with pytest.raises(InvalidSlugError):
            workspace.register(Project(slug="projects", root_path="/srv"))

    def test_root_path_not_checked_at_registration(self, workspace: Workspace, tmp_path: Path) -> None:
        workspace.register(Project(slug="later", root_path=str(tmp_path / "not-yet")))
        assert "later" in workspace.registry

    def test_unregister(self, workspace: Workspace, sample_project: Project) -> None:
        workspace.register(sample_project)

        removed = workspace.unregister("api")

        assert removed == sample_project
        assert len(workspace.store.load()) == 0

    def test_unregister_missing(self, workspace: Workspace) -> None:
        with pytest.raises(ProjectNotFoundError):
            workspace.unregister("api")

    def test_listing(self, workspace: Workspace, sample_project: Project) -> None:
        workspace.register(sample_project)
        workspace.register(Project(slug="web", root_path="~/code/web"))

        assert workspace.listing() == [
            f"- api ({sample_project.root_path})",
            "- web (~/code/web)",
        ]


class TestRun:
    @pytest.mark.asyncio
    async def test_run_unknown_slug(self, workspace: Workspace, spawner) -> None:
        with pytest.raises(ProjectNotFoundError):
            await workspace.run("nope")
        assert spawner.requests == []

    @pytest.mark.asyncio
    async def test_run_invalid_root(self, workspace: Workspace, tmp_path: Path) -> None:
        workspace.register(Project(slug="gone", root_path=str(tmp_path / "gone"), run_nvim=True))

        with pytest.raises(InvalidRootPathError):
            await workspace.run("gone")

    @pytest.mark.asyncio
    async def test_run_all_continues_past_bad_root(self, workspace: Workspace, spawner, tmp_path: Path) -> None:
        """The second project's root is missing; the first and third still launch."""
        for name in ("one", "three"):
            (tmp_path / name).mkdir()
        workspace.register(Project(slug="one", root_path=str(tmp_path / "one"), run_nvim=True))
        workspace.register(Project(slug="two", root_path=str(tmp_path / "two"), run_nvim=True))
        workspace.register(Project(slug="three", root_path=str(tmp_path / "three"), run_docker=True))

        outcomes = await workspace.run_all()

        assert [o.slug for o in outcomes] == ["one", "two", "three"]
        assert [o.launched for o in outcomes] == [True, False, True]
        assert isinstance(outcomes[1].error, InvalidRootPathError)
        assert [r.cwd for r in spawner.requests] == [tmp_path / "one", tmp_path / "three"]
        assert spawner.commands == ["nvim", "docker compose up"]

    @pytest.mark.asyncio
    async def test_run_all_empty(self, workspace: Workspace, spawner) -> None:
        assert await workspace.run_all() == []
        assert spawner.requests == []

    @pytest.mark.asyncio
    async def test_run_all_continues_past_rejected_command(self, workspace: Workspace, spawner, tmp_path: Path) -> None:
        for name in ("one", "two"):
            (tmp_path / name).mkdir()
        workspace.register(Project(slug="one", root_path=str(tmp_path / "one"), startup_commands="bad\x00cmd"))
        workspace.register(Project(slug="two", root_path=str(tmp_path / "two"), run_nvim=True))
        spawner.raise_on["bad\x00cmd"] = ValueError("embedded null byte")

        outcomes = await workspace.run_all()

        assert [o.launched for o in outcomes] == [True, True]
        assert not outcomes[0].result.ok
        assert spawner.commands == ["bad\x00cmd", "nvim"]
