"""Tests for 'trailhead projects'."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from trailhead.interface.cli.core.main import main
from trailhead.orchestration import Workspace
from trailhead.project import Project


def invoke(workspace: Workspace, args: list[str], input: str | None = None):
    return CliRunner().invoke(main, args, obj={"workspace": workspace}, input=input)


class TestProjectsAdd:
    """Tests for 'trailhead projects --add'."""

    def test_add_with_defaults(self, workspace: Workspace, project_dir: Path) -> None:
        result = invoke(workspace, ["projects", "--add"], input=f"{project_dir}\napi\n\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Project api added successfully!" in result.output
        assert workspace.store.load().find("api") == Project(
            slug="api",
            root_path=str(project_dir),
            run_docker=True,
            run_nvim=True,
            startup_commands="echo 'Project is getting started'",
        )

    def test_add_short_flag_with_answers(self, workspace: Workspace) -> None:
        result = invoke(workspace, ["projects", "-a"], input="~/code/web\nweb\nn\ny\nnpm start\n")

        assert result.exit_code == 0, result.output
        saved = workspace.store.load().find("web")
        assert saved.root_path == "~/code/web"
        assert saved.run_docker is False
        assert saved.run_nvim is True
        assert saved.startup_commands == "npm start"

    def test_duplicate_slug_is_asked_again(self, workspace: Workspace) -> None:
        workspace.register(Project(slug="api", root_path="/srv/api"))

        result = invoke(workspace, ["projects", "--add"], input="/srv/api2\napi\napi2\ny\ny\n\n")

        assert result.exit_code == 0, result.output
        assert "Slug api already exists. Please choose another." in result.output
        assert workspace.store.load().slugs == ["api", "api2"]

    def test_reserved_slug_is_asked_again(self, workspace: Workspace) -> None:
        result = invoke(workspace, ["projects", "--add"], input="/srv/x\nrun\nx\ny\ny\n\n")

        assert result.exit_code == 0, result.output
        assert "built-in command name" in result.output
        assert workspace.store.load().slugs == ["x"]

    def test_abort_leaves_registry_unchanged(self, workspace: Workspace) -> None:
        result = invoke(workspace, ["projects", "--add"], input="/srv/x\n")

        assert result.exit_code != 0
        assert len(workspace.store.load()) == 0


class TestProjectsList:
    def test_one_line_per_project(self, workspace: Workspace) -> None:
        workspace.register(Project(slug="api", root_path="/srv/api"))
        workspace.register(Project(slug="web", root_path="~/code/[web]"))

        result = invoke(workspace, ["projects", "--list"])

        assert result.exit_code == 0
        assert result.output == "- api (/srv/api)\n- web (~/code/[web])\n"

    def test_empty(self, workspace: Workspace) -> None:
        result = invoke(workspace, ["projects", "-l"])

        assert result.exit_code == 0
        assert result.output == "No projects found.\n"

    def test_json(self, workspace: Workspace) -> None:
        workspace.register(Project(slug="api", root_path="/srv/api", run_docker=True))

        result = invoke(workspace, ["projects", "--list", "--json"])

        assert json.loads(result.output) == [{
            "rootPath": "/srv/api",
            "slug": "api",
            "runDocker": True,
            "runNvim": False,
            "startupCommands": "",
        }]


class TestProjectsRemove:
    def test_remove(self, workspace: Workspace) -> None:
        workspace.register(Project(slug="api", root_path="/srv/api"))
        workspace.register(Project(slug="web", root_path="/srv/web"))

        result = invoke(workspace, ["projects", "--remove", "api"])

        assert result.exit_code == 0
        assert "Project api removed successfully!" in result.output
        assert workspace.store.load().slugs == ["web"]

    def test_remove_missing(self, workspace: Workspace) -> None:
        workspace.register(Project(slug="web", root_path="/srv/web"))
        before = workspace.store.path.read_bytes()

        result = invoke(workspace, ["projects", "--remove", "api"])

        assert result.exit_code == 1
        assert "Project with slug api not found." in result.output
        assert workspace.store.path.read_bytes() == before


class TestProjectsDispatch:
    def test_no_option_prints_help(self, workspace: Workspace) -> None:
        result = invoke(workspace, ["projects"])

        assert result.exit_code == 0
        assert "--add" in result.output
        assert "--remove" in result.output

    def test_list_wins_over_remove(self, workspace: Workspace) -> None:
        workspace.register(Project(slug="api", root_path="/srv/api"))

        result = invoke(workspace, ["projects", "--remove", "api", "--list"])

        assert result.output == "- api (/srv/api)\n"
        assert workspace.store.load().slugs == ["api"]

    def test_run(self, workspace: Workspace, sample_project: Project, spawner) -> None:
        workspace.register(sample_project)

        result = invoke(workspace, ["projects", "-r", "api"])

        assert result.exit_code == 0, result.output
        assert spawner.commands == ["npm run dev", "nvim", "docker compose up"]


@pytest.mark.usefixtures("restore_root_logger")
class TestBootstrap:
    """Invocations that open the workspace from TRAILHEAD_HOME."""

    def test_first_run_creates_registry(self, isolated_home: Path) -> None:
        result = CliRunner().invoke(main, ["projects", "--list"])

        assert result.exit_code == 0, result.output
        assert result.output == "No projects found.\n"
        assert json.loads((isolated_home / "projects.json").read_text()) == []

    def test_corrupt_registry_is_fatal(self, isolated_home: Path) -> None:
        isolated_home.mkdir(parents=True)
        (isolated_home / "projects.json").write_text("{oops")

        result = CliRunner().invoke(main, ["projects", "--list"])

        assert result.exit_code == 1
        assert "TH-1001" in result.output
        assert (isolated_home / "projects.json").read_text() == "{oops"

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(
            main, ["--json-errors", "--config", str(tmp_path / "nope.yaml"), "projects", "-l"]
        )

        assert result.exit_code == 1
        assert json.loads(result.output.strip().splitlines()[-1])["error_id"] == "TH-5001"
