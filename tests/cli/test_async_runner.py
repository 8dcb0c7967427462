"""Tests for the CLI's bridge from click commands to async launching."""

import asyncio

import pytest

from trailhead.foundation.errors import ProjectNotFoundError
from trailhead.interface.cli.core.async_runner import run_async


class TestRunAsync:
    """Tests for run_async."""

    def test_returns_launch_result(self, workspace, sample_project, spawner) -> None:
        """A workspace launch can be driven from synchronous code."""
        workspace.register(sample_project)

        result = run_async(workspace.run("api"))

        assert result.slug == "api"
        assert spawner.commands == ["npm run dev", "nvim", "docker compose up"]

    def test_propagates_exceptions(self, workspace) -> None:
        """Errors raised by the coroutine reach the caller unchanged."""
        with pytest.raises(ProjectNotFoundError):
            run_async(workspace.run("missing"))

    def test_refuses_nested_event_loop(self) -> None:
        """Calling from inside a running loop is an error, not a deadlock."""

        async def inner() -> str:
            return "never"

        async def outer() -> None:
            run_async(inner())

        with pytest.raises(RuntimeError, match="running event loop"):
            asyncio.run(outer())

