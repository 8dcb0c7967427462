"""Unified async execution for CLI commands.

Click commands are synchronous; launching is async. Every command that
launches goes through ``run_async`` so there is exactly one event loop per
invocation.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion from synchronous code.

    Raises:
        RuntimeError: If called while an event loop is already running
        Any exception raised by the coroutine is propagated
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop - this is the normal case for CLI commands
        return asyncio.run(coro)

    coro.close()
    raise RuntimeError("run_async() cannot be called from a running event loop")
