"""CLI Error Handler.

Provides unified error handling for the CLI with support for:
- Human-readable output (default)
- JSON output for scripts (--json-errors)

Both go to stderr and end the process with exit code 1.
"""

import json
import sys
from typing import NoReturn

from rich.console import Console
from rich.text import Text

from trailhead.foundation.errors import ErrorCode, TrailheadError


def _wrap(error: TrailheadError | Exception) -> TrailheadError:
    if isinstance(error, TrailheadError):
        return error
    return TrailheadError(
        code=ErrorCode.INTERNAL_ERROR,
        context={"detail": str(error)},
        cause=error,
    )


def handle_error(
    error: TrailheadError | Exception,
    json_output: bool = False,
) -> NoReturn:
    """Report an error on stderr and exit.

    Args:
        error: The error to handle (TrailheadError or generic Exception)
        json_output: If True, write the error as one JSON object

    Raises:
        SystemExit: Always exits with code 1
    """
    error = _wrap(error)

    if json_output:
        print(format_error_for_json(error), file=sys.stderr)
        sys.exit(1)

    _print_human_error(error)
    sys.exit(1)


def _print_human_error(error: TrailheadError) -> None:
    """Print error in human-readable format."""
    console = Console(stderr=True)

    header = Text()
    header.append("✗ ", style="bold")
    header.append(error.error_id, style="bold red")
    header.append(f" {error.message}")
    console.print(header, soft_wrap=True)

    if error.recovery_hints:
        console.print("\n[bold]What you can do:[/]")
        for i, hint in enumerate(error.recovery_hints, 1):
            console.print(Text(f"  {i}. {hint}"), soft_wrap=True)


def format_error_for_json(error: TrailheadError | Exception) -> str:
    """Format an error as a JSON string."""
    error = _wrap(error)
    error_dict = error.to_dict()
    if error.cause:
        error_dict["cause"] = str(error.cause)
    return json.dumps(error_dict)
