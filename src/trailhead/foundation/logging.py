"""Logging configuration for Trailhead.

Provides centralized logging setup with sensible defaults:
- Default: WARNING level (quiet operation)
- --debug flag: DEBUG level with full context
- TRAILHEAD_DEBUG=true or TRAILHEAD_LOG_LEVEL=DEBUG env vars: Override for scripting
- Config file: logging.debug: true (persistent)
- Persistent logs: Stored in <home>/logs/ with session rotation

Usage:
    from trailhead.foundation.logging import configure_logging
    configure_logging(debug=args.debug)

Priority for level resolution (highest to lowest):
    1. Explicit `level` parameter (programmatic override)
    2. TRAILHEAD_LOG_LEVEL env var (any level: DEBUG, INFO, WARNING, etc.)
    3. TRAILHEAD_DEBUG=true env var (simple boolean)
    4. `debug=True` parameter (--debug flag or config)
    5. WARNING (default)
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from trailhead.foundation.utils import ensure_dir

# Format includes module path for tracing issues
_DEBUG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
_DEFAULT_FORMAT = "%(name)s: %(message)s"

_NOISY_LOGGERS = ("asyncio",)

_MAX_LOG_SESSIONS = 10


def _cleanup_old_logs(log_dir: Path, max_sessions: int = _MAX_LOG_SESSIONS) -> None:
    """Remove old session logs, keeping only the most recent N."""
    if not log_dir.exists():
        return

    log_files = sorted(
        log_dir.glob("session_*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,  # Newest first
    )

    for old_log in log_files[max_sessions:]:
        try:
            old_log.unlink()
        except OSError:
            pass  # Another invocation may have removed it already


def configure_logging(
    *,
    debug: bool = False,
    level: int | str | None = None,
    stream: object = None,
    log_dir: Path | None = None,
    max_sessions: int = _MAX_LOG_SESSIONS,
) -> Path | None:
    """Configure logging for the Trailhead CLI.

    Call this early in the CLI entrypoint, before the registry is loaded.

    Args:
        debug: Enable DEBUG level with detailed format
        level: Override log level (int or string like "DEBUG", "INFO")
        stream: Output stream (default: stderr)
        log_dir: Directory for per-session log files. None disables them.
        max_sessions: Session log files to keep in log_dir

    Returns:
        Path of the session log file, or None when not persisting.
    """
    resolved_level: int
    if level is not None:
        resolved_level = _parse_level(level)
    elif env_level := os.environ.get("TRAILHEAD_LOG_LEVEL"):
        resolved_level = _parse_level(env_level)
    elif os.environ.get("TRAILHEAD_DEBUG", "").lower() in ("true", "1", "yes"):
        resolved_level = logging.DEBUG
    elif debug:
        resolved_level = logging.DEBUG
    else:
        resolved_level = logging.WARNING

    console_format = _DEBUG_FORMAT if resolved_level <= logging.DEBUG else _DEFAULT_FORMAT

    root_logger = logging.getLogger()
    # File handler needs DEBUG records; the console handler still filters to resolved_level
    root_logger.setLevel(logging.DEBUG if log_dir else resolved_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(console_format))
    root_logger.addHandler(console_handler)

    log_file: Path | None = None
    if log_dir:
        try:
            ensure_dir(log_dir)
            _cleanup_old_logs(log_dir, max_sessions)

            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_file = log_dir / f"session_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(_DEBUG_FORMAT))
            root_logger.addHandler(file_handler)
        except OSError as e:
            # Non-fatal: launching still works without a session log
            sys.stderr.write(f"Warning: Could not enable persistent logging: {e}\n")
            log_file = None

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, debug=%s, log_file=%s",
        logging.getLevelName(resolved_level),
        debug,
        log_file,
    )
    return log_file


def _parse_level(level: int | str) -> int:
    """Parse log level from int or string."""
    if isinstance(level, int):
        return level
    numeric = getattr(logging, level.upper(), None)
    if isinstance(numeric, int):
        return numeric
    try:
        return int(level)
    except ValueError:
        return logging.WARNING
