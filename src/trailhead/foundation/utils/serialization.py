"""JSON/YAML serialization utilities.

Provides parsing with clear error messages and atomic file writes.
Callers decide how failures map onto their own error types, so nothing here
swallows exceptions.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def safe_json_loads(data: str) -> Any:
    """Parse JSON with clear error messages.

    Args:
        data: JSON string to parse

    Returns:
        Parsed value

    Raises:
        ValueError: If JSON is invalid (with clear message)

    Example:
        >>> safe_json_loads('[{"slug": "api"}]')
        [{'slug': 'api'}]
    """
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e.msg} at line {e.lineno}, column {e.colno}") from e


def safe_yaml_load(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from a file.

    An empty file loads as an empty dict.

    Raises:
        OSError: If the file cannot be read
        ValueError: If YAML is invalid or not a mapping
    """
    content = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML must contain a mapping, got {type(data).__name__}")
    return data


def atomic_json_dump(obj: Any, path: Path, *, indent: int = 2) -> None:
    """Write JSON through a temp file in the same directory, then rename.

    The parent directory is created if needed. A crash mid-write leaves the
    previous file intact.

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(obj, indent=indent) + "\n"

    fd, tmp_path = tempfile.mkstemp(
        suffix=".tmp",
        prefix=path.stem + "_",
        dir=path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)  # Atomic on POSIX
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

    logger.debug("Wrote %s", path)
