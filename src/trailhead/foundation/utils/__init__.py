"""Shared utilities with no domain knowledge."""

from trailhead.foundation.utils.paths import (
    HOME_ENV_VAR,
    ensure_dir,
    normalize_path,
    trailhead_home,
)
from trailhead.foundation.utils.serialization import (
    atomic_json_dump,
    safe_json_loads,
    safe_yaml_load,
)

__all__ = [
    "HOME_ENV_VAR",
    "atomic_json_dump",
    "ensure_dir",
    "normalize_path",
    "safe_json_loads",
    "safe_yaml_load",
    "trailhead_home",
]
