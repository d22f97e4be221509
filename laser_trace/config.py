"""Resolve level and output locations from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LEVEL_ENV_VAR = "LASER_TRACE_LEVEL_ROOT"
OUT_ENV_VAR = "LASER_TRACE_OUT"


@dataclass(frozen=True)
class TracePaths:
    """Bundle with the resolved level directory and optional output file."""

    level_root: Path
    out_path: Optional[Path] = None


def _default_level_root() -> Path:
    return Path(__file__).resolve().parent / "levels"


def _read_path(env_var: str) -> Optional[Path]:
    value = os.environ.get(env_var)
    if value:
        return Path(value).expanduser()
    return None


def resolve_paths(check_exists: bool = True) -> TracePaths:
    """Resolve paths using environment variables.

    Parameters
    ----------
    check_exists:
        When *True*, raise :class:`FileNotFoundError` if the level directory
        does not exist. The output path is never checked since it is created
        on write.
    """

    level_root = _read_path(LEVEL_ENV_VAR) or _default_level_root()
    out_path = _read_path(OUT_ENV_VAR)

    if check_exists and not level_root.exists():
        raise FileNotFoundError(f"Level directory does not exist: {level_root}")

    return TracePaths(level_root=level_root, out_path=out_path)
