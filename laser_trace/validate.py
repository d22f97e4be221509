"""Structural checks applied to a level before it is traced."""

from __future__ import annotations

from typing import Optional, Set, Tuple

from .errors import LevelValidationError
from .level import Level


def check_level(level: Level) -> Optional[str]:
    """Return the first structural problem found in ``level``, if any."""

    if level.w <= 0 or level.h <= 0:
        return "Grid size must be > 0"

    used: Set[Tuple[int, int]] = set()
    for obj in level.objects:
        if not obj.id:
            return "Object with empty id"
        if not obj.type:
            return f"Object {obj.id} has empty type"
        if not level.inside(obj.position):
            return f"Object {obj.id} out of bounds: ({obj.x},{obj.y})"
        if obj.position in used:
            return f"Two objects share the same cell: ({obj.x},{obj.y})"
        used.add(obj.position)
    return None


def validate_level(level: Level) -> Level:
    error = check_level(level)
    if error is not None:
        raise LevelValidationError(error)
    return level
