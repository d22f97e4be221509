"""Headings and mirror reflection rules for the beam."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class Direction(Enum):
    """Cardinal headings; the value is the unit step (y grows downward)."""

    N = (0, -1)
    E = (1, 0)
    S = (0, 1)
    W = (-1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value


# "\" mirror
_BACKSLASH: Dict[Direction, Direction] = {
    Direction.N: Direction.W,
    Direction.W: Direction.N,
    Direction.S: Direction.E,
    Direction.E: Direction.S,
}

# "/" mirror
_SLASH: Dict[Direction, Direction] = {
    Direction.N: Direction.E,
    Direction.E: Direction.N,
    Direction.S: Direction.W,
    Direction.W: Direction.S,
}

REFLECTIONS: Dict[int, Dict[Direction, Direction]] = {
    45: _BACKSLASH,
    135: _SLASH,
}


def step(direction: Direction) -> Tuple[int, int]:
    return direction.vector


def parse_heading(value: Optional[str]) -> Direction:
    """Map a serialized heading to a :class:`Direction`.

    Only ``"N"``, ``"E"`` and ``"S"`` are matched; every other value,
    including ``None`` and the empty string, falls back to ``W``.
    """

    if value == "N":
        return Direction.N
    if value == "E":
        return Direction.E
    if value == "S":
        return Direction.S
    return Direction.W


def reflect(direction: Direction, angle: Optional[int]) -> Direction:
    """Return the heading after entering a mirror with the given angle.

    Angles without a reflection rule leave the heading unchanged.
    """

    mapping = REFLECTIONS.get(angle) if angle is not None else None
    if mapping is None:
        return direction
    return mapping[direction]
