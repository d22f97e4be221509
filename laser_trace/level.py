"""In-memory level model consumed by the tracing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


DEFAULT_CELL_SIZE = 32


class ObjectKind(Enum):
    """Object types the engine reacts to."""

    LASER = "laser"
    WALL = "wall"
    MIRROR = "mirror"
    TARGET = "target"
    OTHER = ""

    @staticmethod
    def from_type(type_name: str) -> "ObjectKind":
        try:
            return ObjectKind(type_name)
        except ValueError:
            return ObjectKind.OTHER


@dataclass(frozen=True)
class LevelObject:
    """One placed entity.

    ``dir`` only matters for lasers and ``angle`` only for mirrors.
    ``color`` is carried through untouched.
    """

    id: str
    type: str
    x: int
    y: int
    dir: Optional[str] = None
    color: Optional[str] = None
    angle: Optional[int] = None

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.from_type(self.type)

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Level:
    """Grid dimensions plus the ordered object sequence."""

    w: int
    h: int
    objects: Tuple[LevelObject, ...] = field(default_factory=tuple)
    cell_size: int = DEFAULT_CELL_SIZE
    version: int = 1
    name: str = ""
    author: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple.
        if not isinstance(self.objects, tuple):
            object.__setattr__(self, "objects", tuple(self.objects))

    def inside(self, position: Tuple[int, int]) -> bool:
        x, y = position
        return 0 <= x < self.w and 0 <= y < self.h

    def first_of_kind(self, kind: ObjectKind) -> Optional[LevelObject]:
        for obj in self.objects:
            if obj.kind is kind:
                return obj
        return None
