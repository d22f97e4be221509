"""Cell to object lookup built from a level's object sequence."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

from .level import LevelObject

Cell = Tuple[int, int]


class OccupancyIndex:
    """Maps ``(x, y)`` cells to positions in the source object sequence.

    Only integer positions are stored, so the index never outlives the
    sequence it was built from. When two objects share a cell the later one
    in sequence order wins.
    """

    def __init__(self, objects: Sequence[LevelObject], cells: Dict[Cell, int]):
        self._objects = objects
        self._cells = cells

    @classmethod
    def build(cls, objects: Iterable[LevelObject]) -> "OccupancyIndex":
        items = tuple(objects)
        cells: Dict[Cell, int] = {}
        for position, obj in enumerate(items):
            cells[(obj.x, obj.y)] = position
        return cls(items, cells)

    def index_of(self, x: int, y: int) -> Optional[int]:
        return self._cells.get((x, y))

    def lookup(self, x: int, y: int) -> Optional[LevelObject]:
        position = self._cells.get((x, y))
        if position is None:
            return None
        return self._objects[position]

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)
