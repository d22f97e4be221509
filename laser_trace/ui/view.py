"""Deterministic pygame rendering of a level and its traced beam.

Rendering targets an off-screen surface by default so the view can be
exercised under the SDL ``dummy`` video driver.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

from ..grid import OccupancyIndex
from ..level import Level, LevelObject
from ..trace import TraceResult
from . import layout


# pygame is only needed for rendering; the import is deferred so callers can
# pick the SDL drivers first.
_PYGAME = None


def ensure_pygame():
    global _PYGAME
    if _PYGAME is None:
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        _PYGAME = __import__("pygame")
        _PYGAME.display.init()
        _PYGAME.font.init()
    return _PYGAME


class TraceView:
    """Draws the grid, the placed objects and the beam polyline."""

    def __init__(
        self,
        level: Level,
        result: TraceResult,
        *,
        cell_size: Optional[int] = None,
        surface=None,
        origin: Tuple[int, int] = (0, 0),
    ) -> None:
        pygame = ensure_pygame()
        self.level = level
        self.result = result
        self.cell_size = cell_size or level.cell_size
        self.origin = origin
        width = level.w * self.cell_size
        height = level.h * self.cell_size
        self.surface = surface or pygame.Surface((width, height))
        self.font = pygame.font.Font(pygame.font.get_default_font(), max(10, self.cell_size // 2))
        self.occupancy = OccupancyIndex.build(level.objects)

    def cell_topleft(self, x: int, y: int) -> Tuple[int, int]:
        return (
            self.origin[0] + x * self.cell_size,
            self.origin[1] + y * self.cell_size,
        )

    def cell_center(self, x: int, y: int) -> Tuple[int, int]:
        left, top = self.cell_topleft(x, y)
        return left + self.cell_size // 2, top + self.cell_size // 2

    def cell_from_pixel(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        cell = (
            (pos[0] - self.origin[0]) // self.cell_size,
            (pos[1] - self.origin[1]) // self.cell_size,
        )
        if not self.level.inside(cell):
            return None
        return cell

    def describe_cell(self, pos: Tuple[int, int]) -> str:
        """Hover text for the cell under ``pos``, naming the object the beam sees."""

        cell = self.cell_from_pixel(pos)
        if cell is None:
            return ""
        obj = self.occupancy.lookup(*cell)
        if obj is None:
            return f"({cell[0]}, {cell[1]})"
        return f"({cell[0]}, {cell[1]}) {obj.type} {obj.id}"

    def render(self):
        self._draw_board()
        for obj in self.level.objects:
            self._draw_object(obj)
        self._draw_beam()
        return self.surface

    def _draw_board(self) -> None:
        pygame = ensure_pygame()
        board = pygame.Rect(
            self.origin[0],
            self.origin[1],
            self.level.w * self.cell_size,
            self.level.h * self.cell_size,
        )
        self.surface.fill(layout.BOARD_BACKGROUND_COLOR, board)
        for x in range(self.level.w):
            for y in range(self.level.h):
                rect = pygame.Rect(*self.cell_topleft(x, y), self.cell_size, self.cell_size)
                pygame.draw.rect(self.surface, layout.GRID_LINE_COLOR, rect, 1)

    def _draw_object(self, obj: LevelObject) -> None:
        pygame = ensure_pygame()
        if not self.level.inside(obj.position):
            return
        color = layout.OBJECT_COLORS.get(obj.type, layout.UNKNOWN_OBJECT_COLOR)
        rect = pygame.Rect(*self.cell_topleft(obj.x, obj.y), self.cell_size, self.cell_size)
        inset = max(2, self.cell_size // 8)
        if obj.type == "mirror":
            left, top = rect.topleft
            right, bottom = rect.right - 1, rect.bottom - 1
            if obj.angle == 45:
                pygame.draw.line(self.surface, color, (left + inset, top + inset), (right - inset, bottom - inset), 3)
            elif obj.angle == 135:
                pygame.draw.line(self.surface, color, (left + inset, bottom - inset), (right - inset, top + inset), 3)
            else:
                pygame.draw.rect(self.surface, color, rect.inflate(-2 * inset, -2 * inset), 1)
            return
        self.surface.fill(color, rect.inflate(-2 * inset, -2 * inset))
        if obj.type == "laser" and obj.dir:
            self._draw_label(obj, obj.dir)

    def _draw_label(self, obj: LevelObject, text: str) -> None:
        label = self.font.render(text, True, (0, 0, 0))
        rect = label.get_rect()
        rect.center = self.cell_center(obj.x, obj.y)
        self.surface.blit(label, rect)

    def _draw_beam(self) -> None:
        pygame = ensure_pygame()
        for segment in self.result.segments:
            start = self.cell_center(*segment.start)
            end = self.cell_center(*segment.end)
            pygame.draw.line(self.surface, layout.BEAM_COLOR, start, end, layout.BEAM_WIDTH)

    def status_text(self) -> str:
        if self.result.hit_target:
            return f"Target {self.result.hit_target_id} hit"
        if self.result.hit_wall:
            return "Beam blocked by a wall"
        if self.result.capped:
            return "Beam stopped after the step limit"
        if not self.result.segments:
            return "No laser in this level"
        return "Beam left the grid"


__all__ = ["TraceView", "ensure_pygame"]
