"""Interactive viewer for traced laser levels."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pygame

from laser_trace.cli import resolve_level
from laser_trace.config import resolve_paths
from laser_trace.levels import LevelLoader
from laser_trace.trace import trace
from laser_trace.ui import TraceView
from laser_trace.ui import layout

DEFAULT_LEVEL = "level01"


def draw_status(surface: pygame.Surface, view: TraceView, font: pygame.font.Font, hover: str) -> None:
    """Render the trace outcome and the hovered cell below the board."""

    width, height = surface.get_size()
    bar = pygame.Rect(0, height - layout.STATUS_BAR_HEIGHT, width, layout.STATUS_BAR_HEIGHT)
    pygame.draw.rect(surface, layout.BACKGROUND_COLOR, bar)
    text = view.status_text()
    if hover:
        text = f"{text}    {hover}"
    text_surface = font.render(text, True, layout.TEXT_COLOR)
    text_rect = text_surface.get_rect()
    text_rect.midleft = (layout.BOARD_OUTER_PADDING, bar.centery)
    surface.blit(text_surface, text_rect)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Laser trace viewer")
    parser.add_argument("level", nargs="?", default=DEFAULT_LEVEL)
    parser.add_argument("--cell-size", type=int, default=None)
    args = parser.parse_args(argv)

    paths = resolve_paths()
    level = resolve_level(args.level, LevelLoader(paths.level_root))
    result = trace(level)

    pygame.init()
    pygame.font.init()

    cell_size = args.cell_size or level.cell_size
    screen = pygame.display.set_mode(layout.window_size(level.w, level.h, cell_size))
    pygame.display.set_caption(f"Laser Trace - {level.name or args.level}")

    origin = (layout.BOARD_OUTER_PADDING, layout.BOARD_OUTER_PADDING)
    view = TraceView(level, result, cell_size=cell_size, surface=screen, origin=origin)
    font = pygame.font.Font(None, 24)

    clock = pygame.time.Clock()
    hover = ""
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                hover = view.describe_cell(event.pos)

        screen.fill(layout.BACKGROUND_COLOR)
        view.render()
        draw_status(screen, view, font, hover)

        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
