"""Layout constants for the trace viewer."""

from __future__ import annotations

from typing import Dict, Tuple

# Window metrics
BOARD_OUTER_PADDING: int = 24
STATUS_BAR_HEIGHT: int = 40
BEAM_WIDTH: int = 3

# Colors expressed as RGB tuples
BACKGROUND_COLOR: Tuple[int, int, int] = (12, 14, 26)
BOARD_BACKGROUND_COLOR: Tuple[int, int, int] = (20, 24, 44)
GRID_LINE_COLOR: Tuple[int, int, int] = (58, 64, 96)
TEXT_COLOR: Tuple[int, int, int] = (232, 236, 244)
BEAM_COLOR: Tuple[int, int, int] = (255, 94, 0)

OBJECT_COLORS: Dict[str, Tuple[int, int, int]] = {
    "laser": (130, 210, 255),
    "wall": (190, 80, 100),
    "mirror": (240, 240, 240),
    "target": (140, 255, 180),
}
UNKNOWN_OBJECT_COLOR: Tuple[int, int, int] = (96, 100, 120)


def window_size(level_width: int, level_height: int, cell_size: int) -> Tuple[int, int]:
    """Pixel size of a window showing the whole board plus the status bar."""

    width = level_width * cell_size + 2 * BOARD_OUTER_PADDING
    height = level_height * cell_size + 2 * BOARD_OUTER_PADDING + STATUS_BAR_HEIGHT
    return width, height
