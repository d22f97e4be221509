"""Beam walker: follows the first laser through the grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .grid import OccupancyIndex
from .level import Level, ObjectKind
from .optics import parse_heading, reflect, step

logger = logging.getLogger(__name__)

# Iterations allowed per grid cell before the walk is force-stopped.
STEP_CAP_FACTOR = 4


@dataclass(frozen=True)
class Segment:
    """Straight beam leg; both end cells are inclusive."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def start(self) -> Tuple[int, int]:
        return self.x0, self.y0

    @property
    def end(self) -> Tuple[int, int]:
        return self.x1, self.y1


@dataclass
class TraceResult:
    """Polyline and terminal event of a single trace.

    ``hit_target_id`` is only meaningful when ``hit_target`` is set.
    ``capped`` marks a walk stopped by the iteration cap rather than by the
    grid edge; both cases otherwise look the same.
    """

    segments: List[Segment] = field(default_factory=list)
    hit_wall: bool = False
    hit_target: bool = False
    hit_target_id: str = ""
    capped: bool = False


def step_cap(level: Level) -> int:
    return STEP_CAP_FACTOR * level.w * level.h


def trace(level: Level) -> TraceResult:
    """Trace the beam of the first ``laser`` object in ``level``.

    The walk never raises and never mutates ``level``. A level without a
    laser yields an empty result.
    """

    result = TraceResult()

    emitter = level.first_of_kind(ObjectKind.LASER)
    if emitter is None:
        logger.debug("no laser in level %r, nothing to trace", level.name)
        return result

    occupancy = OccupancyIndex.build(level.objects)
    heading = parse_heading(emitter.dir)
    x, y = emitter.x, emitter.y
    start_x, start_y = x, y

    for _ in range(step_cap(level)):
        dx, dy = step(heading)
        nx, ny = x + dx, y + dy

        if not level.inside((nx, ny)):
            result.segments.append(Segment(start_x, start_y, x, y))
            logger.debug("beam left the grid at (%d, %d)", x, y)
            return result

        x, y = nx, ny
        hit = occupancy.lookup(x, y)
        if hit is None:
            continue

        kind = hit.kind
        if kind is ObjectKind.WALL:
            result.segments.append(Segment(start_x, start_y, x, y))
            result.hit_wall = True
            logger.debug("beam blocked by wall %r at (%d, %d)", hit.id, x, y)
            return result

        if kind is ObjectKind.TARGET:
            result.segments.append(Segment(start_x, start_y, x, y))
            result.hit_target = True
            result.hit_target_id = hit.id
            logger.debug("beam reached target %r at (%d, %d)", hit.id, x, y)
            return result

        if kind is ObjectKind.MIRROR:
            result.segments.append(Segment(start_x, start_y, x, y))
            heading = reflect(heading, hit.angle)
            start_x, start_y = x, y

    result.segments.append(Segment(start_x, start_y, x, y))
    result.capped = True
    logger.debug(
        "beam stopped after %d steps at (%d, %d)", step_cap(level), x, y
    )
    return result
