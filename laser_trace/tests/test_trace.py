from pathlib import Path

from laser_trace.level import Level, LevelObject
from laser_trace.levels import LevelLoader
from laser_trace.trace import Segment, TraceResult, step_cap, trace


def fixture_path(*parts: str) -> Path:
    return Path(__file__).resolve().parents[1].joinpath(*parts)


def laser(x: int, y: int, direction: str = "W", ident: str = "L1") -> LevelObject:
    return LevelObject(id=ident, type="laser", x=x, y=y, dir=direction, color="R")


def make_level(*objects: LevelObject, w: int = 10, h: int = 10) -> Level:
    return Level(w=w, h=h, objects=objects)


def test_level_without_laser_yields_empty_result():
    level = make_level(LevelObject(id="W1", type="wall", x=2, y=0))

    result = trace(level)

    assert result == TraceResult()
    assert result.segments == []
    assert not result.hit_wall
    assert not result.hit_target
    assert result.hit_target_id == ""


def test_beam_runs_to_grid_edge():
    result = trace(make_level(laser(5, 0)))

    assert result.segments == [Segment(5, 0, 0, 0)]
    assert not result.hit_wall
    assert not result.hit_target
    assert not result.capped


def test_wall_blocks_beam():
    level = make_level(laser(5, 0), LevelObject(id="W1", type="wall", x=2, y=0))

    result = trace(level)

    assert result.segments == [Segment(5, 0, 2, 0)]
    assert result.hit_wall
    assert not result.hit_target


def test_target_records_hit_id():
    level = make_level(laser(5, 0), LevelObject(id="T1", type="target", x=2, y=0))

    result = trace(level)

    assert result.hit_target
    assert result.hit_target_id == "T1"
    assert not result.hit_wall
    assert result.segments == [Segment(5, 0, 2, 0)]


def test_mirror_on_top_row_reflects_out_of_grid():
    level = make_level(laser(5, 0), LevelObject(id="M1", type="mirror", x=2, y=0, angle=45))

    result = trace(level)

    assert result.segments == [Segment(5, 0, 2, 0), Segment(2, 0, 2, 0)]
    assert not result.hit_wall
    assert not result.hit_target


def test_mirror_turns_beam_towards_target():
    level = make_level(
        laser(5, 5),
        LevelObject(id="M1", type="mirror", x=2, y=5, angle=45),
        LevelObject(id="T1", type="target", x=2, y=1),
    )

    result = trace(level)

    assert result.segments == [Segment(5, 5, 2, 5), Segment(2, 5, 2, 1)]
    assert result.hit_target_id == "T1"


def test_unhandled_mirror_angle_splits_but_keeps_heading():
    level = make_level(laser(5, 0), LevelObject(id="M1", type="mirror", x=2, y=0, angle=90))

    result = trace(level)

    assert result.segments == [Segment(5, 0, 2, 0), Segment(2, 0, 0, 0)]


def test_mirror_without_angle_passes_beam_straight():
    level = make_level(laser(5, 0), LevelObject(id="M1", type="mirror", x=2, y=0))

    result = trace(level)

    assert result.segments == [Segment(5, 0, 2, 0), Segment(2, 0, 0, 0)]


def test_unknown_types_and_other_lasers_are_transparent():
    level = make_level(
        laser(5, 0),
        LevelObject(id="X1", type="crystal", x=4, y=0),
        laser(3, 0, direction="E", ident="L2"),
        LevelObject(id="Y1", type="", x=1, y=0),
    )

    result = trace(level)

    assert result.segments == [Segment(5, 0, 0, 0)]


def test_first_laser_in_sequence_is_the_emitter():
    level = make_level(
        LevelObject(id="W1", type="wall", x=9, y=3),
        laser(5, 3, direction="E", ident="L1"),
        laser(5, 6, direction="W", ident="L2"),
    )

    result = trace(level)

    assert result.segments == [Segment(5, 3, 9, 3)]
    assert result.hit_wall


def test_missing_direction_defaults_to_west():
    level = make_level(LevelObject(id="L1", type="laser", x=3, y=3))

    assert trace(level).segments == [Segment(3, 3, 0, 3)]


def test_laser_facing_edge_produces_single_cell_segment():
    level = make_level(laser(0, 4, direction="W"))

    assert trace(level).segments == [Segment(0, 4, 0, 4)]


def test_duplicate_cell_uses_last_object():
    level = make_level(
        laser(5, 0),
        LevelObject(id="W1", type="wall", x=2, y=0),
        LevelObject(id="T1", type="target", x=2, y=0),
    )

    result = trace(level)

    assert result.hit_target
    assert not result.hit_wall


def test_closed_mirror_loop_stops_at_step_cap():
    level = LevelLoader(fixture_path("levels")).load("level_loop")

    result = trace(level)

    assert result.capped
    assert not result.hit_wall
    assert not result.hit_target
    assert 0 < len(result.segments) <= step_cap(level)
    assert len(result.segments) == 51
    assert result.segments[0] == Segment(2, 1, 3, 1)
    assert result.segments[-1] == Segment(3, 3, 2, 3)


def test_trace_is_repeatable_and_leaves_level_untouched():
    level = LevelLoader(fixture_path("levels")).load("level01")
    snapshot = level.objects

    first = trace(level)
    second = trace(level)

    assert first == second
    assert first is not second
    assert level.objects == snapshot


def test_bundled_level_hits_target():
    level = LevelLoader(fixture_path("levels")).load("level01")

    result = trace(level)

    assert result.segments == [
        Segment(1, 5, 8, 5),
        Segment(8, 5, 8, 10),
        Segment(8, 10, 3, 10),
    ]
    assert result.hit_target_id == "T1"
