import json
from pathlib import Path

import pytest

from laser_trace.errors import ResultWriteError
from laser_trace.results import dump_result, result_to_payload, trace_level_json, write_result
from laser_trace.trace import Segment, TraceResult


def sample_result() -> TraceResult:
    return TraceResult(
        segments=[Segment(5, 0, 2, 0), Segment(2, 0, 2, 4)],
        hit_target=True,
        hit_target_id="T1",
    )


def test_payload_uses_wire_keys():
    payload = result_to_payload(sample_result())

    assert payload == {
        "hitWall": False,
        "hitTarget": True,
        "hitTargetId": "T1",
        "segments": [
            {"x0": 5, "y0": 0, "x1": 2, "y1": 0},
            {"x0": 2, "y0": 0, "x1": 2, "y1": 4},
        ],
    }


def test_capped_flag_is_opt_in():
    result = TraceResult(segments=[Segment(0, 0, 1, 0)], capped=True)

    assert "capped" not in result_to_payload(result)
    assert result_to_payload(result, include_capped=True)["capped"] is True


def test_dump_result_is_json():
    assert json.loads(dump_result(sample_result()))["hitTargetId"] == "T1"


def test_write_result_creates_parent_directories(tmp_path: Path):
    destination = tmp_path / "out" / "trace.json"

    written = write_result(sample_result(), destination)

    assert written == destination
    assert json.loads(destination.read_text())["segments"][1]["y1"] == 4
    assert not destination.with_suffix(".json.tmp").exists()


def test_write_result_wraps_os_errors(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    with pytest.raises(ResultWriteError):
        write_result(sample_result(), blocker / "trace.json")


def test_trace_level_json_round_trip():
    level = {
        "version": 1,
        "meta": {"name": "Bridge"},
        "grid": {"w": 10, "h": 10, "cellSize": 32},
        "objects": [
            {"id": "L1", "type": "laser", "x": 5, "y": 0, "dir": "W"},
            {"id": "W1", "type": "wall", "x": 2, "y": 0},
        ],
    }

    reply = json.loads(trace_level_json(json.dumps(level)))

    assert reply["ok"] is True
    assert reply["hitWall"] is True
    assert reply["segments"] == [{"x0": 5, "y0": 0, "x1": 2, "y1": 0}]


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("{broken", "JSON parse error"),
        ('{"version": 1}', "JSON schema error"),
        (None, "null input"),
    ],
)
def test_trace_level_json_reports_errors(text, fragment):
    reply = json.loads(trace_level_json(text))

    assert reply["ok"] is False
    assert fragment in reply["error"]


@pytest.mark.parametrize(
    "text, fragment",
    [
        (
            '{"version": 1, "meta": {}, "grid": {"w": 1e999, "h": 4, "cellSize": 32}, "objects": []}',
            "JSON schema error",
        ),
        ("[" * 200000 + "]" * 200000, "JSON parse error"),
    ],
)
def test_trace_level_json_survives_hostile_input(text, fragment):
    reply = json.loads(trace_level_json(text))

    assert reply["ok"] is False
    assert fragment in reply["error"]
