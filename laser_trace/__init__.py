"""Laser Trace package."""

from .errors import (
    LaserTraceError,
    LevelFormatError,
    LevelSaveError,
    LevelValidationError,
    ResultWriteError,
)
from .level import Level, LevelObject, ObjectKind
from .levels import LevelLoader, decode_level, encode_level, load_level_file, parse_level_text
from .optics import Direction, parse_heading, reflect, step
from .results import dump_result, result_to_payload, trace_level_json, write_result
from .trace import Segment, TraceResult, trace
from .validate import check_level, validate_level

__all__ = [
    "Direction",
    "LaserTraceError",
    "Level",
    "LevelFormatError",
    "LevelLoader",
    "LevelObject",
    "LevelSaveError",
    "LevelValidationError",
    "ObjectKind",
    "ResultWriteError",
    "Segment",
    "TraceResult",
    "check_level",
    "decode_level",
    "dump_result",
    "encode_level",
    "load_level_file",
    "parse_heading",
    "parse_level_text",
    "reflect",
    "result_to_payload",
    "step",
    "trace",
    "trace_level_json",
    "validate_level",
    "write_result",
]
