"""Serialize trace results into the JSON shape used by level tooling."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .errors import LaserTraceError, ResultWriteError
from .levels import parse_level_text
from .trace import TraceResult, trace

logger = logging.getLogger(__name__)


def result_to_payload(result: TraceResult, *, include_capped: bool = False) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "hitWall": result.hit_wall,
        "hitTarget": result.hit_target,
        "hitTargetId": result.hit_target_id,
        "segments": [
            {"x0": seg.x0, "y0": seg.y0, "x1": seg.x1, "y1": seg.y1}
            for seg in result.segments
        ],
    }
    if include_capped:
        payload["capped"] = result.capped
    return payload


def dump_result(result: TraceResult, *, include_capped: bool = False) -> str:
    return json.dumps(result_to_payload(result, include_capped=include_capped), indent=2)


def write_result(result: TraceResult, path: Path, *, include_capped: bool = False) -> Path:
    """Write ``result`` to ``path`` via a temporary file and an atomic replace."""

    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(dump_result(result, include_capped=include_capped), encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        if tmp.exists():
            tmp.unlink()
        raise ResultWriteError(f"Failed to write trace to {path}: {exc}") from exc
    logger.info("wrote trace with %d segments to %s", len(result.segments), path)
    return path


def trace_level_json(text: str, *, include_capped: bool = False) -> str:
    """Trace a level given as JSON text and answer with JSON text.

    Decoding problems are reported in the reply (``{"ok": false, ...}``)
    instead of being raised.
    """

    if text is None:
        return json.dumps({"ok": False, "error": "null input"})
    try:
        level = parse_level_text(text)
    except LaserTraceError as exc:
        return json.dumps({"ok": False, "error": str(exc)})
    reply: Dict[str, Any] = {"ok": True}
    reply.update(result_to_payload(trace(level), include_capped=include_capped))
    return json.dumps(reply)
