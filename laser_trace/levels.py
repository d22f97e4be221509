"""Load level files stored as JSON."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .errors import LevelFormatError, LevelSaveError
from .level import DEFAULT_CELL_SIZE, Level, LevelObject

logger = logging.getLogger(__name__)

LEVEL_SUFFIX = ".json"
TEMP_PREFIX = "__"
_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_\-.]")


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    return str(value)


def _optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LevelFormatError(f"JSON schema error: {key} must be a number, got {value!r}")
    return int(value)


def _decode_object(data: Mapping[str, Any]) -> LevelObject:
    if not isinstance(data, Mapping):
        raise LevelFormatError(f"JSON schema error: object entry must be a mapping, got {data!r}")
    return LevelObject(
        id=str(data.get("id", "")),
        type=str(data.get("type", "")),
        x=int(data.get("x", 0)),
        y=int(data.get("y", 0)),
        dir=_optional_str(data, "dir"),
        color=_optional_str(data, "color"),
        angle=_optional_int(data, "angle"),
    )


def flatten_authoring_level(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a version 2 authoring level into the version 1 shape.

    Fixed objects come first, then the initial player placements and the
    stored solution, matching what the level editor traces.
    """

    dev = data.get("dev") or {}
    meta = data.get("meta") or {}
    objects: List[Any] = list(data.get("fixed") or [])
    objects.extend(data.get("initialPlayer") or [])
    objects.extend(dev.get("solution") or [])
    return {
        "version": 1,
        "meta": {"name": meta.get("name", ""), "author": meta.get("author", "")},
        "grid": dict(data["grid"]),
        "objects": objects,
    }


def decode_level(data: Mapping[str, Any]) -> Level:
    if not isinstance(data, Mapping):
        raise LevelFormatError("JSON schema error: level must be a JSON object")
    try:
        if data.get("version") == 2 and "fixed" in data:
            data = flatten_authoring_level(data)
        version = int(data["version"])
        meta = data["meta"]
        name = str(meta.get("name") or "")
        author = str(meta.get("author") or "")
        grid = data["grid"]
        w = int(grid["w"])
        h = int(grid["h"])
        cell_size = int(grid["cellSize"])
        raw_objects = data["objects"]
        if not isinstance(raw_objects, list):
            raise LevelFormatError("JSON schema error: objects must be a list")
        objects = tuple(_decode_object(entry) for entry in raw_objects)
    except LevelFormatError:
        raise
    except KeyError as exc:
        raise LevelFormatError(f"JSON schema error: missing key {exc}") from exc
    except (TypeError, ValueError, OverflowError, AttributeError) as exc:
        raise LevelFormatError(f"JSON schema error: {exc}") from exc

    return Level(
        w=w,
        h=h,
        objects=objects,
        cell_size=cell_size,
        version=version,
        name=name,
        author=author,
    )


def encode_level(level: Level) -> Dict[str, Any]:
    objects: List[Dict[str, Any]] = []
    for obj in level.objects:
        entry: Dict[str, Any] = {"id": obj.id, "type": obj.type, "x": obj.x, "y": obj.y}
        if obj.dir is not None:
            entry["dir"] = obj.dir
        if obj.color is not None:
            entry["color"] = obj.color
        if obj.angle is not None:
            entry["angle"] = obj.angle
        objects.append(entry)
    return {
        "version": level.version,
        "meta": {"name": level.name, "author": level.author},
        "grid": {"w": level.w, "h": level.h, "cellSize": level.cell_size or DEFAULT_CELL_SIZE},
        "objects": objects,
    }


def parse_level_text(text: str) -> Level:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise LevelFormatError(f"JSON parse error: {exc}") from exc
    return decode_level(data)


def sanitize_name(name: str) -> str:
    """Turn a level name into a file name that stays inside the level root.

    Every character other than letters, digits, ``_``, ``-`` and ``.`` is
    dropped, so separators cannot reach a parent directory.
    """

    safe = _UNSAFE_NAME_CHARS.sub("", name)
    if not safe.endswith(LEVEL_SUFFIX):
        safe += LEVEL_SUFFIX
    return safe


def load_level_file(path: Path) -> Level:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LevelFormatError(f"JSON parse error: {path} is not UTF-8 text: {exc}") from exc
    level = parse_level_text(text)
    logger.info("loaded level %r (%dx%d, %d objects) from %s",
                level.name, level.w, level.h, len(level.objects), path)
    return level


class LevelLoader:
    """Load level files stored as JSON under a root directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / sanitize_name(name)

    def load(self, name: str) -> Level:
        return load_level_file(self.path_for(name))

    def save(self, name: str, level: Level) -> Path:
        """Write ``level`` under the root via a temporary file and an atomic replace."""

        path = self.path_for(name)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(encode_level(level), indent=2), encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            if tmp.exists():
                tmp.unlink()
            raise LevelSaveError(f"Failed to save level to {path}: {exc}") from exc
        logger.info("saved level %r to %s", level.name, path)
        return path

    def names(self) -> List[str]:
        return sorted(
            path.stem
            for path in self.root.glob(f"*{LEVEL_SUFFIX}")
            if not path.stem.startswith(TEMP_PREFIX)
        )
