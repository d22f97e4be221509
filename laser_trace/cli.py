"""Command line runner: load a level, trace it, emit the JSON result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import resolve_paths
from .errors import LaserTraceError
from .level import Level
from .levels import LEVEL_SUFFIX, LevelLoader, load_level_file
from .results import dump_result, write_result
from .trace import trace
from .validate import validate_level

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="laser-trace",
        description="Trace the laser beam through a level and print the result as JSON.",
    )
    parser.add_argument(
        "level",
        nargs="?",
        help="Path to a level JSON file, or the name of a level in the level directory.",
    )
    parser.add_argument("--out", type=Path, help="Write the trace JSON to this file.")
    parser.add_argument(
        "--list-levels",
        action="store_true",
        help="List the levels available in the level directory and exit.",
    )
    parser.add_argument(
        "--include-capped",
        action="store_true",
        help="Add a 'capped' flag telling whether the step limit stopped the beam.",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Trace the level without structural validation.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_level(reference: str, loader: LevelLoader) -> Level:
    path = Path(reference)
    if path.suffix == LEVEL_SUFFIX or path.is_file():
        return load_level_file(path)
    return loader.load(reference)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        paths = resolve_paths(check_exists=False)
        loader = LevelLoader(paths.level_root)

        if args.list_levels:
            names = loader.names() if paths.level_root.exists() else []
            print("Available levels:")
            for name in names:
                print(f"  {name}")
            return 0

        if not args.level:
            parser.error("a level path or name is required")

        level = resolve_level(args.level, loader)
        if not args.no_validate:
            validate_level(level)

        result = trace(level)
        out_path = args.out or paths.out_path
        if out_path is not None:
            write_result(result, out_path, include_capped=args.include_capped)
        else:
            print(dump_result(result, include_capped=args.include_capped))
    except (LaserTraceError, OSError) as exc:
        logger.debug("trace failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation entry point
    sys.exit(main())
