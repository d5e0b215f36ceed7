#!/usr/bin/env python3
"""Command line entry point.

Usage:
    scene-coverage summarize < scene.txt
    scene-coverage --input scene.txt coverage

Every command loads the scene, validates it, then prints its report.

Exit status:
    0 on success
    1 if the scene is malformed or fails validation
    2 on usage errors (argparse)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

import pydantic

from application.report import (
    format_bounding_box,
    format_coverage,
    format_description,
    format_summary,
)
from domain.scene.entities import Scene
from domain.scene.errors import SceneLoadError
from domain.scene.services import validate_scene
from domain.scene.value_objects import ParserLimits
from infrastructure.scene import StreamSceneAdapter

logger = logging.getLogger(__name__)

COMMANDS: dict[str, Callable[[Scene], str]] = {
    "validate": lambda scene: "ok",
    "summarize": format_summary,
    "describe": format_description,
    "bounding-box": format_bounding_box,
    "coverage": format_coverage,
}

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _args(argv: list[str] | None) -> argparse.Namespace:
    defaults = ParserLimits()
    p = argparse.ArgumentParser(
        prog="scene-coverage",
        description="Validate a scene of buildings, houses and antennas "
        "and report its coverage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  scene-coverage summarize < scene.txt\n"
            "  scene-coverage --input scene.txt coverage\n"
        ),
    )
    p.add_argument("command", choices=list(COMMANDS))
    p.add_argument("--input", help="scene file (default: standard input)")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="overrides -v",
    )
    p.add_argument("--max-line-length", type=int, default=defaults.max_line_length)
    p.add_argument("--max-token-length", type=int, default=defaults.max_token_length)
    return p.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_level:
        level = getattr(logging, args.log_level)
    else:
        level = _VERBOSITY_LEVELS[min(args.verbose, len(_VERBOSITY_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)-8s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Load, validate and report.

    Returns:
        Process exit status
    """
    args = _args(argv)
    _configure_logging(args)

    try:
        limits = ParserLimits(
            max_line_length=args.max_line_length,
            max_token_length=args.max_token_length,
        )
    except pydantic.ValidationError as e:
        return _fail(f"invalid limits: {e.errors()[0]['msg']}")

    adapter = StreamSceneAdapter(limits=limits)
    try:
        scene = adapter.load_scene(args.input if args.input else sys.stdin)
    except SceneLoadError as e:
        return _fail(str(e))
    except FileNotFoundError:
        return _fail(f"no such file: {args.input}")
    except OSError as e:
        return _fail(f"cannot read {args.input}: {e.strerror}")

    error = validate_scene(scene)
    if error.has_error:
        print("not ok")
        return _fail(error.message)

    output = COMMANDS[args.command](scene)
    if output:
        print(output)
    logger.debug("Command %s done", args.command)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
