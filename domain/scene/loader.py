"""Scene Bounded Context - Loader.

Three-state machine over the lines of a scene description:

    EXPECT_BEGIN --'begin scene'--> EXPECT_BODY --'end scene'--> EXPECT_END

No backtracking, no re-entry. Any malformed line raises a SceneLoadError
and the scene under construction is dropped. Reading the lines is the
caller's concern (see infrastructure/scene/stream_adapter.py).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from domain.scene.entities import Scene
from domain.scene.errors import (
    EmptyLineError,
    FirstLineError,
    LastLineError,
    UnrecognizedLineError,
)
from domain.scene.parsing import (
    DEFAULT_LIMITS,
    ENTITY_LOADERS,
    is_begin_scene_line,
    is_end_scene_line,
    parse_line,
)
from domain.scene.value_objects import Antenna, ParserLimits

logger = logging.getLogger(__name__)


class LoaderState(Enum):
    EXPECT_BEGIN = "expect_begin"
    EXPECT_BODY = "expect_body"
    EXPECT_END = "expect_end"


def _load_body_line(
    scene: Scene, line: str, line_number: int, limits: ParserLimits
) -> None:
    parsed_line = parse_line(line, line_number, limits)
    if parsed_line.num_tokens == 0:
        raise EmptyLineError(line_number)

    for loader in ENTITY_LOADERS:
        record = loader(parsed_line)
        if record is not None:
            break
    else:
        raise UnrecognizedLineError(line_number)

    if isinstance(record, Antenna):
        scene.add_antenna(record)
    else:
        scene.add_structure(record)
    logger.debug("Line %d: added %s %s", line_number, parsed_line.keyword, record.id)


def load_scene(lines: Iterable[str], limits: ParserLimits = DEFAULT_LIMITS) -> Scene:
    """Build a Scene from the lines of a scene description.

    Args:
        lines: Lines in stream order; a trailing newline is ignored
        limits: Length caps applied to body lines

    Returns:
        The fully built Scene

    Raises:
        FirstLineError: If the first line is not 'begin scene'
        LastLineError: If 'end scene' is missing or is not the last line
        SceneLoadError: Any other malformed line (see domain.scene.errors)

    Example:
        >>> scene = load_scene(["begin scene", "building B1 0 0 5 5", "end scene"])
        >>> scene.num_buildings
        1
    """
    scene = Scene()
    state = LoaderState.EXPECT_BEGIN

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")

        if state is LoaderState.EXPECT_BEGIN:
            if not is_begin_scene_line(line):
                raise FirstLineError()
            state = LoaderState.EXPECT_BODY
        elif state is LoaderState.EXPECT_BODY:
            if is_end_scene_line(line):
                state = LoaderState.EXPECT_END
            else:
                _load_body_line(scene, line, line_number, limits)
        else:
            # Nothing may follow the end marker
            raise LastLineError()

    if state is not LoaderState.EXPECT_END:
        raise LastLineError()

    logger.info(
        "Loaded scene: %d buildings, %d houses, %d antennas",
        scene.num_buildings,
        scene.num_houses,
        scene.num_antennas,
    )
    return scene
