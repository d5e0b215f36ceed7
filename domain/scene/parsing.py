"""Line tokenizing and record construction.

Each loader checks the keyword of a ParsedLine and returns None when the
line is not of its kind. Once the keyword matches, checks run in a fixed
order (arity, identifier, then numeric fields left to right) and the
first failing check raises, so error messages are deterministic.
"""

from __future__ import annotations

from collections.abc import Callable

from domain.scene.errors import (
    InvalidIdentifierError,
    InvalidIntegerError,
    InvalidPositiveIntegerError,
    LineTooLongError,
    TokenTooLongError,
    WrongArgumentCountError,
)
from domain.scene.validation import (
    is_valid_id,
    is_valid_integer,
    is_valid_positive_integer,
)
from domain.scene.value_objects import (
    Antenna,
    ParsedLine,
    ParserLimits,
    Structure,
    StructureKind,
)

BEGIN_SCENE_LINE = "begin scene"
END_SCENE_LINE = "end scene"

STRUCTURE_NUM_TOKENS = 6  # keyword id x y w h
ANTENNA_NUM_TOKENS = 5  # keyword id x y r

DEFAULT_LIMITS = ParserLimits()


def is_begin_scene_line(line: str) -> bool:
    return line == BEGIN_SCENE_LINE


def is_end_scene_line(line: str) -> bool:
    return line == END_SCENE_LINE


def parse_line(
    line: str, line_number: int, limits: ParserLimits = DEFAULT_LIMITS
) -> ParsedLine:
    """Split a line on whitespace runs.

    Args:
        line: Raw line, without its trailing newline
        line_number: 1-based position of the line in the stream
        limits: Length caps for the line and each token

    Returns:
        ParsedLine, possibly with zero tokens (the caller decides)

    Raises:
        LineTooLongError: If the line exceeds limits.max_line_length
        TokenTooLongError: If a token exceeds limits.max_token_length
    """
    if len(line) > limits.max_line_length:
        raise LineTooLongError(line_number, limits.max_line_length)
    tokens = tuple(line.split())
    for token in tokens:
        if len(token) > limits.max_token_length:
            raise TokenTooLongError(token, line_number, limits.max_token_length)
    return ParsedLine(tokens=tokens, line_number=line_number)


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------
def _identifier(parsed_line: ParsedLine, index: int) -> str:
    token = parsed_line.tokens[index]
    if not is_valid_id(token):
        raise InvalidIdentifierError(token, parsed_line.line_number)
    return token


def _integer(parsed_line: ParsedLine, index: int) -> int:
    token = parsed_line.tokens[index]
    if not is_valid_integer(token):
        raise InvalidIntegerError(token, parsed_line.line_number)
    return int(token)


def _positive_integer(parsed_line: ParsedLine, index: int) -> int:
    token = parsed_line.tokens[index]
    if not is_valid_positive_integer(token):
        raise InvalidPositiveIntegerError(token, parsed_line.line_number)
    return int(token)


def _check_arity(parsed_line: ParsedLine, kind: str, expected: int) -> None:
    if parsed_line.num_tokens != expected:
        raise WrongArgumentCountError(kind, parsed_line.line_number)


# ---------------------------------------------------------------------------
# Entity factory
# ---------------------------------------------------------------------------
def _load_structure_from_parsed_line(
    parsed_line: ParsedLine, kind: StructureKind
) -> Structure | None:
    if parsed_line.keyword != kind.value:
        return None
    _check_arity(parsed_line, kind.value, STRUCTURE_NUM_TOKENS)
    # Evaluated left to right: the first bad field is the one reported
    identifier = _identifier(parsed_line, 1)
    x = _integer(parsed_line, 2)
    y = _integer(parsed_line, 3)
    w = _positive_integer(parsed_line, 4)
    h = _positive_integer(parsed_line, 5)
    return Structure(
        id=identifier, kind=kind, x=x, y=y, half_width=w, half_height=h
    )


def load_building_from_parsed_line(parsed_line: ParsedLine) -> Structure | None:
    """Build a building from `building <id> <x> <y> <w> <h>`."""
    return _load_structure_from_parsed_line(parsed_line, StructureKind.BUILDING)


def load_house_from_parsed_line(parsed_line: ParsedLine) -> Structure | None:
    """Build a house from `house <id> <x> <y> <w> <h>`."""
    return _load_structure_from_parsed_line(parsed_line, StructureKind.HOUSE)


def load_antenna_from_parsed_line(parsed_line: ParsedLine) -> Antenna | None:
    """Build an antenna from `antenna <id> <x> <y> <r>`."""
    if parsed_line.keyword != "antenna":
        return None
    _check_arity(parsed_line, "antenna", ANTENNA_NUM_TOKENS)
    identifier = _identifier(parsed_line, 1)
    x = _integer(parsed_line, 2)
    y = _integer(parsed_line, 3)
    r = _positive_integer(parsed_line, 4)
    return Antenna(id=identifier, x=x, y=y, radius=r)


# Dispatch priority: the first loader that recognizes the keyword wins
ENTITY_LOADERS: tuple[Callable[[ParsedLine], Structure | Antenna | None], ...] = (
    load_building_from_parsed_line,
    load_house_from_parsed_line,
    load_antenna_from_parsed_line,
)
