"""Scene Bounded Context - Error Hierarchy.

Custom exceptions for scene loading.

Every error raised while reading a scene description is fatal to the load:
the partially built Scene is discarded and the caller decides how to stop.
Semantic problems found on a fully built scene (overlaps, coincident
antennas) are NOT exceptions; see ValidationError in value_objects.
"""

from __future__ import annotations


class SceneError(Exception):
    """Base error for scene operations."""


class SceneLoadError(SceneError):
    """Scene description is malformed; the load is aborted."""


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
class FirstLineError(SceneLoadError):
    """First line of the stream is not the begin marker."""

    def __init__(self) -> None:
        super().__init__("first line must be exactly 'begin scene'")


class LastLineError(SceneLoadError):
    """Stream ended without the end marker, or continued past it."""

    def __init__(self) -> None:
        super().__init__("last line must be exactly 'end scene'")


# ---------------------------------------------------------------------------
# Line structure
# ---------------------------------------------------------------------------
class LineError(SceneLoadError):
    """Error attached to a specific line of the description.

    Attributes:
        line_number: 1-based number of the offending line
    """

    def __init__(self, message: str, line_number: int) -> None:
        self.line_number = line_number
        super().__init__(f"{message} (line #{line_number})")


class EmptyLineError(LineError):
    """Body line has no token."""

    def __init__(self, line_number: int) -> None:
        super().__init__("line has no token", line_number)


class UnrecognizedLineError(LineError):
    """Body line does not start with a known keyword."""

    def __init__(self, line_number: int) -> None:
        super().__init__("unrecognized line", line_number)


class LineTooLongError(LineError):
    def __init__(self, line_number: int, limit: int) -> None:
        self.limit = limit
        super().__init__(f"line exceeds {limit} characters", line_number)


class TokenTooLongError(LineError):
    def __init__(self, token: str, line_number: int, limit: int) -> None:
        self.token = token
        self.limit = limit
        super().__init__(f'token "{token}" exceeds {limit} characters', line_number)


# ---------------------------------------------------------------------------
# Record fields
# ---------------------------------------------------------------------------
class WrongArgumentCountError(LineError):
    """Record line has the wrong arity for its kind."""

    def __init__(self, kind: str, line_number: int) -> None:
        self.kind = kind
        super().__init__(f"wrong number of arguments for {kind}", line_number)


class InvalidTokenError(LineError):
    """A record field does not match its grammar.

    Attributes:
        token: The rejected token, verbatim
    """

    description = "invalid token"

    def __init__(self, token: str, line_number: int) -> None:
        self.token = token
        super().__init__(f'{self.description} "{token}"', line_number)


class InvalidIdentifierError(InvalidTokenError):
    description = "invalid identifier"


class InvalidIntegerError(InvalidTokenError):
    description = "invalid integer"


class InvalidPositiveIntegerError(InvalidTokenError):
    description = "invalid positive integer"


# ---------------------------------------------------------------------------
# Scene store
# ---------------------------------------------------------------------------
class DuplicateIdentifierError(SceneLoadError):
    """Identifier already used in its namespace.

    Attributes:
        kind: Kind of the record being inserted ("building", "house", "antenna")
        identifier: The duplicated identifier
    """

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} identifier {identifier} is not unique")
