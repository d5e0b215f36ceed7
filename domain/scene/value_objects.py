"""Scene Bounded Context - Value Objects.

Immutable records read from a scene description.
All validation occurs at construction time via Pydantic.

Geometry is integer-only: structures are axis-aligned rectangles given by
center and half extents, antennas are disks given by center and radius.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.scene.validation import is_valid_id

Point = tuple[int, int]


def _check_identifier(value: str) -> str:
    if not is_valid_id(value):
        raise ValueError(f"invalid identifier: {value!r}")
    return value


class StructureKind(str, Enum):
    """Discriminant shared by buildings and houses."""

    BUILDING = "building"
    HOUSE = "house"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------
class Structure(BaseModel):
    """Building or house (Value Object).

    The rectangle spans [x - half_width, x + half_width] on x and
    [y - half_height, y + half_height] on y, bounds included.

    Invariants:
        id matches the identifier grammar
        half_width > 0 and half_height > 0
    """

    id: str
    kind: StructureKind
    x: int  # Center, x coordinate
    y: int  # Center, y coordinate
    half_width: int = Field(gt=0)
    half_height: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        return _check_identifier(value)

    @property
    def left(self) -> int:
        return self.x - self.half_width

    @property
    def right(self) -> int:
        return self.x + self.half_width

    @property
    def bottom(self) -> int:
        return self.y - self.half_height

    @property
    def top(self) -> int:
        return self.y + self.half_height

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the four corners: bottom-left, bottom-right, top-left, top-right."""
        return (
            (self.left, self.bottom),
            (self.right, self.bottom),
            (self.left, self.top),
            (self.right, self.top),
        )


def create_building(id: str, x: int, y: int, w: int, h: int) -> Structure:
    return Structure(
        id=id, kind=StructureKind.BUILDING, x=x, y=y, half_width=w, half_height=h
    )


def create_house(id: str, x: int, y: int, w: int, h: int) -> Structure:
    return Structure(
        id=id, kind=StructureKind.HOUSE, x=x, y=y, half_width=w, half_height=h
    )


# ---------------------------------------------------------------------------
# Antenna
# ---------------------------------------------------------------------------
class Antenna(BaseModel):
    """Circular coverage source (Value Object).

    Invariants:
        id matches the identifier grammar
        radius > 0
    """

    id: str
    x: int
    y: int
    radius: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        return _check_identifier(value)

    def covers(self, px: int, py: int) -> bool:
        """Check if (px, py) lies inside or on the boundary of the disk.

        Compares squared distances to stay in exact integer arithmetic.
        """
        dx = self.x - px
        dy = self.y - py
        return dx * dx + dy * dy <= self.radius * self.radius


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
class ParsedLine(BaseModel):
    """Whitespace-separated tokens of one body line (Value Object)."""

    tokens: tuple[str, ...]
    line_number: int = Field(ge=1)  # 1-based, counts the begin marker

    model_config = ConfigDict(frozen=True)

    @property
    def num_tokens(self) -> int:
        return len(self.tokens)

    @property
    def keyword(self) -> str | None:
        return self.tokens[0] if self.tokens else None


class ParserLimits(BaseModel):
    """Practical caps applied while tokenizing (configuration)."""

    max_line_length: int = Field(default=50, gt=0)
    max_token_length: int = Field(default=10, gt=0)

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
class BoundingBox(BaseModel):
    """Integer extent of a scene (Value Object)."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bounds(self) -> "BoundingBox":
        if self.min_x > self.max_x:
            raise ValueError(
                f"Invalid x ordering: min_x={self.min_x} > max_x={self.max_x}"
            )
        if self.min_y > self.max_y:
            raise ValueError(
                f"Invalid y ordering: min_y={self.min_y} > max_y={self.max_y}"
            )
        return self


class ValidationError(BaseModel):
    """Outcome of a validation pass (Value Object, not an exception).

    A pass reports at most one problem: the first conflicting pair found.

    Invariants:
        has_error == True iff message is non-empty
    """

    has_error: bool = False
    message: str = ""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_consistency(self) -> "ValidationError":
        if self.has_error != bool(self.message):
            raise ValueError("has_error must be set exactly when a message is given")
        return self

    @classmethod
    def ok(cls) -> "ValidationError":
        return cls()

    @classmethod
    def failure(cls, message: str) -> "ValidationError":
        return cls(has_error=True, message=message)
