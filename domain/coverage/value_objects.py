"""Coverage Bounded Context - Value Objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from domain.scene.value_objects import StructureKind

CORNERS_PER_STRUCTURE = 4


class CoverageGrade(BaseModel):
    """Coverage quality of one structure (Value Object).

    Invariants:
        0 <= covered_corners <= 4
        grade is one letter from 'A' (all corners) to 'E' (none)
    """

    structure_id: str
    kind: StructureKind
    covered_corners: int = Field(ge=0, le=CORNERS_PER_STRUCTURE)
    grade: str = Field(pattern=r"^[A-E]$")

    model_config = ConfigDict(frozen=True)
