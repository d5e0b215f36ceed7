"""Coverage Bounded Context - Domain Services.

Pure domain logic: a point is covered when it lies inside or on the
boundary of at least one antenna disk. A structure is graded by how many
of its four corners are covered.
"""

from __future__ import annotations

from domain.coverage.value_objects import CORNERS_PER_STRUCTURE, CoverageGrade
from domain.scene.entities import Scene
from domain.scene.value_objects import Structure

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Letter per number of covered corners; fewer corners, later letter
GRADES: dict[int, str] = {4: "A", 3: "B", 2: "C", 1: "D", 0: "E"}


def is_point_covered(x: int, y: int, scene: Scene) -> bool:
    return any(antenna.covers(x, y) for antenna in scene.antennas)


def count_covered_corners(structure: Structure, scene: Scene) -> int:
    """Count corners of structure covered by any antenna of scene.

    Returns:
        Number of covered corners, in [0, 4]
    """
    return sum(1 for x, y in structure.corners() if is_point_covered(x, y, scene))


def grade(covered_corners: int) -> str:
    """Map a covered-corner count to a letter grade.

    Raises:
        ValueError: If covered_corners is outside [0, 4]
    """
    try:
        return GRADES[covered_corners]
    except KeyError:
        raise ValueError(
            f"covered_corners must be in [0, {CORNERS_PER_STRUCTURE}], "
            f"got {covered_corners}"
        ) from None


def coverage_report(scene: Scene) -> tuple[CoverageGrade, ...]:
    """Grade every structure of scene, in ascending identifier order."""
    grades: list[CoverageGrade] = []
    for structure in scene.structures:
        covered = count_covered_corners(structure, scene)
        grades.append(
            CoverageGrade(
                structure_id=structure.id,
                kind=structure.kind,
                covered_corners=covered,
                grade=grade(covered),
            )
        )
    return tuple(grades)
