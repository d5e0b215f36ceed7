"""Scene Bounded Context - Domain Services.

Pure, read-only passes over a fully built Scene.
NO I/O operations - loading lives in domain/scene/loader.py and the
stream adapter under `src/infrastructure/scene/`.

Validation passes return a ValidationError value describing the first
conflicting pair in ascending-id order; they never raise.
"""

from __future__ import annotations

import logging
from itertools import combinations

from domain.scene.entities import Scene
from domain.scene.value_objects import (
    Antenna,
    BoundingBox,
    Structure,
    StructureKind,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Wording used for the first structure of an overlapping pair.
# "buildings" vs "house" is the historical message format; kept as is.
OVERLAP_LABELS: dict[StructureKind, str] = {
    StructureKind.BUILDING: "buildings",
    StructureKind.HOUSE: "house",
}


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------
def are_intervals_overlapping(a1: int, b1: int, a2: int, b2: int) -> bool:
    """Check if [a1, b1] and [a2, b2] overlap.

    Half-open test: intervals sharing only an endpoint do not overlap.
    Note that an interval strictly inside the other (a1 < a2 and b2 < b1)
    is not reported either; this matches the historical reference output.
    """
    return (a1 <= a2 < b1 <= b2) or (a2 <= a1 < b2 <= b1)


def are_structures_overlapping(structure1: Structure, structure2: Structure) -> bool:
    """Check if two rectangles overlap on both axes."""
    return are_intervals_overlapping(
        structure1.left, structure1.right, structure2.left, structure2.right
    ) and are_intervals_overlapping(
        structure1.bottom, structure1.top, structure2.bottom, structure2.top
    )


def have_antennas_same_position(antenna1: Antenna, antenna2: Antenna) -> bool:
    return antenna1.x == antenna2.x and antenna1.y == antenna2.y


# ---------------------------------------------------------------------------
# Validation passes
# ---------------------------------------------------------------------------
def validate_structure_overlaps(scene: Scene) -> ValidationError:
    """Report the first overlapping pair of structures, if any."""
    for structure1, structure2 in combinations(scene.structures, 2):
        if are_structures_overlapping(structure1, structure2):
            return ValidationError.failure(
                f"{OVERLAP_LABELS[structure1.kind]} {structure1.id} "
                f"and {structure2.id} are overlapping"
            )
    return ValidationError.ok()


def validate_antennas(scene: Scene) -> ValidationError:
    """Report the first pair of antennas sharing a position, if any."""
    for antenna1, antenna2 in combinations(scene.antennas, 2):
        if have_antennas_same_position(antenna1, antenna2):
            return ValidationError.failure(
                f"antennas {antenna1.id} and {antenna2.id} have the same position"
            )
    return ValidationError.ok()


def validate_scene(scene: Scene) -> ValidationError:
    """Run all passes; structure overlaps are checked before antennas.

    Returns:
        The first error found, or ValidationError.ok()
    """
    for check in (validate_structure_overlaps, validate_antennas):
        error = check(scene)
        if error.has_error:
            logger.info("Scene rejected: %s", error.message)
            return error
    return ValidationError.ok()


# ---------------------------------------------------------------------------
# Extent
# ---------------------------------------------------------------------------
def scene_bounding_box(scene: Scene) -> BoundingBox | None:
    """Smallest box holding every structure and every antenna disk.

    Returns:
        BoundingBox, or None for an empty scene
    """
    if scene.is_empty():
        return None

    extents = [(s.left, s.right, s.bottom, s.top) for s in scene.structures]
    extents.extend(
        (a.x - a.radius, a.x + a.radius, a.y - a.radius, a.y + a.radius)
        for a in scene.antennas
    )
    return BoundingBox(
        min_x=min(e[0] for e in extents),
        max_x=max(e[1] for e in extents),
        min_y=min(e[2] for e in extents),
        max_y=max(e[3] for e in extents),
    )
