"""Plain-text rendering of a validated scene.

Every function returns text without a trailing newline; printing is the
CLI's job.
"""

from __future__ import annotations

from domain.coverage.services import coverage_report
from domain.coverage.value_objects import CORNERS_PER_STRUCTURE
from domain.scene.entities import Scene
from domain.scene.services import scene_bounding_box


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}{'s' if n > 1 else ''}"


def format_summary(scene: Scene) -> str:
    """One sentence counting buildings, houses and antennas.

    The joining rule is the historical one: houses are preceded by " and "
    only when there are no antennas, by ", " otherwise; antennas are
    always preceded by " and ".
    """
    if scene.is_empty():
        return "An empty scene"

    text = "A scene with "
    first = True
    if scene.num_buildings > 0:
        text += _count(scene.num_buildings, "building")
        first = False
    if scene.num_houses > 0:
        if not first:
            text += " and " if scene.num_antennas == 0 else ", "
        text += _count(scene.num_houses, "house")
        first = False
    if scene.num_antennas > 0:
        if not first:
            text += " and "
        text += _count(scene.num_antennas, "antenna")
    return text


def format_structures(scene: Scene) -> str:
    return "\n".join(
        f"  {s.kind.value} {s.id} at {s.x} {s.y} "
        f"with dimensions {s.half_width} {s.half_height}"
        for s in scene.structures
    )


def format_antennas(scene: Scene) -> str:
    return "\n".join(
        f"  antenna {a.id} at {a.x} {a.y} with range {a.radius}"
        for a in scene.antennas
    )


def format_description(scene: Scene) -> str:
    """Summary followed by the structure and antenna listings."""
    parts = [format_summary(scene), format_structures(scene), format_antennas(scene)]
    return "\n".join(part for part in parts if part)


def format_bounding_box(scene: Scene) -> str:
    box = scene_bounding_box(scene)
    if box is None:
        return "undefined (empty scene)"
    return f"bounding box [{box.min_x}, {box.max_x}] x [{box.min_y}, {box.max_y}]"


def format_coverage(scene: Scene) -> str:
    return "\n".join(
        f"  {g.kind.value} {g.structure_id} with coverage grade {g.grade} "
        f"({g.covered_corners}/{CORNERS_PER_STRUCTURE} corners covered)"
        for g in coverage_report(scene)
    )
