"""Tests for coverage domain services (point coverage, corner grading)."""

from __future__ import annotations

import pydantic
import pytest

from domain.coverage.services import (
    GRADES,
    count_covered_corners,
    coverage_report,
    grade,
    is_point_covered,
)
from domain.coverage.value_objects import CoverageGrade
from domain.scene.entities import Scene
from domain.scene.value_objects import (
    Antenna,
    StructureKind,
    create_building,
    create_house,
)
from tests.conftest_utils import build_scene


# ===========================================================================
# is_point_covered
# ===========================================================================
def test_point_at_radius_is_covered():
    scene = build_scene(Antenna(id="A1", x=10, y=10, radius=5))

    assert is_point_covered(13, 14, scene)  # 3-4-5 triangle
    assert is_point_covered(10, 15, scene)


def test_point_at_radius_plus_one_is_not_covered():
    scene = build_scene(Antenna(id="A1", x=10, y=10, radius=5))

    assert not is_point_covered(10, 16, scene)
    assert not is_point_covered(4, 10, scene)


def test_point_covered_by_any_antenna():
    scene = build_scene(
        Antenna(id="A1", x=0, y=0, radius=1),
        Antenna(id="A2", x=100, y=100, radius=1),
    )

    assert is_point_covered(100, 101, scene)
    assert not is_point_covered(50, 50, scene)


def test_no_antenna_covers_nothing():
    assert not is_point_covered(0, 0, Scene())


# ===========================================================================
# count_covered_corners
# ===========================================================================
def test_all_corners_covered():
    building = create_building("B1", 0, 0, 3, 4)
    scene = build_scene(building, Antenna(id="A1", x=0, y=0, radius=5))

    assert count_covered_corners(building, scene) == 4


def test_two_corners_covered():
    # Corners (0, 0), (4, 0), (0, 2), (4, 2); antenna reaches x <= 1 only
    house = create_house("H1", 2, 1, 2, 1)
    scene = build_scene(house, Antenna(id="A1", x=-1, y=1, radius=2))

    assert count_covered_corners(house, scene) == 2


def test_corners_split_between_antennas():
    building = create_building("B1", 0, 0, 10, 10)
    scene = build_scene(
        building,
        Antenna(id="A1", x=-10, y=-10, radius=1),
        Antenna(id="A2", x=10, y=10, radius=1),
        Antenna(id="A3", x=10, y=-10, radius=1),
    )

    assert count_covered_corners(building, scene) == 3


def test_no_corner_covered_without_antennas():
    building = create_building("B1", 0, 0, 5, 5)

    assert count_covered_corners(building, build_scene(building)) == 0


# ===========================================================================
# grade
# ===========================================================================
def test_grade_extremes():
    assert grade(4) == "A"
    assert grade(0) == "E"


def test_grade_is_monotonic():
    letters = [grade(n) for n in range(4, -1, -1)]

    assert letters == ["A", "B", "C", "D", "E"]
    assert letters == sorted(letters)
    assert set(GRADES) == {0, 1, 2, 3, 4}


@pytest.mark.parametrize("covered", [-1, 5])
def test_grade_out_of_range(covered):
    with pytest.raises(ValueError, match=r"must be in \[0, 4\]"):
        grade(covered)


# ===========================================================================
# coverage_report
# ===========================================================================
def test_coverage_report_in_identifier_order(sample_scene):
    report = coverage_report(sample_scene)

    assert [g.structure_id for g in report] == ["b1", "b2", "h1"]
    # a1 (0, 0, r=3) covers all corners of b1 (+-2, +-2): 8 <= 9
    assert report[0] == CoverageGrade(
        structure_id="b1", kind=StructureKind.BUILDING, covered_corners=4, grade="A"
    )
    # a2 (10, 10, r=5) reaches no corner of b2 (y <= 2) nor of h1 (x <= 3)
    assert report[1].grade == "E"
    assert report[2].kind is StructureKind.HOUSE
    assert report[2].grade == "E"


def test_coverage_report_empty_scene():
    assert coverage_report(Scene()) == ()


def test_coverage_grade_invariants():
    with pytest.raises(pydantic.ValidationError):
        CoverageGrade(
            structure_id="B1", kind=StructureKind.BUILDING, covered_corners=5, grade="A"
        )
    with pytest.raises(pydantic.ValidationError):
        CoverageGrade(
            structure_id="B1", kind=StructureKind.BUILDING, covered_corners=1, grade="F"
        )
