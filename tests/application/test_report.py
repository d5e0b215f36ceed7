"""Tests for the plain-text reporter."""

from __future__ import annotations

import pytest

from application.report import (
    format_antennas,
    format_bounding_box,
    format_coverage,
    format_description,
    format_structures,
    format_summary,
)
from domain.scene.entities import Scene
from domain.scene.value_objects import Antenna, create_building, create_house
from tests.conftest_utils import build_scene

A1 = Antenna(id="A1", x=100, y=100, radius=1)
A2 = Antenna(id="A2", x=200, y=100, radius=1)
B1 = create_building("B1", 0, 0, 1, 1)
B2 = create_building("B2", 10, 0, 1, 1)
H1 = create_house("H1", 20, 0, 1, 1)
H2 = create_house("H2", 30, 0, 1, 1)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "records, expected",
    [
        ((), "An empty scene"),
        ((B1,), "A scene with 1 building"),
        ((B1, B2), "A scene with 2 buildings"),
        ((H1,), "A scene with 1 house"),
        ((A1, A2), "A scene with 2 antennas"),
        ((B1, H1), "A scene with 1 building and 1 house"),
        ((B1, A1), "A scene with 1 building and 1 antenna"),
        ((H1, H2, A1), "A scene with 2 houses and 1 antenna"),
        ((B1, B2, H1, A1, A2), "A scene with 2 buildings, 1 house and 2 antennas"),
    ],
)
def test_format_summary(records, expected):
    assert format_summary(build_scene(*records)) == expected


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------
def test_format_structures_in_identifier_order():
    scene = build_scene(create_house("H1", -3, 4, 2, 1), B1)

    assert format_structures(scene) == (
        "  building B1 at 0 0 with dimensions 1 1\n"
        "  house H1 at -3 4 with dimensions 2 1"
    )


def test_format_antennas():
    scene = build_scene(A2, A1)

    assert format_antennas(scene) == (
        "  antenna A1 at 100 100 with range 1\n"
        "  antenna A2 at 200 100 with range 1"
    )


def test_format_description_skips_empty_listings():
    assert format_description(build_scene(B1)) == (
        "A scene with 1 building\n"
        "  building B1 at 0 0 with dimensions 1 1"
    )
    assert format_description(Scene()) == "An empty scene"


# ---------------------------------------------------------------------------
# Bounding box
# ---------------------------------------------------------------------------
def test_format_bounding_box(sample_scene):
    assert format_bounding_box(sample_scene) == "bounding box [-3, 15] x [-3, 15]"


def test_format_bounding_box_empty():
    assert format_bounding_box(Scene()) == "undefined (empty scene)"


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------
def test_format_coverage(sample_scene):
    assert format_coverage(sample_scene) == (
        "  building b1 with coverage grade A (4/4 corners covered)\n"
        "  building b2 with coverage grade E (0/4 corners covered)\n"
        "  house h1 with coverage grade E (0/4 corners covered)"
    )
