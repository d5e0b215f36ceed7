"""Root pytest configuration for all tests.

Scenes are built directly from value objects so that domain tests never
depend on the text loader. Builders live in tests/conftest_utils.py.
"""

from __future__ import annotations

import pytest

from domain.scene.entities import Scene
from domain.scene.value_objects import Antenna, create_building, create_house
from tests.conftest_utils import build_scene


@pytest.fixture
def sample_scene() -> Scene:
    """Two buildings, one house, two antennas; no overlap."""
    return build_scene(
        create_house("h1", 0, 10, 3, 3),
        Antenna(id="a2", x=10, y=10, radius=5),
        create_building("b2", 10, 0, 2, 2),
        create_building("b1", 0, 0, 2, 2),
        Antenna(id="a1", x=0, y=0, radius=3),
    )
