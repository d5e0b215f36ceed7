"""Shared test helpers.

Builders for scenes and scene descriptions, importable from any test
module (pytest fixtures live in tests/conftest.py).

These utilities are used by:
- tests/conftest.py
- tests/scene/, tests/coverage/, tests/application/
"""

from __future__ import annotations

from pathlib import Path

from domain.scene.entities import Scene
from domain.scene.value_objects import Antenna, Structure


def build_scene(*records: Structure | Antenna) -> Scene:
    """Create a Scene holding the given records, inserted in argument order."""
    scene = Scene()
    for record in records:
        if isinstance(record, Antenna):
            scene.add_antenna(record)
        else:
            scene.add_structure(record)
    return scene


def scene_lines(*body: str) -> list[str]:
    """Wrap body lines with the begin/end markers, newline terminated."""
    return [f"{line}\n" for line in ("begin scene", *body, "end scene")]


def scene_text(*body: str) -> str:
    return "".join(scene_lines(*body))


def get_fixtures_dir() -> Path:
    """Return path to tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"
