"""Single source of truth for the sample scene fixtures.

This module defines the sample scenes and their expected outcome, used by:
- scripts/gen_scene_fixtures.py (writes tests/fixtures/*.txt)
- tests/test_fixtures_sanity.py (existence and content verification)
- tests/application/test_cli.py (end-to-end runs of `summarize`)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this mapping.
"""

from __future__ import annotations

from typing import NamedTuple


class SceneFixture(NamedTuple):
    text: str  # File content, newline terminated
    exit_code: int  # Expected exit status of `summarize`
    stdout: str  # Expected standard output of `summarize`
    stderr: str  # Expected standard error of `summarize`


SCENE_FIXTURES: dict[str, SceneFixture] = {
    "empty_scene.txt": SceneFixture(
        text="begin scene\nend scene\n",
        exit_code=0,
        stdout="An empty scene\n",
        stderr="",
    ),
    "single_building.txt": SceneFixture(
        text="begin scene\nbuilding B1 0 0 5 5\nend scene\n",
        exit_code=0,
        stdout="A scene with 1 building\n",
        stderr="",
    ),
    "mixed_scene.txt": SceneFixture(
        text=(
            "begin scene\n"
            "house h1 0 10 3 3\n"
            "antenna a2 10 10 5\n"
            "building b2 10 0 2 2\n"
            "building b1 0 0 2 2\n"
            "antenna a1 0 0 3\n"
            "end scene\n"
        ),
        exit_code=0,
        stdout="A scene with 2 buildings, 1 house and 2 antennas\n",
        stderr="",
    ),
    "touching_structures.txt": SceneFixture(
        text="begin scene\nbuilding B1 0 0 5 5\nhouse H1 10 0 5 5\nend scene\n",
        exit_code=0,
        stdout="A scene with 1 building and 1 house\n",
        stderr="",
    ),
    "overlapping_structures.txt": SceneFixture(
        text="begin scene\nbuilding B1 0 0 5 5\nhouse H1 5 0 5 5\nend scene\n",
        exit_code=1,
        stdout="not ok\n",
        stderr="error: buildings B1 and H1 are overlapping\n",
    ),
    "same_position_antennas.txt": SceneFixture(
        text="begin scene\nantenna A1 3 3 5\nantenna A2 3 3 8\nend scene\n",
        exit_code=1,
        stdout="not ok\n",
        stderr="error: antennas A1 and A2 have the same position\n",
    ),
    "missing_end.txt": SceneFixture(
        text="begin scene\nbuilding B1 0 0 5 5\n",
        exit_code=1,
        stdout="",
        stderr="error: last line must be exactly 'end scene'\n",
    ),
}

# Sorted for deterministic comparison
EXPECTED_FIXTURES: list[str] = sorted(SCENE_FIXTURES)
EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
