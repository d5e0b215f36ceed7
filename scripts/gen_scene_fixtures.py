#!/usr/bin/env python3
"""Generate the sample scene fixtures.

Writes every scene listed in shared/scene_fixtures.py to tests/fixtures/.

Usage:
    python scripts/gen_scene_fixtures.py

Output:
    tests/fixtures/*.txt

Dependencies:
    This script imports from shared/scene_fixtures.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

from shared.scene_fixtures import (
    EXPECTED_FIXTURE_COUNT,
    EXPECTED_FIXTURES,
    SCENE_FIXTURES,
)

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def ensure_dir() -> None:
    """Ensure fixtures directory exists."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {FIXTURES_DIR}")


def main() -> int:
    """Generate all fixtures.

    Returns:
        0 on success, 1 on failure
    """
    print("=" * 60)
    print("Generating scene fixtures")
    print("=" * 60)

    try:
        ensure_dir()
    except OSError as e:
        print(f"ERROR: Cannot create fixtures directory: {e}")
        return 1

    for name, fixture in SCENE_FIXTURES.items():
        path = FIXTURES_DIR / name
        # newline="" keeps "\n" line endings on every platform
        path.write_text(fixture.text, encoding="utf-8", newline="")
        print(f"  Created: {name} (expected exit {fixture.exit_code})")

    # Verify generated fixtures match expected list exactly
    found_set = {f.name for f in FIXTURES_DIR.iterdir() if f.suffix == ".txt"}
    expected_set = set(EXPECTED_FIXTURES)

    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/scene_fixtures.py to match generated fixtures.")
        return 1

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
