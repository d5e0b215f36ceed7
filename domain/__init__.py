"""Scene Coverage Domain Layer.

This package contains the core business logic organized by bounded contexts:
- scene: Scene description parsing, identifier ordering, layout validation
- coverage: Antenna coverage of structure corners, letter grades
"""

# Imports alphabetized per project style (isort)
from domain import coverage, scene

__all__ = ["coverage", "scene"]
