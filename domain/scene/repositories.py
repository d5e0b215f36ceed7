"""Domain Port(s) for Scene I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO

from .entities import Scene


class SceneRepository(Protocol):
    """Port for obtaining scenes from external sources.

    Implementations live in infrastructure (e.g., text stream adapter).
    """

    def load_scene(self, source: Path | str | TextIO) -> Scene:
        """Load a scene description and return the built Scene."""
        ...
