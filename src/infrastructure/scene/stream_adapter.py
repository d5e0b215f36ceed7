"""Text stream adapter for SceneRepository.

Implements loading of scene descriptions from a file path or an already
open text stream (typically stdin), returning a domain Scene entity.

Lifecycle (to avoid resource leaks):
1) Open the file with a context manager, or borrow the caller's stream
2) Feed lines lazily to domain.scene.loader.load_scene
3) Close the file on every exit path, including a fatal load error
4) Return the Scene

Borrowed streams are never closed here: their owner does that.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from domain.scene.entities import Scene
from domain.scene.errors import SceneLoadError
from domain.scene.loader import load_scene
from domain.scene.value_objects import ParserLimits

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


class StreamSceneAdapter:
    """Infrastructure adapter for loading scenes from text.

    Parameters
    ----------
    limits: ParserLimits | None
        Length caps for lines and tokens. Defaults to ParserLimits().
    encoding: str
        Encoding used when opening a path.
    """

    def __init__(
        self, limits: ParserLimits | None = None, encoding: str = "utf-8"
    ) -> None:
        self.limits = limits if limits is not None else ParserLimits()
        self.encoding = encoding

    def load_scene(self, source: Path | str | TextIO) -> Scene:
        """Load a scene from a path or an open text stream.

        Raises:
            FileNotFoundError: If a path is given and does not exist
            SceneLoadError: If the description is malformed
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(str(path))
            logger.debug("Opening scene file %s", path.name)
            with path.open(encoding=self.encoding) as stream:
                return self._load(stream, path.name)

        return self._load(source, getattr(source, "name", "<stream>"))

    def _load(self, stream: TextIO, name: str) -> Scene:
        try:
            scene = load_scene(stream, self.limits)
        except UnicodeDecodeError as e:
            logger.error("Scene %s is not valid %s", name, self.encoding)
            raise SceneLoadError(f"cannot decode {name}: {e.reason}") from e
        except SceneLoadError as e:
            logger.debug("Scene %s rejected: %s", name, e)
            raise
        logger.debug(
            "Scene %s: %d structures, %d antennas",
            name,
            scene.num_structures,
            scene.num_antennas,
        )
        return scene
