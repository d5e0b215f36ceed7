"""Infrastructure adapters for the scene bounded context.

This module provides the infrastructure layer implementations for scene
operations, including loading scene descriptions from text streams.
"""

from .stream_adapter import StreamSceneAdapter

__all__ = ["StreamSceneAdapter"]
