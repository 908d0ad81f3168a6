"""Exceptions raised while building atlases and slice lists."""

from __future__ import annotations


class AtlasError(RuntimeError):
    """Base class for every failure raised by tile_atlas."""


class InvalidConfig(AtlasError, ValueError):
    """Raised when the grid settings cannot describe at least one tile."""


class OutOfBounds(AtlasError, IndexError):
    """Raised when a computed rect falls outside the buffer it addresses."""
