"""Padded tile atlases with bleed bands, plus named slice rects for sprite importers."""

from .builder import build_atlas
from .config import (
    EmptyTileBehavior,
    NamingScheme,
    SpriteAlignment,
    TileGridConfig,
    TransparencyMode,
)
from .errors import AtlasError, InvalidConfig, OutOfBounds
from .geometry import Rect, compute_atlas_size, compute_grid
from .slices import SliceDescriptor, generate_slices

__all__ = [
    "AtlasError",
    "EmptyTileBehavior",
    "InvalidConfig",
    "NamingScheme",
    "OutOfBounds",
    "Rect",
    "SliceDescriptor",
    "SpriteAlignment",
    "TileGridConfig",
    "TransparencyMode",
    "build_atlas",
    "compute_atlas_size",
    "compute_grid",
    "generate_slices",
]
