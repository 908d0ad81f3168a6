"""Grid arithmetic for padded atlases.

Only whole tiles are considered: a sheet that is not an exact multiple of
the tile size keeps its right/bottom remainder out of the atlas entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidConfig, OutOfBounds


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def x_max(self) -> int:
        return self.x + self.w

    @property
    def y_max(self) -> int:
        return self.y + self.h

    def inside(self, width: int, height: int) -> bool:
        return self.x >= 0 and self.y >= 0 and self.x_max <= width and self.y_max <= height


def compute_grid(source_w: int, source_h: int, tile_w: int, tile_h: int) -> Tuple[int, int]:
    if tile_w <= 0 or tile_h <= 0:
        raise InvalidConfig(f"tile size must be positive, got {tile_w}x{tile_h}")
    return source_w // tile_w, source_h // tile_h


def compute_atlas_size(cols: int, rows: int, tile_w: int, tile_h: int, padding: int) -> Tuple[int, int]:
    return cols * (tile_w + 2 * padding), rows * (tile_h + 2 * padding)


def require_inside(rect: Rect, size: Tuple[int, int], what: str) -> None:
    w, h = size
    if not rect.inside(w, h):
        raise OutOfBounds(f"{what} rect {rect} falls outside {w}x{h} buffer")
