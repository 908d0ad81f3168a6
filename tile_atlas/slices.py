"""Named slice rects for a padded atlas.

Slice rects use a bottom-left origin, as sprite importers expect, while the
atlas image itself is addressed from the top-left. Grid row 0 (the top row
of the sheet) therefore gets the highest ``y``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image

from .config import EmptyTileBehavior, Pivot, SpriteAlignment, TileGridConfig
from .errors import InvalidConfig, OutOfBounds
from .geometry import Rect, compute_atlas_size, compute_grid, require_inside
from .naming import tile_name


@dataclass(frozen=True)
class SliceDescriptor:
    name: str
    rect: Rect
    alignment: SpriteAlignment
    pivot: Pivot
    is_empty: bool = False


def to_raster(rect: Rect, height: int) -> Rect:
    """Flip a bottom-left-origin rect into top-left image space."""
    return Rect(rect.x, height - rect.y - rect.h, rect.w, rect.h)


def is_tile_empty(atlas: Image.Image, rect: Rect) -> bool:
    """True when every pixel under ``rect`` (bottom-left origin) has alpha 0."""
    region = to_raster(rect, atlas.height)
    require_inside(region, atlas.size, "slice")
    tile = atlas.crop((region.x, region.y, region.x_max, region.y_max))
    return tile.getchannel("A").getbbox() is None


def generate_slices(
    atlas: Image.Image,
    base_name: str,
    config: TileGridConfig,
    source_size: Tuple[int, int],
) -> List[SliceDescriptor]:
    """Describe every tile of ``atlas`` in row-major order.

    ``source_size`` must be the size of the sheet the atlas was built from;
    the grid comes from it rather than from the atlas pixels. With
    ``EmptyTileBehavior.REMOVE`` fully transparent tiles are dropped but
    still consume a sequential index, so names keep a gap where they were.
    """
    tw, th, p = config.tile_width, config.tile_height, config.padding
    cols, rows = compute_grid(source_size[0], source_size[1], tw, th)
    if cols == 0 or rows == 0:
        raise InvalidConfig(
            f"source {source_size[0]}x{source_size[1]} is smaller than one {tw}x{th} tile"
        )
    cell_w, cell_h = config.cell_width, config.cell_height
    height = rows * cell_h
    expected = compute_atlas_size(cols, rows, tw, th, p)
    if atlas.size != expected:
        raise OutOfBounds(f"atlas is {atlas.width}x{atlas.height}, grid needs {expected[0]}x{expected[1]}")
    remove_empty = config.empty_tile_behavior is EmptyTileBehavior.REMOVE

    slices: List[SliceDescriptor] = []
    index = 0
    for row in range(rows):
        for col in range(cols):
            rect = Rect(col * cell_w + p, height - (row + 1) * cell_h + p, tw, th)
            if remove_empty and is_tile_empty(atlas, rect):
                index += 1
                continue

            slices.append(SliceDescriptor(
                name=tile_name(base_name, index, col, row, cols, rows, config.naming_scheme),
                rect=rect,
                alignment=config.alignment,
                pivot=config.pivot,
            ))
            index += 1

    return slices
