"""Build a padded atlas from a regularly gridded sprite sheet."""

from __future__ import annotations

from PIL import Image

from .bleed import fill_edges
from .config import TRANSPARENT, TileGridConfig
from .errors import InvalidConfig
from .geometry import Rect, compute_atlas_size, compute_grid, require_inside
from .masking import mask


def build_atlas(source: Image.Image, config: TileGridConfig) -> Image.Image:
    """Return a new RGBA atlas with every tile surrounded by its bleed band.

    Tiles are laid out in the same grid as the source, each in a cell of
    ``tile + 2 * padding`` pixels. The source image is never modified.
    """
    tw, th, p = config.tile_width, config.tile_height, config.padding
    cols, rows = compute_grid(source.width, source.height, tw, th)
    if cols == 0 or rows == 0:
        raise InvalidConfig(
            f"source {source.width}x{source.height} is smaller than one {tw}x{th} tile"
        )
    atlas_w, atlas_h = compute_atlas_size(cols, rows, tw, th, p)

    if source.mode != "RGBA":
        source = source.convert("RGBA")
    atlas = Image.new("RGBA", (atlas_w, atlas_h), TRANSPARENT)

    for row in range(rows):
        for col in range(cols):
            source_rect = Rect(col * tw, row * th, tw, th)
            dest_rect = Rect(col * config.cell_width + p, row * config.cell_height + p, tw, th)
            copy_tile(source, atlas, source_rect, dest_rect, config)
            fill_edges(source, atlas, source_rect, dest_rect, p, config)

    return atlas


def copy_tile(
    source: Image.Image,
    atlas: Image.Image,
    source_rect: Rect,
    dest_rect: Rect,
    config: TileGridConfig,
) -> None:
    require_inside(source_rect, source.size, "source")
    require_inside(dest_rect, atlas.size, "atlas")
    src = source.load()
    dst = atlas.load()
    for y in range(source_rect.h):
        for x in range(source_rect.w):
            dst[dest_rect.x + x, dest_rect.y + y] = mask(src[source_rect.x + x, source_rect.y + y], config)
