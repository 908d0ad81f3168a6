"""Edge replication into the padding band around each atlas tile.

Sampling a tile with bilinear filtering or mipmaps pulls in texels from just
outside its rect. Copying the tile's own border pixels outward means those
texels repeat the edge instead of belonging to the neighbouring tile.
"""

from __future__ import annotations

from PIL import Image

from .config import TileGridConfig
from .geometry import Rect, require_inside
from .masking import mask


def fill_edges(
    source: Image.Image,
    atlas: Image.Image,
    source_rect: Rect,
    dest_rect: Rect,
    padding: int,
    config: TileGridConfig,
) -> None:
    """Fill the ``padding``-wide band around ``dest_rect`` in ``atlas``.

    Layer 0 is the ring directly touching the tile, so the near edge of
    layer ``n`` sits ``n + 1`` pixels outside the tile. Corners take the
    single matching source corner pixel.
    """
    if padding <= 0:
        return
    require_inside(source_rect, source.size, "source")
    band = Rect(dest_rect.x - padding, dest_rect.y - padding,
                dest_rect.w + 2 * padding, dest_rect.h + 2 * padding)
    require_inside(band, atlas.size, "padding band")

    src = source.load()
    dst = atlas.load()
    sx, sy = source_rect.x, source_rect.y
    sx_last, sy_last = source_rect.x_max - 1, source_rect.y_max - 1
    dx, dy = dest_rect.x, dest_rect.y

    for layer in range(padding):
        for i in range(dest_rect.h):
            dst[dx - layer - 1, dy + i] = mask(src[sx, sy + i], config)
            dst[dest_rect.x_max + layer, dy + i] = mask(src[sx_last, sy + i], config)

    for layer in range(padding):
        for i in range(dest_rect.w):
            dst[dx + i, dy - layer - 1] = mask(src[sx + i, sy], config)
            dst[dx + i, dest_rect.y_max + layer] = mask(src[sx + i, sy_last], config)

    top_left = mask(src[sx, sy], config)
    top_right = mask(src[sx_last, sy], config)
    bottom_left = mask(src[sx, sy_last], config)
    bottom_right = mask(src[sx_last, sy_last], config)
    for x in range(padding):
        for y in range(padding):
            dst[dx - x - 1, dy - y - 1] = top_left
            dst[dest_rect.x_max + x, dy - y - 1] = top_right
            dst[dx - x - 1, dest_rect.y_max + y] = bottom_left
            dst[dest_rect.x_max + x, dest_rect.y_max + y] = bottom_right
