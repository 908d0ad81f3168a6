"""Colour-key transparency for pixels read out of the source sheet."""

from __future__ import annotations

from .config import RGBA, TRANSPARENT, TileGridConfig, TransparencyMode


def mask(color: RGBA, config: TileGridConfig) -> RGBA:
    # Keyed pixels lose their RGB too, not just alpha.
    if config.transparency_mode is TransparencyMode.MASK and tuple(color) == config.transparent_color:
        return TRANSPARENT
    return color
