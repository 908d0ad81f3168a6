"""Grid settings shared by the atlas builder and the slice generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import InvalidConfig


RGBA = Tuple[int, int, int, int]
Pivot = Tuple[float, float]

TRANSPARENT: RGBA = (0, 0, 0, 0)


class TransparencyMode(str, Enum):
    NONE = "none"
    MASK = "mask"


class NamingScheme(str, Enum):
    SEQUENTIAL = "sequential"
    ROW_COL = "rowcol"


class EmptyTileBehavior(str, Enum):
    KEEP = "keep"
    REMOVE = "remove"


class SpriteAlignment(str, Enum):
    CENTER = "center"
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    LEFT_CENTER = "left-center"
    RIGHT_CENTER = "right-center"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"
    CUSTOM = "custom"


@dataclass(frozen=True)
class TileGridConfig:
    """How a source sheet is cut into tiles and how the slices are presented.

    Tile dimensions are checked by ``compute_grid`` so that a bad size fails
    with the same error whichever entry point sees it first.
    """

    tile_width: int
    tile_height: int
    padding: int = 1
    transparency_mode: TransparencyMode = TransparencyMode.NONE
    transparent_color: RGBA = (255, 0, 255, 255)
    naming_scheme: NamingScheme = NamingScheme.SEQUENTIAL
    empty_tile_behavior: EmptyTileBehavior = EmptyTileBehavior.KEEP
    pixels_per_unit: float = 100.0
    alignment: SpriteAlignment = SpriteAlignment.CENTER
    pivot: Pivot = (0.5, 0.5)

    def __post_init__(self) -> None:
        # Accept plain strings and lists, e.g. when loaded from JSON.
        try:
            object.__setattr__(self, "transparency_mode", TransparencyMode(self.transparency_mode))
            object.__setattr__(self, "naming_scheme", NamingScheme(self.naming_scheme))
            object.__setattr__(self, "empty_tile_behavior", EmptyTileBehavior(self.empty_tile_behavior))
            object.__setattr__(self, "alignment", SpriteAlignment(self.alignment))
        except ValueError as exc:
            raise InvalidConfig(str(exc)) from exc
        object.__setattr__(self, "transparent_color", tuple(self.transparent_color))
        object.__setattr__(self, "pivot", tuple(self.pivot))

        if self.padding < 0:
            raise InvalidConfig(f"padding must be >= 0, got {self.padding}")
        if len(self.transparent_color) != 4 or any(not 0 <= c <= 255 for c in self.transparent_color):
            raise InvalidConfig(f"transparent_color must be an RGBA8 tuple, got {self.transparent_color!r}")
        if len(self.pivot) != 2:
            raise InvalidConfig(f"pivot must be an (x, y) pair, got {self.pivot!r}")
        if self.pixels_per_unit <= 0:
            raise InvalidConfig(f"pixels_per_unit must be > 0, got {self.pixels_per_unit}")

    @property
    def cell_width(self) -> int:
        return self.tile_width + 2 * self.padding

    @property
    def cell_height(self) -> int:
        return self.tile_height + 2 * self.padding


def parse_hex_color(value: str) -> RGBA:
    """Parse ``#RRGGBB`` (opaque) or ``#RRGGBBAA``."""
    s = value.strip().lstrip("#")
    if len(s) not in (6, 8):
        raise InvalidConfig(f"invalid color: {value}")
    try:
        parts = [int(s[i:i + 2], 16) for i in range(0, len(s), 2)]
    except ValueError as exc:
        raise InvalidConfig(f"invalid color: {value}") from exc
    if len(parts) == 3:
        parts.append(255)
    return (parts[0], parts[1], parts[2], parts[3])


def parse_tile_size(value: str) -> Tuple[int, int]:
    """Parse ``16`` (square) or ``16x24``."""
    s = value.strip().lower()
    try:
        if "x" in s:
            w, h = s.split("x", 1)
            return int(w), int(h)
        size = int(s)
    except ValueError as exc:
        raise InvalidConfig(f"invalid tile size: {value}") from exc
    return size, size
