"""Deterministic tile names."""

from __future__ import annotations

from .config import NamingScheme


def axis_width(count: int) -> int:
    """Digits used for indices along an axis with ``count`` tiles.

    The thresholds are on the count, not the largest index, so an axis of
    exactly 10 tiles still uses one digit and exactly 100 uses two.
    """
    if count > 100:
        return 3
    if count > 10:
        return 2
    return 1


def tile_name(
    base_name: str,
    index: int,
    col: int,
    row: int,
    cols: int,
    rows: int,
    scheme: NamingScheme,
) -> str:
    if scheme is NamingScheme.ROW_COL:
        return f"{base_name}_{row:0{axis_width(rows)}d}_{col:0{axis_width(cols)}d}"
    return f"{base_name}_{index}"
