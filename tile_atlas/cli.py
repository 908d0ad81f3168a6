"""Command line entry point for building a padded tile atlas."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .config import (
    EmptyTileBehavior,
    NamingScheme,
    SpriteAlignment,
    TileGridConfig,
    TransparencyMode,
    parse_hex_color,
    parse_tile_size,
)
from .errors import AtlasError
from .export import import_sheet


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build a padded tile atlas and slice metadata from a sprite sheet.")
    p.add_argument("--input", required=True, help="Source sprite sheet (any format Pillow can read).")
    p.add_argument(
        "--out-dir",
        default=None,
        help="Parent directory for the <name>/ output folder (default: next to the input).",
    )
    p.add_argument("--tile", required=True, help="Tile size, e.g. 16 or 16x24.")
    p.add_argument("--padding", type=int, default=1, help="Bleed pixels around each tile.")
    p.add_argument(
        "--mask-color",
        default=None,
        help="Color key (#RRGGBB or #RRGGBBAA) turned fully transparent.",
    )
    p.add_argument(
        "--naming",
        choices=[s.value for s in NamingScheme],
        default=NamingScheme.SEQUENTIAL.value,
        help="sequential: <name>_<index>, rowcol: <name>_<row>_<col>.",
    )
    p.add_argument(
        "--remove-empty",
        action="store_true",
        default=False,
        help="Drop fully transparent tiles from the slice list.",
    )
    p.add_argument(
        "--keep-empty",
        action="store_false",
        dest="remove_empty",
        help="Keep fully transparent tiles (default).",
    )
    p.add_argument("--pixels-per-unit", type=float, default=100.0, help="Stored in the slice metadata.")
    p.add_argument(
        "--alignment",
        choices=[a.value for a in SpriteAlignment],
        default=SpriteAlignment.CENTER.value,
        help="Sprite alignment copied onto every slice.",
    )
    p.add_argument(
        "--pivot",
        type=float,
        nargs=2,
        default=[0.5, 0.5],
        metavar=("X", "Y"),
        help="Normalized pivot copied onto every slice.",
    )
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> TileGridConfig:
    tile_w, tile_h = parse_tile_size(args.tile)
    mode = TransparencyMode.NONE
    color = TileGridConfig.transparent_color
    if args.mask_color:
        mode = TransparencyMode.MASK
        color = parse_hex_color(args.mask_color)
    return TileGridConfig(
        tile_width=tile_w,
        tile_height=tile_h,
        padding=args.padding,
        transparency_mode=mode,
        transparent_color=color,
        naming_scheme=NamingScheme(args.naming),
        empty_tile_behavior=EmptyTileBehavior.REMOVE if args.remove_empty else EmptyTileBehavior.KEEP,
        pixels_per_unit=args.pixels_per_unit,
        alignment=SpriteAlignment(args.alignment),
        pivot=(args.pivot[0], args.pivot[1]),
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    src = Path(args.input)
    if not src.exists():
        raise SystemExit(f"input not found: {src}")

    try:
        config = config_from_args(args)
        result = import_sheet(src, config, Path(args.out_dir) if args.out_dir else None)
    except AtlasError as exc:
        raise SystemExit(str(exc)) from exc

    w, h = result.atlas.size
    print(f"[ok] atlas {w}x{h} -> {result.atlas_path}")
    print(f"[ok] {len(result.slices)} slices -> {result.metadata_path}")


if __name__ == "__main__":
    main()
