#!/usr/bin/env python3
"""
Build a padded tile atlas (edge-bleed bands around every tile) and a JSON
slice list from a regularly gridded sprite sheet.

Output for art/terrain.png:
  art/terrain/terrain.png   padded atlas
  art/terrain/terrain.json  slice rects (bottom-left origin) and names

Usage:
  uv run --with pillow --with-editable . python scripts/build_tile_atlas.py \
    --input art/terrain.png --tile 16 --padding 1 \
    --mask-color "#FF00FF" --naming rowcol --remove-empty
"""

from __future__ import annotations

from tile_atlas.cli import main


if __name__ == "__main__":
    main()
