"""Write atlases and slice metadata next to their source sheet.

A sheet ``art/terrain.png`` is imported into ``art/terrain/terrain.png``
(the padded atlas) and ``art/terrain/terrain.json`` (the slices).
Re-importing keeps any per-slice data that other tools added to the JSON,
such as physics shapes, as long as the slice keeps its name.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from PIL import Image

from .builder import build_atlas
from .config import TileGridConfig
from .errors import AtlasError
from .geometry import compute_grid
from .slices import SliceDescriptor, generate_slices


# Keys written by this module; everything else on a slice belongs to someone else.
OWNED_KEYS = frozenset({"name", "rect", "alignment", "pivot"})

Preserved = Dict[str, Dict[str, Any]]


@dataclass
class ImportResult:
    atlas_path: Path
    metadata_path: Path
    atlas: Image.Image
    slices: List[SliceDescriptor]


def slice_to_dict(desc: SliceDescriptor) -> Dict[str, Any]:
    return {
        "name": desc.name,
        "rect": {"x": desc.rect.x, "y": desc.rect.y, "width": desc.rect.w, "height": desc.rect.h},
        "alignment": desc.alignment.value,
        "pivot": [desc.pivot[0], desc.pivot[1]],
    }


def load_preserved(path: Path) -> Preserved:
    """Collect the foreign keys of every slice in an existing metadata file."""
    if not path.exists():
        return {}
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise AtlasError(f"cannot read slice metadata {path}: {exc}") from exc
    slices = doc.get("slices") if isinstance(doc, dict) else None
    if not isinstance(slices, list):
        raise AtlasError(f"slice metadata {path} has no 'slices' list")

    preserved: Preserved = {}
    for entry in slices:
        if not isinstance(entry, dict) or "name" not in entry:
            continue
        extra = {k: v for k, v in entry.items() if k not in OWNED_KEYS}
        if extra:
            preserved[entry["name"]] = extra
    return preserved


def write_atlas(atlas: Image.Image, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    atlas.save(path, format="PNG")
    return path


def write_slices(
    path: Path,
    slices: Sequence[SliceDescriptor],
    config: TileGridConfig,
    atlas_size: Tuple[int, int],
    source_size: Tuple[int, int],
    texture: str,
    preserved: Optional[Preserved] = None,
) -> Path:
    cols, rows = compute_grid(source_size[0], source_size[1], config.tile_width, config.tile_height)
    preserved = preserved or {}
    entries = []
    for desc in slices:
        entry = slice_to_dict(desc)
        entry.update(preserved.get(desc.name, {}))
        entries.append(entry)

    meta = {
        "texture": texture,
        "atlas_width": atlas_size[0],
        "atlas_height": atlas_size[1],
        "tile_width": config.tile_width,
        "tile_height": config.tile_height,
        "padding": config.padding,
        "columns": cols,
        "rows": rows,
        "pixels_per_unit": config.pixels_per_unit,
        # Padding only helps if the texture is sampled unfiltered and uncompressed.
        "import": {"filter_mode": "point", "mipmaps": False, "compression": "none"},
        "slices": entries,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2)
        f.write("\n")
    return path


def import_sheet(source_path: Path, config: TileGridConfig, out_dir: Optional[Path] = None) -> ImportResult:
    """Build, slice and write one sheet. Nothing is written if building fails."""
    source_path = Path(source_path)
    base = source_path.stem
    folder = Path(out_dir if out_dir is not None else source_path.parent) / base
    atlas_path = folder / f"{base}.png"
    metadata_path = folder / f"{base}.json"

    with Image.open(source_path) as img:
        source = img.convert("RGBA")
    atlas = build_atlas(source, config)
    slices = generate_slices(atlas, base, config, source.size)
    preserved = load_preserved(metadata_path)

    write_atlas(atlas, atlas_path)
    write_slices(metadata_path, slices, config, atlas.size, source.size, atlas_path.name, preserved)
    return ImportResult(atlas_path, metadata_path, atlas, slices)
