"""Tests for slice generation."""

import pytest
from PIL import Image

from tile_atlas.builder import build_atlas
from tile_atlas.config import (
    EmptyTileBehavior,
    NamingScheme,
    SpriteAlignment,
    TileGridConfig,
    TransparencyMode,
)
from tile_atlas.errors import InvalidConfig, OutOfBounds
from tile_atlas.geometry import Rect
from tile_atlas.slices import generate_slices, is_tile_empty, to_raster


def strip_with_hole(hole_col, cols=3):
    """One row of opaque 2x2 tiles with the tile at ``hole_col`` fully transparent."""
    img = Image.new("RGBA", (2 * cols, 2), (0, 0, 0, 0))
    for x in range(2 * cols):
        if x // 2 == hole_col:
            continue
        for y in range(2):
            img.putpixel((x, y), (200, 100, 50, 255))
    return img


def slices_for(source, config, base="base"):
    atlas = build_atlas(source, config)
    return generate_slices(atlas, base, config, source.size)


class TestRects:
    def test_bottom_up_rows(self, make_sheet):
        config = TileGridConfig(2, 2, padding=1)
        rects = [s.rect for s in slices_for(make_sheet(4, 4), config)]
        assert rects == [Rect(1, 5, 2, 2), Rect(5, 5, 2, 2), Rect(1, 1, 2, 2), Rect(5, 1, 2, 2)]

    def test_rect_covers_its_tile(self, make_sheet):
        source = make_sheet(6, 4)
        config = TileGridConfig(3, 2, padding=2)
        atlas = build_atlas(source, config)
        for desc, (col, row) in zip(generate_slices(atlas, "b", config, source.size),
                                    [(0, 0), (1, 0), (0, 1), (1, 1)]):
            r = to_raster(desc.rect, atlas.height)
            assert atlas.getpixel((r.x, r.y)) == source.getpixel((col * 3, row * 2))

    def test_zero_padding(self, make_sheet):
        config = TileGridConfig(2, 2, padding=0)
        rects = [s.rect for s in slices_for(make_sheet(2, 4), config)]
        assert rects == [Rect(0, 2, 2, 2), Rect(0, 0, 2, 2)]


class TestNaming:
    def test_rowcol_example(self, make_sheet):
        config = TileGridConfig(2, 2, padding=1, naming_scheme=NamingScheme.ROW_COL)
        slices = slices_for(make_sheet(4, 4), config, base="tiles")
        assert [s.name for s in slices] == ["tiles_0_0", "tiles_0_1", "tiles_1_0", "tiles_1_1"]
        by_name = {s.name: s.rect.y for s in slices}
        assert by_name["tiles_1_0"] == by_name["tiles_1_1"] == 1
        assert by_name["tiles_0_0"] == by_name["tiles_0_1"] == 5

    def test_sequential(self, make_sheet):
        slices = slices_for(make_sheet(6, 2), TileGridConfig(2, 2))
        assert [s.name for s in slices] == ["base_0", "base_1", "base_2"]


class TestEmptyTiles:
    def test_removed_tile_leaves_index_gap(self):
        config = TileGridConfig(2, 2, empty_tile_behavior=EmptyTileBehavior.REMOVE)
        slices = slices_for(strip_with_hole(1), config)
        assert [s.name for s in slices] == ["base_0", "base_2"]

    def test_keep_emits_empty_tiles(self):
        slices = slices_for(strip_with_hole(1), TileGridConfig(2, 2))
        assert [s.name for s in slices] == ["base_0", "base_1", "base_2"]
        assert not any(s.is_empty for s in slices)

    def test_rowcol_names_unaffected_by_removal(self):
        config = TileGridConfig(
            2, 2, naming_scheme=NamingScheme.ROW_COL, empty_tile_behavior=EmptyTileBehavior.REMOVE,
        )
        slices = slices_for(strip_with_hole(0), config)
        assert [s.name for s in slices] == ["base_0_1", "base_0_2"]

    def test_masked_tile_counts_as_empty(self):
        source = Image.new("RGBA", (4, 2), (255, 0, 255, 255))
        source.paste((1, 2, 3, 255), (2, 0, 4, 2))
        config = TileGridConfig(
            2, 2,
            transparency_mode=TransparencyMode.MASK,
            transparent_color=(255, 0, 255, 255),
            empty_tile_behavior=EmptyTileBehavior.REMOVE,
        )
        assert [s.name for s in slices_for(source, config)] == ["base_1"]

    def test_single_visible_pixel_keeps_tile(self):
        source = Image.new("RGBA", (2, 2), (9, 9, 9, 0))
        source.putpixel((1, 1), (0, 0, 0, 1))
        config = TileGridConfig(2, 2, empty_tile_behavior=EmptyTileBehavior.REMOVE)
        assert [s.name for s in slices_for(source, config)] == ["base_0"]

    def test_emptiness_read_from_flipped_rect(self):
        # top tile empty, bottom tile opaque
        source = Image.new("RGBA", (2, 4), (0, 0, 0, 0))
        source.paste((5, 5, 5, 255), (0, 2, 2, 4))
        config = TileGridConfig(2, 2, empty_tile_behavior=EmptyTileBehavior.REMOVE)
        slices = slices_for(source, config)
        assert [(s.name, s.rect) for s in slices] == [("base_1", Rect(1, 1, 2, 2))]

    def test_is_tile_empty(self):
        atlas = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
        atlas.putpixel((0, 0), (0, 0, 0, 255))
        assert is_tile_empty(atlas, Rect(0, 0, 2, 2))
        assert not is_tile_empty(atlas, Rect(0, 2, 2, 2))

    def test_is_tile_empty_out_of_bounds(self):
        with pytest.raises(OutOfBounds):
            is_tile_empty(Image.new("RGBA", (4, 4)), Rect(3, 0, 2, 2))


class TestDescriptors:
    def test_presentation_fields_copied(self, make_sheet):
        config = TileGridConfig(2, 2, alignment=SpriteAlignment.BOTTOM_CENTER, pivot=(0.5, 0.0))
        for desc in slices_for(make_sheet(4, 2), config):
            assert desc.alignment is SpriteAlignment.BOTTOM_CENTER
            assert desc.pivot == (0.5, 0.0)
            assert desc.is_empty is False

    def test_deterministic(self, make_sheet):
        source = make_sheet(8, 6)
        config = TileGridConfig(2, 3, padding=1, empty_tile_behavior=EmptyTileBehavior.REMOVE)
        atlas = build_atlas(source, config)
        assert generate_slices(atlas, "x", config, source.size) == generate_slices(atlas, "x", config, source.size)


class TestSliceErrors:
    def test_source_smaller_than_tile(self):
        with pytest.raises(InvalidConfig):
            generate_slices(Image.new("RGBA", (4, 4)), "b", TileGridConfig(4, 4), (3, 4))

    def test_atlas_does_not_match_grid(self, make_sheet):
        config = TileGridConfig(2, 2)
        atlas = build_atlas(make_sheet(4, 4), config)
        with pytest.raises(OutOfBounds):
            generate_slices(atlas, "b", config, (6, 4))
