"""Tests for tile models and the tile registry."""

import pytest
from PIL import Image

from isomap.errors import MalformedDescription, UnknownTileCode
from isomap.tilesets import Anchor, ClipRect, TileDefinition, TileRegistry


class TestTileModels:
    """Test tile value types."""

    def test_clip_from_pixels(self) -> None:
        """Test pixel clips are taken as-is."""
        clip = ClipRect.from_dict({"x": 448, "y": 192, "width": 64, "height": 64})
        assert clip == ClipRect(448, 192, 64, 64)
        assert clip.as_box() == (448, 192, 512, 256)

    def test_clip_from_cells(self) -> None:
        """Test cell clips are multiplied by the cell size."""
        clip = ClipRect.from_dict({"x": 7, "y": 3, "width": 1, "height": 2}, (64, 64))
        assert clip == ClipRect(448, 192, 64, 128)

    def test_origin_defaults_to_zero(self) -> None:
        """Test a tile without origin is anchored at (0, 0)."""
        definition = TileDefinition.from_dict({"clip": {"x": 0, "y": 0, "width": 64, "height": 64}})
        assert definition.origin == Anchor(0, 0)

    def test_tall_tile_origin(self) -> None:
        """Test origins are read in pixels."""
        definition = TileDefinition.from_dict(
            {
                "clip": {"x": 2, "y": 12, "width": 1, "height": 2},
                "origin": {"x": 0, "y": 64},
            },
            (64, 64),
        )
        assert definition.clip == ClipRect(128, 768, 64, 128)
        assert definition.origin == Anchor(0, 64)

    def test_missing_clip(self) -> None:
        """Test a tile entry without clip is malformed."""
        with pytest.raises(MalformedDescription):
            TileDefinition.from_dict({"origin": {"x": 0, "y": 0}})


class TestTileRegistry:
    """Test registry lookups."""

    def test_register_and_resolve(self, atlas: Image.Image) -> None:
        """Test registered codes resolve to their definitions."""
        registry = TileRegistry(atlas)
        definition = TileDefinition(ClipRect(0, 0, 64, 64))
        registry.register(1, definition)

        assert registry.resolve(1) is definition
        assert 1 in registry
        assert len(registry) == 1

    def test_unknown_code(self) -> None:
        """Test resolving an unregistered code raises UnknownTileCode."""
        registry = TileRegistry()
        with pytest.raises(UnknownTileCode) as exc_info:
            registry.resolve(42)
        assert exc_info.value.code == 42
        assert isinstance(exc_info.value, LookupError)
        assert registry.get(42) is None

    def test_last_write_wins(self) -> None:
        """Test registering a code twice keeps the second definition."""
        registry = TileRegistry()
        registry.register(1, TileDefinition(ClipRect(0, 0, 64, 64)))
        second = TileDefinition(ClipRect(64, 0, 64, 64))
        registry.register(1, second)
        assert registry.resolve(1) is second
        assert len(registry) == 1

    def test_codes_and_missing(self) -> None:
        """Test code listing and missing-code detection."""
        registry = TileRegistry.from_mapping(
            None,
            {code: TileDefinition(ClipRect(0, 0, 64, 64)) for code in (3, 0, 1)},
        )
        assert registry.codes() == [0, 1, 3]
        assert list(registry) == [0, 1, 3]
        assert registry.missing([0, 1, 2, 5, 5]) == [2, 5]
