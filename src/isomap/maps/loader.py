"""Loading map descriptions from JSON files.

Turns a map description plus its atlas image into a TileRegistry and a
LayeredGrid. Every tile code a layer will draw is checked against the
registry here, so a dangling code fails the load instead of a frame.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import orjson
from PIL import Image, UnidentifiedImageError

from ..errors import (
    DimensionMismatch,
    MalformedDescription,
    MapLoadError,
    MissingImage,
    UnknownTileCode,
)
from ..tilesets.models import DEFAULT_CELL_SIZE, TileDefinition
from ..tilesets.registry import TileRegistry
from .models import LayeredGrid
from .schema import MapSchema


@dataclass
class LoadedMap:
    """Everything built from one map description.

    Attributes:
        registry: Tile registry owning the atlas
        grid: Layered grid of tile codes
        path: Description file the map came from (None when built in memory)
        image_path: Atlas file resolved relative to the description
    """

    registry: TileRegistry
    grid: LayeredGrid
    path: Optional[Path] = None
    image_path: Optional[Path] = None


class MapLoader:
    """Loads map descriptions and their atlas images.

    Handles parsing, schema validation, image loading and the registry
    cross-check. All failures are raised as MapLoadError subclasses or
    UnknownTileCode.
    """

    def __init__(self):
        """Initialize the loader."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, path: Union[str, Path]) -> LoadedMap:
        """Load a map description and its atlas from disk.

        Args:
            path: Path to the JSON description

        Returns:
            LoadedMap with registry and grid

        Raises:
            MalformedDescription: If the file is unreadable or invalid
            MissingImage: If the atlas cannot be opened
            DimensionMismatch: If layer shapes disagree
            UnknownTileCode: If a layer uses a code with no tile definition
        """
        path = Path(path)
        self.logger.info(f"Loading map from: {path}")

        data = self.load_description(path)
        image_path = self.resolve_image_path(path, data)
        image = self.load_image(image_path)

        try:
            registry, grid = self.build(image, data, source=path)
        except UnknownTileCode as e:
            self.logger.error(f"Map {path} references an undefined tile: {e}")
            raise

        self.logger.info(
            f"Loaded map {path.name}: {grid.rows}x{grid.columns}, "
            f"{grid.layer_count} layer(s), {len(registry)} tile(s)"
        )
        return LoadedMap(registry=registry, grid=grid, path=path, image_path=image_path)

    def load_description(self, path: Path) -> dict[str, Any]:
        """Read and parse the JSON description.

        Raises:
            MalformedDescription: If the file is missing, unreadable or not a JSON object
        """
        if not path.exists():
            raise MalformedDescription("map description not found", path)

        try:
            data = orjson.loads(path.read_bytes())
        except OSError as e:
            raise MalformedDescription(f"cannot read file: {e}", path) from e
        except orjson.JSONDecodeError as e:
            raise MalformedDescription(f"invalid JSON: {e}", path) from e

        if not isinstance(data, dict):
            raise MalformedDescription("root must be a JSON object", path)
        return data

    @staticmethod
    def resolve_image_path(description_path: Path, data: dict[str, Any]) -> Path:
        """Resolve the 'image' field relative to the description's folder.

        Raises:
            MalformedDescription: If 'image' is missing or not a string
        """
        image = data.get("image")
        if not isinstance(image, str) or not image:
            raise MalformedDescription("'image' must be a non-empty string", description_path)
        image_path = Path(image)
        if not image_path.is_absolute():
            image_path = description_path.parent / image_path
        return image_path

    def load_image(self, path: Path) -> Image.Image:
        """Open the atlas with Pillow and convert it to RGBA.

        Raises:
            MissingImage: If the file is missing or not a readable image
        """
        if not path.exists():
            raise MissingImage("atlas image not found", path)
        try:
            with Image.open(path) as img:
                image = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise MissingImage(f"cannot read atlas image: {e}", path) from e

        self.logger.debug(f"Atlas {path.name} loaded, {image.width}x{image.height}")
        return image

    def build(
        self,
        image: Any,
        data: dict[str, Any],
        source: Optional[Union[str, Path]] = None,
    ) -> tuple[TileRegistry, LayeredGrid]:
        """Convert a parsed description into a registry and a grid.

        Args:
            image: Already loaded atlas (shared by every tile)
            data: Parsed JSON description
            source: Where the description came from, for error messages

        Returns:
            (TileRegistry, LayeredGrid)
        """
        if image is None:
            raise MissingImage("no atlas image supplied", source)

        errors = MapSchema.validate_map(data)
        if errors:
            error_msg = "\n  - ".join(errors)
            raise MalformedDescription(f"invalid map description:\n  - {error_msg}", source)

        cell_size = self._cell_size(data) if data.get("clip_unit") == "cells" else None
        tiles = {
            int(key): TileDefinition.from_dict(entry, cell_size)
            for key, entry in data["tiles"].items()
        }
        registry = TileRegistry.from_mapping(
            image, tiles, source=str(source) if source is not None else None
        )

        layers, _ = MapSchema.extract_layers(data)
        try:
            grid = LayeredGrid(
                layers,
                empty_code=data.get("empty_code", 0),
                skip_empty_base=data.get("skip_empty_base", False),
            )
        except MapLoadError as e:
            raise type(e)(e.reason, source) from e

        self._check_declared_size(data, grid, source)
        self._check_codes(registry, grid)
        self._check_clips(registry, image)
        return registry, grid

    @staticmethod
    def _cell_size(data: dict[str, Any]) -> tuple[int, int]:
        size = data.get("cell_size")
        if not size:
            return DEFAULT_CELL_SIZE
        return (int(size["width"]), int(size["height"]))

    @staticmethod
    def _check_declared_size(
        data: dict[str, Any], grid: LayeredGrid, source: Optional[Union[str, Path]]
    ) -> None:
        """Compare optional 'width'/'height' fields with the layer shape."""
        width = data.get("width")
        height = data.get("height")
        if width is not None and width != grid.columns:
            raise DimensionMismatch(
                f"'width' is {width} but layers have {grid.columns} columns", source
            )
        if height is not None and height != grid.rows:
            raise DimensionMismatch(
                f"'height' is {height} but layers have {grid.rows} rows", source
            )

    def _check_codes(self, registry: TileRegistry, grid: LayeredGrid) -> None:
        """Fail on the first drawable cell whose code is not registered."""
        missing = registry.missing(grid.distinct_codes())
        if not missing:
            return

        self.logger.error(f"Undefined tile codes used by layers: {missing}")
        for cell in grid.iter_cells():
            if cell.code not in registry:
                raise UnknownTileCode(cell.code, cell.layer, cell.row, cell.col)

    def _check_clips(self, registry: TileRegistry, image: Any) -> None:
        """Warn about clips reaching past the atlas edge."""
        size = getattr(image, "size", None)
        if not size:
            return
        atlas_width, atlas_height = size
        for code in registry.codes():
            clip = registry.resolve(code).clip
            if clip.x < 0 or clip.y < 0 or clip.x + clip.width > atlas_width or (
                clip.y + clip.height > atlas_height
            ):
                self.logger.warning(
                    f"Tile {code} clip {clip.as_box()} exceeds atlas {atlas_width}x{atlas_height}"
                )


def build(loaded_map_image: Any, loaded_map_metadata: dict[str, Any]) -> tuple[TileRegistry, LayeredGrid]:
    """Build a registry and grid from an atlas and a parsed description."""
    return MapLoader().build(loaded_map_image, loaded_map_metadata)


def load_map(path: Union[str, Path]) -> LoadedMap:
    """Load a map description and its atlas from disk."""
    return MapLoader().load(path)
