"""Schema checks for map description JSON.

Defines the expected structure of a map description and collects every
problem it finds, so a broken file is reported in one go.
"""

from typing import Any, cast


class MapSchema:
    """Validation schemas for map description JSON structure.

    Layers come in one of three forms:
    - "map": a single 2D array (single-layer maps)
    - "layers": an object of name -> 2D array, or a list of {"name", "grid"}
    - top-level "low" / "mid" / "high" arrays
    """

    REQUIRED_ROOT_FIELDS = {"image", "tiles"}
    CLIP_FIELDS = ("x", "y", "width", "height")
    CLIP_UNITS = {"pixels", "cells"}
    # Top-level layer names, in draw order
    LEGACY_LAYER_NAMES = ("low", "mid", "high")

    @staticmethod
    def validate_root(data: Any) -> list[str]:
        """Validate root-level fields.

        Args:
            data: Parsed JSON data

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []
        if not isinstance(data, dict):
            return [f"root must be an object, got {type(data).__name__}"]

        root = cast(dict[str, Any], data)
        missing = MapSchema.REQUIRED_ROOT_FIELDS - root.keys()
        if missing:
            errors.append(f"Missing required fields: {sorted(missing)}")

        if "image" in root and (not isinstance(root["image"], str) or not root["image"]):
            errors.append("'image' must be a non-empty string")
        if "tiles" in root and not isinstance(root["tiles"], dict):
            errors.append("'tiles' must be an object")

        clip_unit = root.get("clip_unit", "pixels")
        if not isinstance(clip_unit, str) or clip_unit not in MapSchema.CLIP_UNITS:
            errors.append(
                f"'clip_unit' must be one of {sorted(MapSchema.CLIP_UNITS)}, got {clip_unit!r}"
            )

        cell_size = root.get("cell_size")
        if cell_size is not None:
            if not isinstance(cell_size, dict):
                errors.append("'cell_size' must be an object")
            else:
                size = cast(dict[str, Any], cell_size)
                for key in ("width", "height"):
                    if not MapSchema._is_int(size.get(key)) or size[key] <= 0:
                        errors.append(f"'cell_size.{key}' must be a positive integer")

        for key in ("width", "height"):
            if key in root and (not MapSchema._is_int(root[key]) or root[key] <= 0):
                errors.append(f"'{key}' must be a positive integer, got {root[key]!r}")

        empty_code = root.get("empty_code", 0)
        if empty_code is not None and not MapSchema._is_int(empty_code):
            errors.append(f"'empty_code' must be an integer or null, got {empty_code!r}")
        if not isinstance(root.get("skip_empty_base", False), bool):
            errors.append("'skip_empty_base' must be a boolean")

        return errors

    @staticmethod
    def validate_tiles(tiles: dict[str, Any]) -> list[str]:
        """Validate the tiles mapping.

        Args:
            tiles: The 'tiles' object, keyed by integer codes as strings

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []
        for key, entry in tiles.items():
            try:
                code = int(key)
            except (TypeError, ValueError):
                errors.append(f"Tile key {key!r} is not an integer code")
                continue
            # "01" or " 1" would silently collide with "1"
            if str(code) != key:
                errors.append(f"Tile key {key!r} is not written as plain integer {code}")
                continue

            if not isinstance(entry, dict):
                errors.append(f"Tile {key}: entry must be an object")
                continue

            tile = cast(dict[str, Any], entry)
            clip = tile.get("clip")
            if not isinstance(clip, dict):
                errors.append(f"Tile {key}: 'clip' must be an object")
            else:
                clip_dict = cast(dict[str, Any], clip)
                for field_name in MapSchema.CLIP_FIELDS:
                    if not MapSchema._is_number(clip_dict.get(field_name)):
                        errors.append(f"Tile {key}: 'clip.{field_name}' must be a number")
                for field_name in ("width", "height"):
                    value = clip_dict.get(field_name)
                    if MapSchema._is_number(value) and value <= 0:
                        errors.append(f"Tile {key}: 'clip.{field_name}' must be positive")

            origin = tile.get("origin")
            if origin is not None:
                if not isinstance(origin, dict):
                    errors.append(f"Tile {key}: 'origin' must be an object")
                else:
                    origin_dict = cast(dict[str, Any], origin)
                    for field_name in ("x", "y"):
                        if field_name in origin_dict and not MapSchema._is_number(
                            origin_dict[field_name]
                        ):
                            errors.append(f"Tile {key}: 'origin.{field_name}' must be a number")

        return errors

    @staticmethod
    def extract_layers(data: dict[str, Any]) -> tuple[list[tuple[str, Any]], list[str]]:
        """Pull the raw (name, grid) pairs out of a description.

        Returns:
            (layers, errors) - layers in draw order, bottom first
        """
        errors: list[str] = []
        forms = [
            key for key in ("map", "layers") if key in data
        ]
        legacy = [name for name in MapSchema.LEGACY_LAYER_NAMES if name in data]
        if legacy:
            forms.append("low/mid/high")

        if not forms:
            return [], ["No layers: expected 'map', 'layers' or 'low'/'mid'/'high'"]
        if len(forms) > 1:
            return [], [f"Layers given in more than one form: {forms}"]

        if "map" in data:
            return [("map", data["map"])], errors

        if legacy:
            return [(name, data[name]) for name in legacy], errors

        raw = data["layers"]
        if isinstance(raw, dict):
            return list(cast(dict[str, Any], raw).items()), errors
        if isinstance(raw, list):
            layers: list[tuple[str, Any]] = []
            for idx, item in enumerate(cast(list[Any], raw)):
                if not isinstance(item, dict) or "grid" not in item:
                    errors.append(f"Layer {idx}: expected an object with 'grid'")
                    continue
                entry = cast(dict[str, Any], item)
                layers.append((str(entry.get("name", f"layer{idx}")), entry["grid"]))
            return layers, errors
        return [], ["'layers' must be an object or an array"]

    @staticmethod
    def validate_layer(name: str, grid: Any) -> list[str]:
        """Check one layer is a 2D array of integers (shape is checked later)."""
        errors: list[str] = []
        if not isinstance(grid, list) or not grid:
            return [f"Layer '{name}' must be a non-empty array"]

        for row_idx, row in enumerate(cast(list[Any], grid)):
            if not isinstance(row, list):
                errors.append(f"Layer '{name}' row {row_idx} is not an array")
                continue
            bad = [value for value in cast(list[Any], row) if not MapSchema._is_int(value)]
            if bad:
                errors.append(
                    f"Layer '{name}' row {row_idx} has non-integer codes: {bad[:3]}"
                )
        return errors

    @staticmethod
    def validate_map(data: Any) -> list[str]:
        """Validate a complete map description (everything except shapes).

        Args:
            data: Parsed JSON data

        Returns:
            List of all validation errors (empty if valid)
        """
        errors = MapSchema.validate_root(data)
        if not isinstance(data, dict):
            return errors

        root = cast(dict[str, Any], data)
        if isinstance(root.get("tiles"), dict):
            errors.extend(MapSchema.validate_tiles(root["tiles"]))

        layers, layer_errors = MapSchema.extract_layers(root)
        errors.extend(layer_errors)
        for name, grid in layers:
            errors.extend(MapSchema.validate_layer(name, grid))

        return errors

    @staticmethod
    def _is_int(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
