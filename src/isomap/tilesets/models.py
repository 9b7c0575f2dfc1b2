"""
Data models for tile definitions.

Contains the immutable value types a tile registry is made of. Each model is
intentionally lightweight: no file-system or image logic lives here.
"""

from dataclasses import dataclass
from typing import Any, cast

from ..errors import MalformedDescription


# Atlas cell size of the bundled 64x64 art
DEFAULT_CELL_SIZE = (64, 64)


# =============================================================================
# Geometry
# =============================================================================

@dataclass(frozen=True)
class ClipRect:
    """Source rectangle inside the atlas, in pixels."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], cell_size: tuple[int, int] | None = None
    ) -> "ClipRect":
        """Create ClipRect from a JSON dict.

        Args:
            data: Dict with 'x', 'y', 'width' and 'height' keys
            cell_size: When given, values are atlas cells and get multiplied
                by (cell_width, cell_height)

        Returns:
            ClipRect in pixel units
        """
        scale_x, scale_y = cell_size if cell_size else (1, 1)
        return cls(
            x=float(data["x"]) * scale_x,
            y=float(data["y"]) * scale_y,
            width=float(data["width"]) * scale_x,
            height=float(data["height"]) * scale_y,
        )

    def as_box(self) -> tuple[int, int, int, int]:
        """Return a Pillow crop box (left, top, right, bottom)."""
        return (
            int(self.x),
            int(self.y),
            int(self.x + self.width),
            int(self.y + self.height),
        )


@dataclass(frozen=True)
class Anchor:
    """Offset subtracted from the draw position (the tile's origin)."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Anchor":
        if not data:
            return cls()
        return cls(x=float(data.get("x", 0)), y=float(data.get("y", 0)))


# =============================================================================
# Tile Models
# =============================================================================

@dataclass(frozen=True)
class TileDefinition:
    """Where a tile lives in the atlas and how it is anchored.

    Art taller than one cell (trees, walls) uses a non-zero origin so its
    footprint still lines up with the cell it is drawn for.
    """
    clip: ClipRect
    origin: Anchor = Anchor()

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], cell_size: tuple[int, int] | None = None
    ) -> "TileDefinition":
        """Create TileDefinition from a JSON tile entry.

        Args:
            data: Dict with a 'clip' object and an optional 'origin' object
            cell_size: Atlas cell size when clips are given in cells

        Returns:
            TileDefinition instance

        Raises:
            MalformedDescription: If the clip is missing or not numeric
        """
        clip = data.get("clip")
        if not isinstance(clip, dict):
            raise MalformedDescription("tile entry has no 'clip' object")
        try:
            return cls(
                clip=ClipRect.from_dict(cast(dict[str, Any], clip), cell_size),
                origin=Anchor.from_dict(cast(dict[str, Any] | None, data.get("origin"))),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedDescription(f"invalid tile geometry: {e}") from e
