"""
Error types for isomap.

Load-time failures derive from MapLoadError and abort startup. Lookup
failures (unknown tile codes, out-of-range cells) are kept separate so the
caller can tell a broken file from a broken grid/registry pair.
"""

from pathlib import Path
from typing import Optional, Union


class IsoMapError(Exception):
    """Base class for all isomap errors."""
    pass


class MapLoadError(IsoMapError):
    """Raised when a map description or its atlas cannot be loaded."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self.reason = message
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class MissingImage(MapLoadError):
    """The atlas image referenced by a map is missing or unreadable."""
    pass


class MalformedDescription(MapLoadError):
    """The map description is not valid JSON or does not match the schema."""
    pass


class DimensionMismatch(MapLoadError):
    """Layer arrays disagree with each other or with the declared size."""
    pass


class UnknownTileCode(IsoMapError, LookupError):
    """A grid cell references a code that has no tile definition."""

    def __init__(
        self,
        code: int,
        layer: Optional[str] = None,
        row: Optional[int] = None,
        col: Optional[int] = None,
    ):
        self.code = code
        self.layer = layer
        self.row = row
        self.col = col
        message = f"Unknown tile code {code}"
        if layer is not None:
            message += f" in layer '{layer}' at row {row}, col {col}"
        super().__init__(message)

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message
        return str(self.args[0])


class OutOfBounds(IsoMapError, IndexError):
    """A cell accessor was called with a layer, row or column outside the grid."""

    def __init__(self, layer: Union[str, int], row: int, col: int, shape: tuple[int, int]):
        self.layer = layer
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"Cell ({layer!r}, {row}, {col}) is outside grid of {shape[0]}x{shape[1]}"
        )
