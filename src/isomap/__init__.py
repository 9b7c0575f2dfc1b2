"""
isomap - isometric tile map viewer.
"""

__version__ = "0.1.0"
__author__ = "isomap contributors"

from .errors import (
    IsoMapError,
    MapLoadError,
    MissingImage,
    MalformedDescription,
    DimensionMismatch,
    UnknownTileCode,
    OutOfBounds,
)
from .maps import LayeredGrid, MapLoader, build, load_map
from .rendering import Camera, Frame, render, to_grid, to_screen
from .session import MapSession
from .tilesets import TileDefinition, TileRegistry

__all__ = [
    "__version__",
    "IsoMapError",
    "MapLoadError",
    "MissingImage",
    "MalformedDescription",
    "DimensionMismatch",
    "UnknownTileCode",
    "OutOfBounds",
    "LayeredGrid",
    "MapLoader",
    "build",
    "load_map",
    "Camera",
    "Frame",
    "render",
    "to_grid",
    "to_screen",
    "MapSession",
    "TileDefinition",
    "TileRegistry",
]
