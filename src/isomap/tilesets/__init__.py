"""
Tilesets package for isomap.

Provides the tile registry and the value types describing where each tile
lives in the shared atlas image.
"""

from .models import DEFAULT_CELL_SIZE, Anchor, ClipRect, TileDefinition
from .registry import TileRegistry

__all__ = [
    # Registry
    'TileRegistry',

    # Data models
    'Anchor',
    'ClipRect',
    'TileDefinition',
    'DEFAULT_CELL_SIZE',
]
