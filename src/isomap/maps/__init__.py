"""Map models and loading for isomap."""

from .models import GridCell, LayeredGrid
from .schema import MapSchema
from .loader import LoadedMap, MapLoader, build, load_map

__all__ = [
    "GridCell",
    "LayeredGrid",
    "MapSchema",
    "LoadedMap",
    "MapLoader",
    "build",
    "load_map",
]
