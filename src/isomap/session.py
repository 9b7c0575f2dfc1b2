"""Map session: the application's top-level rendering state.

Owns the loaded registry and grid, the camera and the renderer. Everything
except the camera is read-only between load and shutdown.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .maps.loader import LoadedMap, MapLoader
from .maps.models import LayeredGrid
from .rendering.camera import Camera
from .rendering.renderer import DEFAULT_BACKGROUND, DEFAULT_STRIDE, Frame, FrameRenderer
from .tilesets.registry import TileRegistry


class MapSession:
    """Holds one loaded map and produces frames for it.

    Use `MapSession.open(path)` to load from disk, or pass an already built
    registry and grid.
    """

    def __init__(
        self,
        registry: TileRegistry,
        grid: LayeredGrid,
        camera: Optional[Camera] = None,
        stride: int = DEFAULT_STRIDE,
        background: tuple[int, int, int] = DEFAULT_BACKGROUND,
        source: Optional[Path] = None,
    ):
        """Initialize the session.

        Args:
            registry: Tile registry for the map
            grid: Layered grid for the map
            camera: Camera to render with (default camera if None)
            stride: Logical units between adjacent cells
            background: Clear colour as (r, g, b)
            source: Map description path, needed for reload()
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.registry = registry
        self.grid = grid
        self.camera = camera or Camera()
        self.renderer = FrameRenderer(stride, background)
        self.source = source

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        camera: Optional[Camera] = None,
        stride: int = DEFAULT_STRIDE,
        background: tuple[int, int, int] = DEFAULT_BACKGROUND,
    ) -> "MapSession":
        """Load a map from disk and wrap it in a session.

        Raises:
            MapLoadError: If the description or atlas cannot be loaded
            UnknownTileCode: If a layer uses an undefined tile code
        """
        loaded: LoadedMap = MapLoader().load(path)
        return cls(
            loaded.registry,
            loaded.grid,
            camera=camera,
            stride=stride,
            background=background,
            source=loaded.path,
        )

    def render_frame(self) -> Frame:
        """Render the current map with the current camera."""
        return self.renderer.render(self.camera, self.registry, self.grid)

    def on_viewport_resized(self, new_width: int, new_height: int) -> None:
        """Forward a host resize to the camera before the next frame."""
        self.logger.debug(f"Viewport resized to {new_width}x{new_height}")
        self.camera.on_viewport_resized(new_width, new_height)

    def cell_at(self, local_x: float, local_y: float) -> Optional[tuple[int, int]]:
        """Return (row, col) under a local-space point, or None outside the grid.

        Points are matched against the tile footprint, a diamond whose top
        corner sits one stride to the right of the cell position.
        """
        stride = self.renderer.stride
        row, col = self.renderer.transformer.screen_to_cell(local_x - stride, local_y)
        if 0 <= row < self.grid.rows and 0 <= col < self.grid.columns:
            return (row, col)
        return None

    def reload(self) -> None:
        """Reload registry and grid from the description it was opened from.

        Keeps the current camera. On failure the previous map stays active
        and the error propagates.

        Raises:
            RuntimeError: If the session was not opened from a file
        """
        if self.source is None:
            raise RuntimeError("Session was not loaded from a file, nothing to reload")

        self.logger.info(f"Reloading map from {self.source}")
        loaded = MapLoader().load(self.source)
        self.registry = loaded.registry
        self.grid = loaded.grid
