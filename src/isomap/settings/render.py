"""
Rendering settings for isomap: cell stride, clear colour and camera.
"""

import logging

from PySide6.QtGui import QColor

from .base import SettingsSection
from .types import ConfigError
from ..rendering.camera import Camera

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#c4cfa1"
ZOOM_MIN = 0.1
ZOOM_MAX = 8.0


class RenderSettings(SettingsSection):
    """Manages rendering-related settings."""

    @property
    def stride(self) -> int:
        """Logical units between adjacent cells."""
        return self._get_int("render/stride", 32)

    @stride.setter
    def stride(self, value: int) -> None:
        if value <= 0:
            raise ConfigError(f"Cell stride must be positive, got {value}")
        self.settings.setValue("render/stride", value)
        self.settings.sync()

    @property
    def background(self) -> tuple[int, int, int]:
        """Clear colour as (r, g, b)."""
        color = QColor(self._get_str("render/background", DEFAULT_BACKGROUND))
        if not color.isValid():
            logger.warning("Invalid background colour in settings, using default")
            color = QColor(DEFAULT_BACKGROUND)
        return (color.red(), color.green(), color.blue())

    @background.setter
    def background(self, value: str | tuple[int, int, int]) -> None:
        color = QColor(*value) if isinstance(value, tuple) else QColor(value)
        if not color.isValid():
            raise ConfigError(f"Invalid background colour: {value!r}")
        self.settings.setValue("render/background", color.name())
        self.settings.sync()

    @property
    def zoom(self) -> float:
        """Camera zoom (0.1-8.0)."""
        value = self._get_float("render/zoom", 1.0)
        return max(ZOOM_MIN, min(ZOOM_MAX, value))

    @zoom.setter
    def zoom(self, value: float) -> None:
        validated = max(ZOOM_MIN, min(ZOOM_MAX, value))
        self.settings.setValue("render/zoom", validated)
        self.settings.sync()

    @property
    def camera_position(self) -> tuple[float, float]:
        """Local-space point shown at the centre of the view."""
        return (
            self._get_float("render/camera_x", 32.0),
            self._get_float("render/camera_y", 48.0),
        )

    @camera_position.setter
    def camera_position(self, value: tuple[float, float]) -> None:
        self.settings.setValue("render/camera_x", float(value[0]))
        self.settings.setValue("render/camera_y", float(value[1]))
        self.settings.sync()

    @property
    def viewport_size(self) -> tuple[int, int]:
        """Initial viewport (window) size in pixels."""
        return (
            self._get_int("render/viewport_width", 640),
            self._get_int("render/viewport_height", 480),
        )

    @viewport_size.setter
    def viewport_size(self, value: tuple[int, int]) -> None:
        width, height = value
        if width <= 0 or height <= 0:
            raise ConfigError(f"Viewport size must be positive, got {width}x{height}")
        self.settings.setValue("render/viewport_width", int(width))
        self.settings.setValue("render/viewport_height", int(height))
        self.settings.sync()

    def make_camera(self) -> Camera:
        """Build a camera from the stored position, viewport and zoom."""
        x, y = self.camera_position
        width, height = self.viewport_size
        return Camera(x=x, y=y, viewport_width=width, viewport_height=height, zoom=self.zoom)
