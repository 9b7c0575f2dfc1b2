"""Camera and viewport state.

The camera is the only mutable state touched between frames: resize events
change the viewport, nothing else. Its transform is applied by the backend
on top of the local positions the renderer produces.
"""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewTransform:
    """Affine local -> view mapping: view = local * scale + (dx, dy)."""
    scale: float
    dx: float
    dy: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map a local point into view (widget) coordinates."""
        return (x * self.scale + self.dx, y * self.scale + self.dy)

    def invert(self, x: float, y: float) -> tuple[float, float]:
        """Map a view point back into local coordinates."""
        return ((x - self.dx) / self.scale, (y - self.dy) / self.scale)


@dataclass
class Camera:
    """2D camera centred on `x`, `y` in local coordinates.

    Attributes:
        x: Local X shown at the centre of the viewport
        y: Local Y shown at the centre of the viewport
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels
        zoom: Uniform scale factor
    """

    x: float = 32.0
    y: float = 48.0
    viewport_width: float = 640.0
    viewport_height: float = 480.0
    zoom: float = 1.0

    def on_viewport_resized(self, new_width: float, new_height: float) -> None:
        """Update the viewport size; the next frame picks it up."""
        if new_width <= 0 or new_height <= 0:
            logger.debug(f"Ignoring degenerate viewport size {new_width}x{new_height}")
            return
        self.viewport_width = float(new_width)
        self.viewport_height = float(new_height)

    def transform(self) -> ViewTransform:
        """Build the view transform for the current state."""
        return ViewTransform(
            scale=self.zoom,
            dx=self.viewport_width / 2 - self.x * self.zoom,
            dy=self.viewport_height / 2 - self.y * self.zoom,
        )
