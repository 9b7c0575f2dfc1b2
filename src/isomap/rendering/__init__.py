"""Rendering package for isomap.

This package provides the pure, Qt-free part of drawing a map:
- projection: grid <-> isometric screen transforms
- CoordinateTransformer: cell positions for a given stride
- Camera: viewport state and view transform
- FrameRenderer: back-to-front draw command frames
"""

from .projection import CoordinateTransformer, to_grid, to_screen
from .camera import Camera, ViewTransform
from .renderer import (
    DEFAULT_BACKGROUND,
    DEFAULT_STRIDE,
    DrawCommand,
    Frame,
    FrameRenderer,
    render,
)

__all__ = [
    "to_screen",
    "to_grid",
    "CoordinateTransformer",
    "Camera",
    "ViewTransform",
    "DrawCommand",
    "Frame",
    "FrameRenderer",
    "render",
    "DEFAULT_BACKGROUND",
    "DEFAULT_STRIDE",
]
