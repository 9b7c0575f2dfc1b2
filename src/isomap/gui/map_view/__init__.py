"""Map view package.

This package hosts the rendered map inside Qt:
- MapView: widget that paints session frames
- MapViewEventHandlers: resize, keyboard and hover handling
- paint_frame: draws one Frame with a QPainter
- atlas_to_qimage: converts the shared Pillow atlas once
"""

from .map_view import MapView, atlas_to_qimage, paint_frame
from .events import MapViewEventHandlers

__all__ = [
    "MapView",
    "MapViewEventHandlers",
    "atlas_to_qimage",
    "paint_frame",
]
