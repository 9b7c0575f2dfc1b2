"""Main view widget for map rendering.

The widget owns no map state of its own: every paint asks the session for a
fresh Frame and draws it with a QPainter. The atlas is converted from Pillow
to a QImage once per registry.
"""

import logging
from typing import Any, Optional

from PySide6.QtCore import QPointF, QRect, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QImage, QPaintEvent, QPainter, QTransform
from PySide6.QtWidgets import QWidget

from ...errors import IsoMapError
from ...rendering.renderer import Frame
from ...session import MapSession
from .events import MapViewEventHandlers


def atlas_to_qimage(image: Any) -> QImage:
    """Convert a Pillow atlas into a QImage that owns its pixel data."""
    from PIL.ImageQt import ImageQt

    if image.mode != "RGBA":
        image = image.convert("RGBA")
    # ImageQt shares the Pillow buffer, copy() detaches it
    return ImageQt(image).copy()


def paint_frame(painter: QPainter, frame: Frame, atlas: QImage, area: QRect) -> None:
    """Draw one frame: clear `area`, then every command in order.

    Args:
        painter: Active painter on the target device
        frame: Frame produced by the renderer
        atlas: Shared atlas as a QImage
        area: Device rectangle to clear with the frame's background
    """
    painter.save()
    painter.fillRect(area, QColor(*frame.clear_color))

    view = frame.view_transform
    painter.setTransform(QTransform(view.scale, 0.0, 0.0, view.scale, view.dx, view.dy))

    for command in frame:
        clip = command.clip
        painter.drawImage(
            QPointF(*command.dest),
            atlas,
            QRectF(clip.x, clip.y, clip.width, clip.height),
        )

    painter.restore()


class MapView(MapViewEventHandlers, QWidget):
    """Widget that paints a MapSession.

    Signals:
        cell_hovered: (row, col) of the cell under the cursor
        cell_left: cursor moved off the grid
        map_reloaded: session reloaded from disk
        reload_failed: reload error message, previous map kept
    """

    cell_hovered = Signal(int, int)
    cell_left = Signal()
    map_reloaded = Signal()
    reload_failed = Signal(str)

    def __init__(self, session: Optional[MapSession] = None, parent: Optional[QWidget] = None):
        """Initialize the map view.

        Args:
            session: Map session to display
            parent: Parent widget
        """
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.session: Optional[MapSession] = None
        self._atlas: Optional[QImage] = None
        self._hovered_cell: Optional[tuple[int, int]] = None

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        if session is not None:
            self.set_session(session)

        self.logger.debug("Map view initialized")

    def set_session(self, session: MapSession) -> None:
        """Display a new session; the atlas is converted here."""
        self.session = session
        self._atlas = self._convert_atlas(session)
        self._hovered_cell = None
        if self.isVisible():
            session.on_viewport_resized(self.width(), self.height())
        self.logger.info(
            f"Showing {session.grid.rows}x{session.grid.columns} map "
            f"with {session.grid.layer_count} layer(s)"
        )
        self.update()

    def reload_map(self) -> None:
        """Reload the session from disk, keeping the old map on failure."""
        if self.session is None or self.session.source is None:
            self.logger.debug("Nothing to reload")
            return
        try:
            self.session.reload()
        except IsoMapError as e:
            self._reload_failed(e)
            return
        self._atlas = self._convert_atlas(self.session)
        self.map_reloaded.emit()
        self.update()

    def _convert_atlas(self, session: MapSession) -> Optional[QImage]:
        if session.registry.image is None:
            self.logger.warning("Session has no atlas image, nothing will be drawn")
            return None
        return atlas_to_qimage(session.registry.image)

    def cell_at_view(self, view_x: float, view_y: float) -> Optional[tuple[int, int]]:
        """Return (row, col) under a widget-space point, or None."""
        if self.session is None:
            return None
        local_x, local_y = self.session.camera.transform().invert(view_x, view_y)
        return self.session.cell_at(local_x, local_y)

    def paintEvent(self, event: QPaintEvent) -> None:
        """Render and paint the current frame."""
        painter = QPainter(self)
        try:
            if self.session is None or self._atlas is None:
                painter.fillRect(self.rect(), self.palette().window())
                return
            frame = self.session.render_frame()
            paint_frame(painter, frame, self._atlas, self.rect())
        finally:
            painter.end()
