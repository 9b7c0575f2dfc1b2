"""Event handlers for MapView.

This module provides event handling functionality for MapView,
including resize forwarding, keyboard shortcuts and cell hover tracking.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QResizeEvent

from ...errors import IsoMapError


class MapViewEventHandlers:
    """Mixin class for MapView event handling.

    Handles:
    - Window resize (camera viewport update before the next frame)
    - Escape closes the top-level window, F5 reloads the map
    - Mouse hover (reports the cell under the cursor)
    """

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Forward the new size to the session and schedule a repaint."""
        super().resizeEvent(event)  # type: ignore

        size = event.size()
        if self.session is not None:  # type: ignore
            self.session.on_viewport_resized(size.width(), size.height())  # type: ignore
        self.update()  # type: ignore

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Handle key press events for view control."""
        if event.key() == Qt.Key.Key_Escape:
            self.logger.info("Escape pressed, closing window")  # type: ignore
            self.window().close()  # type: ignore
            event.accept()
        elif event.key() == Qt.Key.Key_F5:
            self.reload_map()  # type: ignore
            event.accept()
        else:
            super().keyPressEvent(event)  # type: ignore

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Report the grid cell under the cursor."""
        if self.session is not None:  # type: ignore
            position = event.position()
            cell = self.cell_at_view(position.x(), position.y())  # type: ignore
            if cell != self._hovered_cell:  # type: ignore
                self._hovered_cell = cell  # type: ignore
                if cell is None:
                    self.cell_left.emit()  # type: ignore
                else:
                    self.cell_hovered.emit(cell[0], cell[1])  # type: ignore
        super().mouseMoveEvent(event)  # type: ignore

    def leaveEvent(self, event) -> None:  # type: ignore[no-untyped-def]
        """Clear hover state when the cursor leaves the view."""
        if self._hovered_cell is not None:  # type: ignore
            self._hovered_cell = None  # type: ignore
            self.cell_left.emit()  # type: ignore
        super().leaveEvent(event)  # type: ignore

    def _reload_failed(self, error: IsoMapError) -> None:
        self.logger.error(f"Reload failed, keeping previous map: {error}")  # type: ignore
        self.reload_failed.emit(str(error))  # type: ignore
