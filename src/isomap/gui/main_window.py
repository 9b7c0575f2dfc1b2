"""
Main application window for isomap.
"""

import logging
from typing import Optional

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QWidget

from ..session import MapSession
from ..settings import AppSettings
from .map_view import MapView

WINDOW_TITLE = "Rendering a Texture"


class MainWindow(QMainWindow):
    """Main application window: one MapView and a status bar."""

    def __init__(
        self,
        settings: AppSettings,
        session: MapSession,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.session = session

        # Window size follows the camera viewport
        width, height = int(session.camera.viewport_width), int(session.camera.viewport_height)

        self.map_view = MapView(session, self)
        self.setCentralWidget(self.map_view)
        self.setup_status_bar()

        self.map_view.cell_hovered.connect(self.on_cell_hovered)
        self.map_view.cell_left.connect(self.on_cell_left)
        self.map_view.map_reloaded.connect(self.on_map_reloaded)
        self.map_view.reload_failed.connect(self.on_reload_failed)

        self.map_view.setMinimumSize(1, 1)
        self.resize(width, height + self.status_bar.sizeHint().height())

        self.setWindowTitle(WINDOW_TITLE)
        self.map_view.setFocus()

        self.logger.info("Main window initialized")

    def setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.status_bar = self.statusBar()
        source = self.session.source.name if self.session.source else "in-memory map"
        self.status_bar.showMessage(f"Loaded {source}", 5000)
        self.logger.debug("Status bar created")

    def on_cell_hovered(self, row: int, col: int) -> None:
        codes = []
        for name in self.session.grid.layer_names:
            codes.append(f"{name}={self.session.grid.cell(name, row, col)}")
        self.status_bar.showMessage(f"Row {row}, col {col}: {', '.join(codes)}")

    def on_cell_left(self) -> None:
        self.status_bar.clearMessage()

    def on_map_reloaded(self) -> None:
        self.status_bar.showMessage("Map reloaded", 3000)

    def on_reload_failed(self, message: str) -> None:
        self.status_bar.showMessage(f"Reload failed: {message}", 10000)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Persist settings before closing."""
        self.logger.info("Main window closing")
        self.settings.sync()
        super().closeEvent(event)
