"""
Main entry point for isomap.
Usage: python -m isomap [MAP] [--size WxH]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .errors import MapLoadError, UnknownTileCode
from .resources import DEFAULT_MAP
from .session import MapSession
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def parse_size(value: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT string."""
    try:
        width_str, height_str = value.lower().split("x", 1)
        width, height = int(width_str), int(height_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return (width, height)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isomap", description="Isometric tile map viewer"
    )
    parser.add_argument(
        "map",
        nargs="?",
        type=Path,
        help="map description (JSON); defaults to the last opened or bundled map",
    )
    parser.add_argument(
        "--size", type=parse_size, metavar="WxH", help="initial window size"
    )
    parser.add_argument(
        "--settings", type=Path, metavar="INI", help="use an INI settings file"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_map_path(requested: Optional[Path], settings: AppSettings) -> Path:
    """Pick the map to open: argument, then last map, then the bundled one."""
    if requested is not None:
        return requested
    last_map = settings.last_map
    if last_map is not None and last_map.exists():
        return last_map
    return DEFAULT_MAP


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings(settings_file=args.settings)

        app = QApplication.instance() or QApplication(sys.argv[:1])
        app.setApplicationName("isomap")
        app.setApplicationVersion(__version__)

        setup_logging(settings)

        logger.info("Starting isomap")
        logger.info(
            f"Configuration {settings.version} loaded from {settings.get_settings_file_path()}"
        )

        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            show_error_dialog(
                "Configuration Error",
                "Configuration validation failed. Please check your settings.",
                "\n".join(validation.errors),
            )
            return 1

        map_path = resolve_map_path(args.map, settings)

        camera = settings.render.make_camera()
        if args.size is not None:
            # One-off override, the stored default stays untouched
            camera.on_viewport_resized(*args.size)

        # The map is fully loaded and validated before any window exists
        try:
            session = MapSession.open(
                map_path,
                camera=camera,
                stride=settings.render.stride,
                background=settings.render.background,
            )
        except (MapLoadError, UnknownTileCode) as e:
            logger.error(f"Failed to load map {map_path}: {e}")
            show_error_dialog("Map Error", f"Could not load map {map_path.name}.", str(e))
            return 1

        if map_path != DEFAULT_MAP:
            settings.add_recent_map(map_path.resolve())

        from .gui.main_window import MainWindow

        window = MainWindow(settings, session)
        window.show()

        logger.info("Application started successfully")
        return app.exec()

    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        show_error_dialog("Configuration Error", "Invalid configuration value.", str(e))
        return 1
    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
