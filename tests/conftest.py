"""Shared fixtures for isomap tests."""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Any, Callable, Iterator

import orjson
import pytest
from PIL import Image

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[Any]:
    """Single QApplication shared by every Qt test."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def atlas() -> Image.Image:
    """A 4x2 cell atlas (64x64 cells), each cell a distinct solid colour."""
    image = Image.new("RGBA", (256, 128), (0, 0, 0, 0))
    for index in range(8):
        col, row = index % 4, index // 4
        color = (index * 30, 255 - index * 30, 100, 255)
        image.paste(color, (col * 64, row * 64, col * 64 + 64, row * 64 + 64))
    return image


def tile(x: int, y: int, width: int = 64, height: int = 64, origin: Any = None) -> dict[str, Any]:
    entry: dict[str, Any] = {"clip": {"x": x, "y": y, "width": width, "height": height}}
    if origin is not None:
        entry["origin"] = {"x": origin[0], "y": origin[1]}
    return entry


@pytest.fixture
def outside_description() -> dict[str, Any]:
    """The 6x6 single-layer map of the bundled outside scene."""
    return {
        "image": "atlas.png",
        "tiles": {str(code): tile(64 * (code % 4), 64 * (code // 4)) for code in range(7)},
        "map": [
            [3, 1, 1, 1, 1, 4],
            [2, 0, 0, 0, 0, 2],
            [2, 0, 0, 0, 0, 2],
            [2, 0, 0, 0, 0, 2],
            [2, 0, 0, 0, 0, 2],
            [6, 1, 1, 1, 1, 5],
        ],
    }


@pytest.fixture
def write_map(tmp_path: Path, atlas: Image.Image) -> Callable[..., Path]:
    """Write a description (and the atlas next to it) into tmp_path."""

    def _write(data: dict[str, Any], name: str = "map.json", with_atlas: bool = True) -> Path:
        if with_atlas:
            atlas.save(tmp_path / "atlas.png")
        path = tmp_path / name
        path.write_bytes(orjson.dumps(data))
        return path

    return _write


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Path of a throwaway INI settings file."""
    return tmp_path / "settings.ini"


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Drop the handlers setup_logging installed and restore the root level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler in handlers:
            continue
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
