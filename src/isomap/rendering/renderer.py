"""Per-frame renderer.

Walks the grid back to front and produces a Frame: a clear colour, the
camera transform and an ordered list of draw commands. The renderer holds no
per-frame state; the same inputs always give the same Frame.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from ..maps.models import LayeredGrid
from ..tilesets.models import Anchor, ClipRect
from ..tilesets.registry import TileRegistry
from .camera import Camera, ViewTransform
from .projection import CoordinateTransformer


# rgb(0.769, 0.812, 0.631) in 0-255 units
DEFAULT_BACKGROUND = (196, 207, 161)
DEFAULT_STRIDE = 32


@dataclass(frozen=True)
class DrawCommand:
    """One textured quad to draw from the shared atlas.

    Attributes:
        layer: Layer name the tile came from
        row: Grid row
        col: Grid column
        code: Tile code
        position: Projected cell position in local space
        clip: Atlas source rectangle
        origin: Anchor subtracted from position
    """
    layer: str
    row: int
    col: int
    code: int
    position: tuple[float, float]
    clip: ClipRect
    origin: Anchor

    @property
    def dest(self) -> tuple[float, float]:
        """Top-left corner of the quad in local space (position - origin)."""
        return (self.position[0] - self.origin.x, self.position[1] - self.origin.y)


@dataclass(frozen=True)
class Frame:
    """Everything a backend needs to draw one frame, in order."""
    clear_color: tuple[int, int, int]
    view_transform: ViewTransform
    commands: tuple[DrawCommand, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


class FrameRenderer:
    """Turns (camera, registry, grid) into a Frame.

    Cells are visited in LayeredGrid.iter_cells order: row-major and, inside
    a cell, layers bottom to top. With the 2:1 projection a larger (row, col)
    always lands further down the screen, so this is the painter's-algorithm
    order and no depth testing happens anywhere else. Changing the
    projection or the iteration order means changing both.
    """

    def __init__(
        self,
        stride: int = DEFAULT_STRIDE,
        background: tuple[int, int, int] = DEFAULT_BACKGROUND,
    ):
        """Initialize the renderer.

        Args:
            stride: Logical units between adjacent cells
            background: Clear colour as (r, g, b) 0-255
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.transformer = CoordinateTransformer(stride)
        self.background = background

    @property
    def stride(self) -> int:
        return self.transformer.stride

    def render(self, camera: Camera, registry: TileRegistry, grid: LayeredGrid) -> Frame:
        """Build the frame for the current camera.

        Raises:
            UnknownTileCode: If a drawable cell has no definition. The loader
                rules this out for loaded maps; hand-built pairs abort here.
        """
        commands: list[DrawCommand] = []
        for cell in grid.iter_cells():
            definition = registry.resolve(cell.code)
            commands.append(
                DrawCommand(
                    layer=cell.layer,
                    row=cell.row,
                    col=cell.col,
                    code=cell.code,
                    position=self.transformer.cell_to_screen(cell.row, cell.col),
                    clip=definition.clip,
                    origin=definition.origin,
                )
            )

        return Frame(
            clear_color=self.background,
            view_transform=camera.transform(),
            commands=tuple(commands),
        )


def render(
    camera: Camera,
    registry: TileRegistry,
    grid: LayeredGrid,
    stride: int = DEFAULT_STRIDE,
    background: tuple[int, int, int] = DEFAULT_BACKGROUND,
) -> Frame:
    """Render one frame with a throwaway FrameRenderer."""
    return FrameRenderer(stride, background).render(camera, registry, grid)
