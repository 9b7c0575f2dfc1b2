"""Isometric projection between grid space and screen space.

Implements the standard 2:1 projection used by the renderer and its exact
inverse. The inverse floors on both axes, so every integer grid coordinate
(negative ones included) survives a round trip.

Cell spacing is not part of the projection: callers multiply by the stride
first (see CoordinateTransformer).
"""

import math


def to_screen(grid_x: float, grid_y: float) -> tuple[float, float]:
    """Project grid coordinates onto the isometric screen plane."""
    return (float(grid_x - grid_y), (grid_x + grid_y) / 2)


def to_grid(screen_x: float, screen_y: float) -> tuple[int, int]:
    """Inverse of to_screen, flooring towards negative infinity."""
    return (
        math.floor((2 * screen_y + screen_x) / 2),
        math.floor((2 * screen_y - screen_x) / 2),
    )


class CoordinateTransformer:
    """Maps grid cells to local draw positions for a fixed cell stride."""

    def __init__(self, stride: int = 32):
        """Initialize the transformer.

        Args:
            stride: Logical units between adjacent cells (32 for 64x64 art)
        """
        if stride <= 0:
            raise ValueError(f"Cell stride must be positive, got {stride}")
        self.stride = stride

    def cell_to_screen(self, row: int, col: int) -> tuple[float, float]:
        """Return the local draw position of a cell.

        Args:
            row: Grid row (becomes the projection's y axis)
            col: Grid column (becomes the projection's x axis)

        Returns:
            (screen_x, screen_y) before any camera transform
        """
        return to_screen(col * self.stride, row * self.stride)

    def screen_to_cell(self, screen_x: float, screen_y: float) -> tuple[int, int]:
        """Return the (row, col) whose logical square contains a local point.

        The point at cell_to_screen(row, col) maps back to (row, col);
        fractional positions are floored cell-wise.
        """
        grid_x = math.floor((2 * screen_y + screen_x) / 2 / self.stride)
        grid_y = math.floor((2 * screen_y - screen_x) / 2 / self.stride)
        return (grid_y, grid_x)
