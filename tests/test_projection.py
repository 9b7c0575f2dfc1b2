"""Tests for the isometric projection and cell transformer."""

import pytest

from isomap.rendering.projection import CoordinateTransformer, to_grid, to_screen


class TestProjection:
    """Test to_screen / to_grid."""

    def test_to_screen_reference_points(self) -> None:
        """Test a few hand-computed projections."""
        assert to_screen(0, 0) == (0.0, 0.0)
        assert to_screen(32, 0) == (32.0, 16.0)
        assert to_screen(0, 32) == (-32.0, 16.0)
        assert to_screen(32, 32) == (0.0, 32.0)

    def test_round_trip_over_range(self) -> None:
        """Test to_grid inverts to_screen for integers in -1000..1000."""
        values = list(range(-1000, 1001, 7)) + [-1, 0, 1, 999, 1000, -1000]
        for x in values:
            for y in values:
                assert to_grid(*to_screen(x, y)) == (x, y)

    def test_round_trip_negative_odd(self) -> None:
        """Test odd negative sums survive the round trip (floor, not truncation)."""
        assert to_grid(*to_screen(-3, 0)) == (-3, 0)
        assert to_grid(*to_screen(0, -5)) == (0, -5)
        assert to_grid(*to_screen(-1, -2)) == (-1, -2)

    def test_to_screen_is_linear(self) -> None:
        """Test to_screen(a + b) == to_screen(a) + to_screen(b)."""
        pairs = [((3, 4), (-7, 2)), ((100, -50), (25, 25)), ((0, 0), (9, -9))]
        for (ax, ay), (bx, by) in pairs:
            sx, sy = to_screen(ax + bx, ay + by)
            a = to_screen(ax, ay)
            b = to_screen(bx, by)
            assert (sx, sy) == (a[0] + b[0], a[1] + b[1])

    def test_to_grid_floors_fractions(self) -> None:
        """Test points between lattice positions floor towards negative infinity."""
        assert to_grid(0.5, 0.25) == (0, 0)
        assert to_grid(-0.5, -0.5) == (-1, -1)


class TestCoordinateTransformer:
    """Test stride-aware cell positions."""

    def test_cell_to_screen_uses_stride(self) -> None:
        """Test cell positions equal to_screen(col * stride, row * stride)."""
        transformer = CoordinateTransformer(32)
        for row in range(6):
            for col in range(6):
                assert transformer.cell_to_screen(row, col) == to_screen(col * 32, row * 32)

    def test_screen_to_cell_inverts_cell_to_screen(self) -> None:
        """Test a cell's own position maps back to it."""
        transformer = CoordinateTransformer(32)
        for row in range(-3, 10):
            for col in range(-3, 10):
                assert transformer.screen_to_cell(*transformer.cell_to_screen(row, col)) == (row, col)

    def test_invalid_stride(self) -> None:
        """Test non-positive strides are rejected."""
        with pytest.raises(ValueError):
            CoordinateTransformer(0)
        with pytest.raises(ValueError):
            CoordinateTransformer(-32)
