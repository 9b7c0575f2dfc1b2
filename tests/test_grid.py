"""Tests for LayeredGrid."""

import pytest

from isomap.errors import DimensionMismatch, MalformedDescription, OutOfBounds
from isomap.maps import LayeredGrid


def three_layers() -> LayeredGrid:
    low = [[7] * 4 for _ in range(3)]
    mid = [[1] * 4 for _ in range(3)]
    mid[1][2] = 0
    high = [[0] * 4 for _ in range(3)]
    high[2][3] = 9
    return LayeredGrid([("low", low), ("mid", mid), ("high", high)])


class TestLayeredGridShape:
    """Test construction and shape checks."""

    def test_shape(self) -> None:
        """Test rows, columns and layer names."""
        grid = three_layers()
        assert grid.shape == (3, 4)
        assert grid.rows == 3
        assert grid.columns == 4
        assert grid.layer_names == ("low", "mid", "high")
        assert grid.layer_count == 3

    def test_no_layers(self) -> None:
        """Test an empty layer list is rejected."""
        with pytest.raises(MalformedDescription):
            LayeredGrid([])

    def test_duplicate_names(self) -> None:
        """Test layer names must be unique."""
        with pytest.raises(MalformedDescription):
            LayeredGrid([("low", [[1]]), ("low", [[1]])])

    def test_ragged_rows(self) -> None:
        """Test rows of different length are rejected."""
        with pytest.raises(DimensionMismatch):
            LayeredGrid([("map", [[1, 1], [1]])])

    def test_layers_differ_in_shape(self) -> None:
        """Test every layer must share the base layer's shape."""
        with pytest.raises(DimensionMismatch):
            LayeredGrid([("low", [[1, 1], [1, 1]]), ("mid", [[1, 1]])])

    def test_empty_layer(self) -> None:
        """Test zero-sized layers are rejected."""
        with pytest.raises(DimensionMismatch):
            LayeredGrid([("map", [])])


class TestLayeredGridAccess:
    """Test cell access."""

    def test_cell_by_name_and_index(self) -> None:
        """Test cells can be addressed by layer name or index."""
        grid = three_layers()
        assert grid.cell("low", 0, 0) == 7
        assert grid.cell(1, 1, 2) == 0
        assert grid.cell("high", 2, 3) == 9

    def test_out_of_bounds(self) -> None:
        """Test invalid coordinates raise OutOfBounds (an IndexError)."""
        grid = three_layers()
        with pytest.raises(OutOfBounds):
            grid.cell("low", 3, 0)
        with pytest.raises(IndexError):
            grid.cell("low", 0, -1)
        with pytest.raises(OutOfBounds) as exc_info:
            grid.cell("roof", 0, 0)
        assert exc_info.value.layer == "roof"

    def test_grid_is_a_copy(self) -> None:
        """Test mutating the source lists does not change the grid."""
        rows = [[1, 2], [3, 4]]
        grid = LayeredGrid([("map", rows)])
        rows[0][0] = 99
        assert grid.cell(0, 0, 0) == 1


class TestLayeredGridIteration:
    """Test draw-order iteration and the empty policy."""

    def test_iteration_order(self) -> None:
        """Test cells come row-major with layers bottom to top."""
        grid = three_layers()
        order = [(c.row, c.col, c.layer_index) for c in grid.iter_cells(include_empty=True)]
        assert order == sorted(order)
        assert len(order) == 3 * 4 * 3

    def test_empty_cells_skipped_above_base(self) -> None:
        """Test empty codes above the base layer are skipped."""
        grid = three_layers()
        at_1_2 = [c.layer for c in grid.iter_cells() if (c.row, c.col) == (1, 2)]
        assert at_1_2 == ["low"]
        at_2_3 = [c.layer for c in grid.iter_cells() if (c.row, c.col) == (2, 3)]
        assert at_2_3 == ["low", "mid", "high"]

    def test_single_layer_draws_empty_code(self) -> None:
        """Test a single-layer map draws every cell, code 0 included."""
        grid = LayeredGrid([("map", [[0, 1], [1, 0]])])
        assert len(list(grid.iter_cells())) == 4
        assert grid.distinct_codes() == {0, 1}

    def test_skip_empty_base(self) -> None:
        """Test skip_empty_base makes the base layer honour empty_code."""
        grid = LayeredGrid([("map", [[0, 1], [1, 0]])], skip_empty_base=True)
        assert [(c.row, c.col) for c in grid.iter_cells()] == [(0, 1), (1, 0)]

    def test_custom_and_disabled_empty_code(self) -> None:
        """Test a custom sentinel and no sentinel at all."""
        layers = [("low", [[1, 1]]), ("mid", [[-1, 0]])]
        custom = LayeredGrid(layers, empty_code=-1)
        assert [c.code for c in custom.iter_cells() if c.layer == "mid"] == [0]

        disabled = LayeredGrid(layers, empty_code=None)
        assert len(list(disabled.iter_cells())) == 4

    def test_distinct_codes(self) -> None:
        """Test distinct_codes honours the empty policy."""
        grid = three_layers()
        assert grid.distinct_codes() == {7, 1, 9}
        assert grid.distinct_codes(drawable_only=False) == {7, 1, 9, 0}
