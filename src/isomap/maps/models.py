"""
Data models for layered tile grids.

A LayeredGrid holds one or more same-shaped 2D arrays of tile codes,
ordered by draw priority: index 0 is the base layer and is drawn first.
The grid is immutable once built.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from ..errors import DimensionMismatch, MalformedDescription, OutOfBounds


LayerKey = Union[str, int]


@dataclass(frozen=True)
class GridCell:
    """One (layer, row, col) entry yielded by LayeredGrid.iter_cells."""
    layer_index: int
    layer: str
    row: int
    col: int
    code: int


class LayeredGrid:
    """Fixed-size, multi-layer grid of integer tile codes.

    Empty-cell policy is fixed per grid: `empty_code` marks an empty cell on
    every layer above the base layer. The base layer only honours it when
    `skip_empty_base` is set, so in a single-layer map every code, including
    `empty_code`, is a real tile.

    Example:
        >>> grid = LayeredGrid([("low", [[1, 1]]), ("mid", [[0, 2]])])
        >>> grid.shape
        (1, 2)
        >>> grid.is_empty(1, 0)
        True
    """

    def __init__(
        self,
        layers: Sequence[tuple[str, Sequence[Sequence[int]]]],
        empty_code: Optional[int] = 0,
        skip_empty_base: bool = False,
    ):
        """Initialize the grid.

        Args:
            layers: (name, rows) pairs, bottom layer first
            empty_code: Code meaning "nothing here", or None for no sentinel
            skip_empty_base: Whether the base layer also treats empty_code as empty

        Raises:
            MalformedDescription: If there are no layers or a name repeats
            DimensionMismatch: If layers are ragged or differ in shape
        """
        if not layers:
            raise MalformedDescription("map has no layers")

        names = [name for name, _ in layers]
        if len(set(names)) != len(names):
            raise MalformedDescription(f"duplicate layer names in {names}")

        first_name, first_rows = layers[0]
        self._rows = len(first_rows)
        self._columns = len(first_rows[0]) if self._rows else 0
        if self._rows == 0 or self._columns == 0:
            raise DimensionMismatch(f"layer '{first_name}' is empty")

        self._names: tuple[str, ...] = tuple(names)
        self._layers: tuple[tuple[tuple[int, ...], ...], ...] = tuple(
            self._freeze(name, rows) for name, rows in layers
        )
        self.empty_code = empty_code
        self.skip_empty_base = skip_empty_base

    def _freeze(
        self, name: str, rows: Sequence[Sequence[int]]
    ) -> tuple[tuple[int, ...], ...]:
        """Copy one layer into nested tuples, checking its shape."""
        if len(rows) != self._rows:
            raise DimensionMismatch(
                f"layer '{name}' has {len(rows)} rows, expected {self._rows}"
            )
        frozen: list[tuple[int, ...]] = []
        for row_idx, row in enumerate(rows):
            if len(row) != self._columns:
                raise DimensionMismatch(
                    f"layer '{name}' row {row_idx} has {len(row)} columns, "
                    f"expected {self._columns}"
                )
            frozen.append(tuple(int(code) for code in row))
        return tuple(frozen)

    # === SHAPE ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns), shared by every layer."""
        return (self._rows, self._columns)

    @property
    def layer_names(self) -> tuple[str, ...]:
        """Layer names, bottom layer first."""
        return self._names

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    # === ACCESS ===

    def _layer_index(self, layer: LayerKey, row: int, col: int) -> int:
        if isinstance(layer, int):
            if 0 <= layer < len(self._layers):
                return layer
        elif layer in self._names:
            return self._names.index(layer)
        raise OutOfBounds(layer, row, col, self.shape)

    def cell(self, layer: LayerKey, row: int, col: int) -> int:
        """Return the code at (layer, row, col).

        Args:
            layer: Layer name or index (0 = base)
            row: Row index
            col: Column index

        Raises:
            OutOfBounds: If the layer is unknown or row/col fall outside the grid
        """
        index = self._layer_index(layer, row, col)
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise OutOfBounds(layer, row, col, self.shape)
        return self._layers[index][row][col]

    def layer(self, layer: LayerKey) -> tuple[tuple[int, ...], ...]:
        """Return a whole layer as nested tuples."""
        return self._layers[self._layer_index(layer, 0, 0)]

    def is_empty(self, layer_index: int, code: int) -> bool:
        """Whether `code` on the given layer means "draw nothing"."""
        if self.empty_code is None or code != self.empty_code:
            return False
        return layer_index > 0 or self.skip_empty_base

    def iter_cells(self, include_empty: bool = False) -> Iterator[GridCell]:
        """Yield cells in draw order.

        Rows top to bottom, columns left to right, and inside each cell the
        layers bottom to top. FrameRenderer draws in exactly this order, so it
        must stay the back-to-front order of the isometric projection.
        """
        for row in range(self._rows):
            for col in range(self._columns):
                for index, name in enumerate(self._names):
                    code = self._layers[index][row][col]
                    if not include_empty and self.is_empty(index, code):
                        continue
                    yield GridCell(index, name, row, col, code)

    def distinct_codes(self, drawable_only: bool = True) -> set[int]:
        """Return every code used by any layer.

        Args:
            drawable_only: Leave out codes that the empty policy skips
        """
        return {cell.code for cell in self.iter_cells(include_empty=not drawable_only)}

    def __repr__(self) -> str:
        return (
            f"LayeredGrid({self._rows}x{self._columns}, layers={list(self._names)}, "
            f"empty_code={self.empty_code!r})"
        )
