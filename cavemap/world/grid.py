"""Grid — an immutable snapshot of a rectangular tile map.

A Grid owns ``height`` rows of ``width`` cells.  Nothing edits a Grid once
it is built: smoothing passes read one snapshot and assemble the next one
from scratch, so every cell computed in a pass sees only the previous
generation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from cavemap.world.errors import InvalidDimensionsError, OutOfBoundsError
from cavemap.world.terrain import TerrainKind

Fill = Callable[[int, int], TerrainKind]


@dataclass(frozen=True)
class Cell:
    """A single tile in the grid.

    Attributes:
        row: Row index, stable across passes.
        col: Column index, stable across passes.
        kind: Terrain held by the tile in this snapshot.
    """

    row: int
    col: int
    kind: TerrainKind

    @property
    def coord(self) -> tuple[int, int]:
        """The ``(row, col)`` identity of this cell."""
        return (self.row, self.col)


def check_dimensions(height: int, width: int) -> None:
    """Raise InvalidDimensionsError unless both values are positive ints."""
    for name, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            msg = f"{name} must be a positive integer, got {value!r}"
            raise InvalidDimensionsError(msg)


@dataclass(frozen=True)
class Grid:
    """A 2D tile map indexed as ``rows[row][col]``.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        rows: ``height`` tuples of ``width`` cells each.
    """

    height: int
    width: int
    rows: tuple[tuple[Cell, ...], ...] = field(repr=False)

    def __post_init__(self) -> None:
        """Reject rows that disagree with the declared shape."""
        check_dimensions(self.height, self.width)
        if len(self.rows) != self.height:
            msg = f"expected {self.height} rows, got {len(self.rows)}"
            raise InvalidDimensionsError(msg)
        for r, row in enumerate(self.rows):
            if len(row) != self.width:
                msg = f"row {r} has {len(row)} cells, expected {self.width}"
                raise InvalidDimensionsError(msg)
            for c, cell in enumerate(row):
                if cell.coord != (r, c):
                    msg = f"cell {cell.coord} stored at ({r}, {c})"
                    raise InvalidDimensionsError(msg)

    @classmethod
    def new(cls, height: int, width: int, fill: Fill) -> Grid:
        """Build a grid, asking ``fill(row, col)`` for every cell's terrain.

        Cells are filled in row-major order.

        Args:
            height: Number of rows (must be positive).
            width: Number of columns (must be positive).
            fill: Callable returning the terrain for a coordinate.

        Raises:
            InvalidDimensionsError: If either dimension is not positive.
        """
        check_dimensions(height, width)
        rows = tuple(
            tuple(Cell(row=r, col=c, kind=fill(r, c)) for c in range(width))
            for r in range(height)
        )
        return cls(height=height, width=width, rows=rows)

    @classmethod
    def from_kinds(cls, kinds: Sequence[Sequence[TerrainKind]]) -> Grid:
        """Build a grid from a nested sequence of terrain kinds.

        Args:
            kinds: One sequence per row; all rows must share a length.

        Raises:
            InvalidDimensionsError: If ``kinds`` is empty or ragged.
        """
        height = len(kinds)
        width = len(kinds[0]) if height else 0
        if any(len(row) != width for row in kinds):
            msg = "all rows must have the same number of cells"
            raise InvalidDimensionsError(msg)
        return cls.new(height, width, lambda r, c: TerrainKind(kinds[r][c]))

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` addresses a cell of this grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_at(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``.

        Raises:
            OutOfBoundsError: If coordinates are out of bounds.
        """
        if not self.in_bounds(row, col):
            msg = f"({row}, {col}) out of bounds for {self.height}x{self.width}"
            raise OutOfBoundsError(msg)
        return self.rows[row][col]

    def get(self, row: int, col: int) -> TerrainKind:
        """Return the terrain at ``(row, col)``.

        Raises:
            OutOfBoundsError: If coordinates are out of bounds.
        """
        return self.cell_at(row, col).kind

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self.rows:
            yield from row

    def kinds(self) -> tuple[tuple[TerrainKind, ...], ...]:
        """Return the terrain of every cell, one tuple per row."""
        return tuple(tuple(cell.kind for cell in row) for row in self.rows)

    def count(self, kind: TerrainKind) -> int:
        """Return how many cells hold ``kind``."""
        return sum(1 for cell in self.cells() if cell.kind is kind)

    def to_array(self) -> NDArray[np.str_]:
        """Return the terrain values as a ``(height, width)`` string array."""
        return np.array(
            [[cell.kind.value for cell in row] for row in self.rows],
            dtype="<U6",
        )


def new_grid(height: int, width: int, fill: Fill) -> Grid:
    """Module-level shorthand for :meth:`Grid.new`."""
    return Grid.new(height, width, fill)
