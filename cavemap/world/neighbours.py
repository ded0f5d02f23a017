"""Moore-neighbourhood lookups, clipped at the grid edge.

There is no wrap-around: corner cells have 3 neighbours and non-corner
edge cells have 5.  The smoothing and forest thresholds rely on these
reduced counts.
"""

from __future__ import annotations

from cavemap.world.errors import OutOfBoundsError
from cavemap.world.grid import Cell, Grid

_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def neighbour_coordinates(
    row: int,
    col: int,
    height: int,
    width: int,
) -> list[tuple[int, int]]:
    """Return the in-bounds coordinates adjacent to ``(row, col)``.

    Args:
        row: Row index of the centre cell.
        col: Column index of the centre cell.
        height: Number of rows in the grid.
        width: Number of columns in the grid.

    Returns:
        Up to 8 ``(row, col)`` pairs, excluding the centre itself.
    """
    result: list[tuple[int, int]] = []
    for dr, dc in _OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < height and 0 <= nc < width:
            result.append((nr, nc))
    return result


def neighbour_cells(coord: tuple[int, int], grid: Grid) -> list[Cell]:
    """Return the cells adjacent to ``coord`` in ``grid``.

    Raises:
        OutOfBoundsError: If ``coord`` itself lies outside the grid.
    """
    row, col = coord
    if not grid.in_bounds(row, col):
        msg = f"({row}, {col}) out of bounds for {grid.height}x{grid.width}"
        raise OutOfBoundsError(msg)
    return [
        grid.cell_at(nr, nc)
        for nr, nc in neighbour_coordinates(row, col, grid.height, grid.width)
    ]
