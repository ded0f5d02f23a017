"""Pass runner: apply a rule to every cell of a grid.

A pass reads the input snapshot only and builds a brand-new Grid, so the
order in which cells are visited cannot affect the result.
"""

from __future__ import annotations

import logging

from cavemap.automata.rules import Rule
from cavemap.world.grid import Grid
from cavemap.world.neighbours import neighbour_coordinates
from cavemap.world.terrain import TerrainKind

logger = logging.getLogger(__name__)


def apply_rule(grid: Grid, rule: Rule) -> Grid:
    """Run one pass of ``rule`` over ``grid``.

    Args:
        grid: The snapshot to read from.  It is not modified.
        rule: Rule mapping (current kind, neighbour kinds) to the next kind.

    Returns:
        A new Grid of the same dimensions.
    """
    rows = grid.rows

    def next_kind(row: int, col: int) -> TerrainKind:
        neighbours = [
            rows[nr][nc].kind
            for nr, nc in neighbour_coordinates(row, col, grid.height, grid.width)
        ]
        return rule(rows[row][col].kind, neighbours)

    return Grid.new(grid.height, grid.width, next_kind)


def apply_rule_n_times(grid: Grid, rule: Rule, n: int) -> Grid:
    """Run ``n`` successive passes of ``rule``.

    Args:
        grid: The starting snapshot.
        rule: Rule applied on every pass.
        n: Number of passes.  ``n <= 0`` returns ``grid`` itself.

    Returns:
        The snapshot produced by the last pass.
    """
    for i in range(n):
        grid = apply_rule(grid, rule)
        logger.debug(f"{getattr(rule, '__name__', 'rule')} pass {i + 1}/{n} done")
    return grid
