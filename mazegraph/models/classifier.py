"""Promote corridor cells that matter for routing to graph nodes.

A path cell becomes a node when it is a dead-end (one open neighbour), a
corner (two open neighbours that are not opposite each other) or a junction
(three or four open neighbours). Straight corridor cells stay plain path.
"""

from __future__ import annotations

import logging

from .grid import Cell, Grid

logger = logging.getLogger(__name__)

DEAD_END = "dead_end"
CORNER = "corner"
JUNCTION = "junction"


def classify_nodes(grid: Grid) -> int:
    """Promote qualifying path cells to nodes in place and return the count.

    Cells are visited row by row, left to right, and every promotion is
    written immediately. Neighbour counting only tells walls apart from
    non-walls, so earlier promotions never change a later cell's outcome and
    the result matches a snapshot evaluation of the input grid.
    """

    promoted = 0
    for x, y in grid.positions():
        if grid.cell(x, y) != Cell.PATH:
            continue
        if node_kind(grid, x, y) is None:
            continue
        grid.set_cell(x, y, Cell.NODE)
        promoted += 1
    logger.debug(
        "Promoted %d of %d cells to nodes (%dx%d grid).",
        promoted,
        grid.width * grid.height,
        grid.width,
        grid.height,
    )
    return promoted


def node_kind(grid: Grid, x: int, y: int) -> str | None:
    """Return why the open cell at ``(x, y)`` is a node, or ``None``."""

    if grid.cell(x, y) == Cell.WALL:
        return None
    top = _is_open(grid, x, y - 1)
    right = _is_open(grid, x + 1, y)
    bottom = _is_open(grid, x, y + 1)
    left = _is_open(grid, x - 1, y)
    open_count = top + right + bottom + left

    if open_count == 1:
        return DEAD_END
    if open_count == 2:
        if (top and bottom) or (left and right):
            return None
        return CORNER
    if open_count >= 3:
        return JUNCTION
    return None


def _is_open(grid: Grid, x: int, y: int) -> bool:
    # Out-of-bounds neighbours are ignored rather than treated as walls.
    return grid.in_bounds(x, y) and grid.cell(x, y) != Cell.WALL


__all__ = ["CORNER", "DEAD_END", "JUNCTION", "classify_nodes", "node_kind"]
