"""Summary statistics used by the callers to report on a classified maze."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from skimage.measure import label

from .classifier import CORNER, DEAD_END, JUNCTION, node_kind
from .grid import Cell, Grid


@dataclass(slots=True)
class GridSummary:
    width: int
    height: int
    wall_cells: int
    path_cells: int
    node_cells: int
    border_nodes: int
    dead_ends: int
    corners: int
    junctions: int
    open_regions: int

    def to_dict(self) -> dict[str, int]:
        return {
            "width": self.width,
            "height": self.height,
            "wall_cells": self.wall_cells,
            "path_cells": self.path_cells,
            "node_cells": self.node_cells,
            "border_nodes": self.border_nodes,
            "dead_ends": self.dead_ends,
            "corners": self.corners,
            "junctions": self.junctions,
            "open_regions": self.open_regions,
        }


def count_open_regions(grid: Grid) -> int:
    """Number of 4-connected regions of non-wall cells."""

    open_mask = grid.to_array() != int(Cell.WALL)
    if not open_mask.any():
        return 0
    labeled = label(open_mask, connectivity=1)
    return int(np.max(labeled))


def summarize_grid(grid: Grid) -> GridSummary:
    kinds = {DEAD_END: 0, CORNER: 0, JUNCTION: 0}
    border_nodes = 0
    for x, y in grid.positions_of(Cell.NODE):
        kind = node_kind(grid, x, y)
        if kind is not None:
            kinds[kind] += 1
        if grid.is_border(x, y):
            border_nodes += 1
    return GridSummary(
        width=grid.width,
        height=grid.height,
        wall_cells=grid.count(Cell.WALL),
        path_cells=grid.count(Cell.PATH),
        node_cells=grid.count(Cell.NODE),
        border_nodes=border_nodes,
        dead_ends=kinds[DEAD_END],
        corners=kinds[CORNER],
        junctions=kinds[JUNCTION],
        open_regions=count_open_regions(grid),
    )


__all__ = ["GridSummary", "count_open_regions", "summarize_grid"]
