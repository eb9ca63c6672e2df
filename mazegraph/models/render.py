from __future__ import annotations

import colorsys

import numpy as np
from PIL import Image

from .grid import Cell, Grid
from .maze_graph import MazeGraph
from .traversal import TraversalResult

PATH_COLOR = (255, 255, 255)
WALL_COLOR = (0, 0, 0)
NODE_COLOR = (255, 0, 0)

CELL_COLORS: dict[Cell, tuple[int, int, int]] = {
    Cell.WALL: WALL_COLOR,
    Cell.PATH: PATH_COLOR,
    Cell.NODE: NODE_COLOR,
}


def render_grid(
    grid: Grid,
    *,
    colors: dict[Cell, tuple[int, int, int]] | None = None,
    scale: int = 1,
) -> Image.Image:
    """Paint one pixel per cell (walls black, paths white, nodes red)."""

    palette = dict(CELL_COLORS)
    if colors:
        palette.update(colors)
    lookup = np.zeros((len(Cell), 3), dtype=np.uint8)
    for cell, color in palette.items():
        lookup[int(cell)] = color
    rgb = lookup[grid.to_array()]
    return _upscale(Image.fromarray(rgb), scale)


def render_traversal(
    grid: Grid,
    graph: MazeGraph,
    result: TraversalResult,
    *,
    scale: int = 1,
) -> Image.Image:
    """Colour visited nodes by BFS depth (blue near the start, red far away).

    Unvisited nodes keep the plain node colour so gaps in connectivity stand
    out against the gradient.
    """

    rgb = np.array(render_grid(grid), dtype=np.uint8)
    max_depth = result.max_depth
    for position in graph.nodes:
        depth = result.depths.get(position)
        if depth is None:
            continue
        x, y = position
        t = depth / max_depth if max_depth else 0.0
        rgb[y, x] = _rainbow_color(t)
    return _upscale(Image.fromarray(rgb), scale)


def _upscale(image: Image.Image, scale: int) -> Image.Image:
    if scale < 1:
        raise ValueError(f"Scale must be a positive integer, got {scale}.")
    if scale == 1:
        return image
    width, height = image.size
    return image.resize((width * scale, height * scale), Image.Resampling.NEAREST)


def _rainbow_color(t: float) -> tuple[int, int, int]:
    hue = (1.0 - t) * 2 / 3  # map 0..1 to blue->red
    r, g, b = colorsys.hsv_to_rgb(hue, 1.0, 1.0)
    return int(r * 255), int(g * 255), int(b * 255)


__all__ = [
    "CELL_COLORS",
    "NODE_COLOR",
    "PATH_COLOR",
    "WALL_COLOR",
    "render_grid",
    "render_traversal",
]
