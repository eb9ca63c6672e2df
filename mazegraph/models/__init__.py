"""Core model code for the maze graph pipeline."""

from .classifier import classify_nodes, node_kind
from .diagnostics import GridSummary, count_open_regions, summarize_grid
from .errors import GraphInvariantError, MazeInputError, TraversalError
from .grid import DEFAULT_WALL_THRESHOLD, Cell, Grid, Position, index
from .maze_graph import GraphNode, MazeGraph, build_graph
from .render import render_grid, render_traversal
from .traversal import TraversalResult, breadth_first_search

__all__ = [
    "Cell",
    "DEFAULT_WALL_THRESHOLD",
    "Grid",
    "Position",
    "index",
    "classify_nodes",
    "node_kind",
    "GraphNode",
    "MazeGraph",
    "build_graph",
    "TraversalResult",
    "breadth_first_search",
    "render_grid",
    "render_traversal",
    "GridSummary",
    "count_open_regions",
    "summarize_grid",
    "GraphInvariantError",
    "MazeInputError",
    "TraversalError",
]
