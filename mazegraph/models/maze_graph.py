from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .errors import GraphInvariantError
from .grid import Cell, Grid, Position

logger = logging.getLogger(__name__)

LEFT: Position = (-1, 0)
UP: Position = (0, -1)


@dataclass(slots=True)
class GraphNode:
    """Graph vertex for one node cell, with the positions it connects to."""

    x: int
    y: int
    relations: list[Position] = field(default_factory=list)

    @property
    def position(self) -> Position:
        return self.x, self.y

    @property
    def degree(self) -> int:
        return len(self.relations)

    def to_dict(self) -> dict[str, object]:
        return {
            "x": self.x,
            "y": self.y,
            "relations": [list(pos) for pos in self.relations],
        }


@dataclass(slots=True)
class MazeGraph:
    """Undirected graph of maze nodes keyed by grid position."""

    width: int
    height: int
    nodes: dict[Position, GraphNode] = field(default_factory=dict)
    terminal_nodes: list[Position] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, position: object) -> bool:
        return position in self.nodes

    def node(self, position: Position) -> GraphNode:
        try:
            return self.nodes[position]
        except KeyError:
            raise KeyError(f"No node at {position}.") from None

    def neighbors(self, position: Position) -> list[Position]:
        return list(self.node(position).relations)

    def edges(self) -> Iterator[tuple[Position, Position]]:
        """Yield each undirected edge once as an ordered pair of positions."""

        for position, node in self.nodes.items():
            for other in node.relations:
                if position < other:
                    yield position, other

    @property
    def edge_count(self) -> int:
        return sum(node.degree for node in self.nodes.values()) // 2

    def to_payload(self) -> dict[str, object]:
        return {
            "width": self.width,
            "height": self.height,
            "nodes": [node.to_dict() for node in self.nodes.values()],
            "edges": [[list(a), list(b)] for a, b in self.edges()],
            "terminal_nodes": [list(pos) for pos in self.terminal_nodes],
        }

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_payload(), indent=indent)

    def save(self, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json())
        return output_path


def build_graph(grid: Grid) -> MazeGraph:
    """Connect every node cell of a classified grid to its nearest neighbours.

    Each node only looks left and up; the right and down edges are picked up
    when later nodes in row-major order look back at it. Edges are always
    registered on both endpoints.
    """

    graph = MazeGraph(width=grid.width, height=grid.height)
    for x, y in grid.positions():
        if grid.cell(x, y) != Cell.NODE:
            continue
        node = GraphNode(x=x, y=y)
        _join(grid, graph, node, LEFT)
        _join(grid, graph, node, UP)
        graph.nodes[node.position] = node
        if grid.is_border(x, y):
            graph.terminal_nodes.append(node.position)

    logger.debug(
        "Built graph with %d nodes, %d edges, %d terminals.",
        len(graph),
        graph.edge_count,
        len(graph.terminal_nodes),
    )
    return graph


def _join(grid: Grid, graph: MazeGraph, node: GraphNode, step: Position) -> None:
    d_x, d_y = step
    cur_x, cur_y = node.x + d_x, node.y + d_y
    while grid.in_bounds(cur_x, cur_y):
        cell = grid.cell(cur_x, cur_y)
        if cell == Cell.WALL:
            return
        if cell == Cell.NODE:
            other = graph.nodes.get((cur_x, cur_y))
            if other is None:
                raise GraphInvariantError(
                    f"Node at {node.position} reached node cell {(cur_x, cur_y)} "
                    "which has not been added to the graph."
                )
            logger.debug("Joining node %s to node %s", node.position, other.position)
            other.relations.append(node.position)
            node.relations.append(other.position)
            return
        cur_x += d_x
        cur_y += d_y


__all__ = ["GraphNode", "MazeGraph", "build_graph"]
