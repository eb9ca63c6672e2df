from __future__ import annotations

import json
import logging
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

from .errors import TraversalError
from .grid import Position
from .maze_graph import MazeGraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalResult:
    """Outcome of a breadth-first walk over a :class:`MazeGraph`."""

    start: Position
    order: list[Position]
    depths: dict[Position, int]
    unvisited: set[Position] = field(default_factory=set)

    @property
    def visited(self) -> set[Position]:
        return set(self.order)

    @property
    def visited_count(self) -> int:
        return len(self.order)

    @property
    def unvisited_count(self) -> int:
        return len(self.unvisited)

    @property
    def is_complete(self) -> bool:
        return not self.unvisited

    @property
    def max_depth(self) -> int:
        return max(self.depths.values(), default=0)

    def to_payload(self) -> dict[str, object]:
        return {
            "start": list(self.start),
            "order": [list(pos) for pos in self.order],
            "depths": [[pos[0], pos[1], depth] for pos, depth in self.depths.items()],
            "unvisited": [list(pos) for pos in sorted(self.unvisited)],
        }

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_payload(), indent=indent)

    def save(self, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json())
        return output_path


def breadth_first_search(
    graph: MazeGraph,
    start: Position | None = None,
) -> TraversalResult:
    """Visit every node reachable from ``start`` exactly once, breadth first.

    ``start`` defaults to the first terminal node of the graph. Visited state
    is local to this call, so the same graph can be traversed repeatedly.
    """

    if start is None:
        if not graph.terminal_nodes:
            raise TraversalError("Graph has no terminal node to start from.")
        start = graph.terminal_nodes[0]
    elif start not in graph:
        raise TraversalError(f"Start position {start} is not a node of the graph.")

    order: list[Position] = []
    depths: dict[Position, int] = {start: 0}
    visited: set[Position] = set()
    queue: deque[Position] = deque([start])
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        for neighbor in graph.nodes[current].relations:
            if neighbor in visited:
                continue
            # First discovery fixes the depth; later re-queues never lower it.
            depths.setdefault(neighbor, depths[current] + 1)
            queue.append(neighbor)

    unvisited = set(graph.nodes) - visited
    logger.info(
        "Visited %d of %d nodes from %s (%d unreachable).",
        len(order),
        len(graph),
        start,
        len(unvisited),
    )
    return TraversalResult(
        start=start,
        order=order,
        depths={pos: depths[pos] for pos in order},
        unvisited=unvisited,
    )


__all__ = ["TraversalResult", "breadth_first_search"]
