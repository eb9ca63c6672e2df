"""Shared pytest fixtures for mazegraph tests.

Mazes are written as ASCII rows: ``#`` is a wall and anything else is open
path. After classification, ``o`` marks a node cell (see ``Grid.to_rows``).

SAMPLE_MAZE (7x5) has an entrance at (1, 0) and an exit at (5, 4):

    #.#####        #o#####
    #.....#        #o...o#
    #.###.#   ->   #.###.#
    #...#.#        #o.o#.#
    #####.#        #####o#
"""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from mazegraph.models.classifier import classify_nodes
from mazegraph.models.grid import Grid

SAMPLE_MAZE = [
    "#.#####",
    "#.....#",
    "#.###.#",
    "#...#.#",
    "#####.#",
]

SAMPLE_CLASSIFIED = [
    "#o#####",
    "#o...o#",
    "#.###.#",
    "#o.o#.#",
    "#####o#",
]

# Closed loop that never touches the border: four corner nodes, no terminals.
INNER_LOOP_MAZE = [
    "#####",
    "#...#",
    "#.#.#",
    "#...#",
    "#####",
]

# Two junctions, a side loop and several dead ends.
BRANCHING_MAZE = [
    "#.#########",
    "#.....#...#",
    "#.###.#.#.#",
    "#...#...#.#",
    "###.#####.#",
    "#.......#..",
    "###########",
]


def classified(rows: list[str]) -> Grid:
    grid = Grid.from_rows(rows)
    classify_nodes(grid)
    return grid


def maze_image(rows: list[str], *, mode: str = "L") -> Image.Image:
    """Render ASCII rows as a black/white image (one pixel per cell)."""

    pixels = np.array(
        [[0 if char == "#" else 255 for char in row] for row in rows],
        dtype=np.uint8,
    )
    return Image.fromarray(pixels).convert(mode)


@pytest.fixture
def sample_grid() -> Grid:
    return classified(SAMPLE_MAZE)


@pytest.fixture
def sample_image_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.png"
    maze_image(SAMPLE_MAZE).save(path)
    return path


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MAZEGRAPH_DATA_DIR", raising=False)
    monkeypatch.delenv("MAZEGRAPH_CONFIG", raising=False)
