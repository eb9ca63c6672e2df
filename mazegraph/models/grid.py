"""Flat cell buffer that backs every stage of the maze pipeline.

A maze image maps one pixel to one cell: dark pixels are walls, light pixels
are open path. The outermost pixels are expected to be the outer wall, with
gaps in it acting as entrances and exits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Sequence

import numpy as np
from PIL import Image

from .errors import MazeInputError

DEFAULT_WALL_THRESHOLD = 125
WALL_CHAR = "#"

Position = tuple[int, int]


class Cell(IntEnum):
    WALL = 0
    PATH = 1
    NODE = 2


_CELL_CHARS: dict[Cell, str] = {Cell.WALL: WALL_CHAR, Cell.PATH: ".", Cell.NODE: "o"}


def index(width: int, x: int, y: int) -> int:
    """Row-major offset of ``(x, y)`` in a grid ``width`` cells wide."""

    return y * width + x


@dataclass(slots=True)
class Grid:
    """Row-major buffer of :class:`Cell` values."""

    width: int
    height: int
    cells: list[Cell] = field(repr=False)

    def __post_init__(self) -> None:
        _check_dimensions(self.width, self.height)
        if len(self.cells) != self.width * self.height:
            raise MazeInputError(
                f"Expected {self.width * self.height} cells for a "
                f"{self.width}x{self.height} grid, got {len(self.cells)}."
            )

    @classmethod
    def from_intensities(
        cls,
        width: int,
        height: int,
        values: Sequence[float] | np.ndarray,
        *,
        threshold: int = DEFAULT_WALL_THRESHOLD,
    ) -> Grid:
        """Build a grid from per-pixel intensities (``> threshold`` is path).

        ``values`` may be a flat sequence of ``width * height`` intensities, a
        ``(height, width)`` array, or a ``(height, width, channels)`` array in
        which case only the first channel is read.
        """

        _check_dimensions(width, height)
        _check_threshold(threshold)
        array = np.asarray(values)
        if array.ndim == 3:
            array = array[..., 0]
        if array.size != width * height:
            raise MazeInputError(
                f"Pixel buffer holds {array.size} values but the grid is "
                f"{width}x{height} ({width * height} cells)."
            )
        if array.ndim == 2 and array.shape != (height, width):
            raise MazeInputError(
                f"Pixel array shape {array.shape} does not match "
                f"height x width ({height}, {width})."
            )
        open_mask = array.reshape(-1) > threshold
        cells = [Cell.PATH if is_open else Cell.WALL for is_open in open_mask.tolist()]
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_image(
        cls,
        image: Image.Image,
        *,
        threshold: int = DEFAULT_WALL_THRESHOLD,
    ) -> Grid:
        """Build a grid from a Pillow image using its first colour channel."""

        width, height = image.size
        _check_dimensions(width, height)
        rgba = np.asarray(image.convert("RGBA"))
        return cls.from_intensities(width, height, rgba[..., 0], threshold=threshold)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from ASCII rows where ``#`` is a wall."""

        lines = [row for row in rows]
        if not lines:
            raise MazeInputError("Cannot build a grid from zero rows.")
        width = len(lines[0])
        for row_idx, row in enumerate(lines):
            if len(row) != width:
                raise MazeInputError(
                    f"Row {row_idx} has {len(row)} cells, expected {width}."
                )
        cells = [Cell.WALL if char == WALL_CHAR else Cell.PATH for row in lines for char in row]
        return cls(width=width, height=len(lines), cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def cell(self, x: int, y: int) -> Cell:
        self._check_position(x, y)
        return self.cells[index(self.width, x, y)]

    def set_cell(self, x: int, y: int, value: Cell) -> None:
        self._check_position(x, y)
        self.cells[index(self.width, x, y)] = value

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""

        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def positions_of(self, kind: Cell) -> list[Position]:
        return [(x, y) for x, y in self.positions() if self.cell(x, y) == kind]

    def count(self, kind: Cell) -> int:
        return sum(1 for value in self.cells if value == kind)

    def copy(self) -> Grid:
        return Grid(width=self.width, height=self.height, cells=list(self.cells))

    def to_array(self) -> np.ndarray:
        """Return the cells as a ``(height, width)`` uint8 array."""

        return np.asarray(self.cells, dtype=np.uint8).reshape(self.height, self.width)

    def to_rows(self) -> list[str]:
        """Render the grid as ASCII rows (``#`` wall, ``.`` path, ``o`` node)."""

        return [
            "".join(_CELL_CHARS[self.cell(x, y)] for x in range(self.width))
            for y in range(self.height)
        ]

    def _check_position(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid.")


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise MazeInputError(f"Grid dimensions must be positive, got {width}x{height}.")


def _check_threshold(threshold: int) -> None:
    if not 0 <= threshold <= 255:
        raise MazeInputError(f"Wall threshold must be within 0-255, got {threshold}.")


__all__ = [
    "Cell",
    "DEFAULT_WALL_THRESHOLD",
    "Grid",
    "Position",
    "index",
]
