"""Classify a maze image and render its nodes for inspection."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from mazegraph.models.classifier import classify_nodes
from mazegraph.models.diagnostics import GridSummary, summarize_grid
from mazegraph.models.grid import Grid
from mazegraph.models.render import render_grid
from mazegraph.models.utils import load_image, save_png

from .settings import load_settings

logger = logging.getLogger(__name__)

MazeSource = Image.Image | str | Path


@dataclass(slots=True)
class ClassificationResult:
    """Classified grid plus the rendered preview."""

    grid: Grid
    image: Image.Image
    summary: GridSummary
    promoted: int
    output_path: Path | None = None


def load_grid(source: MazeSource, *, threshold: int | None = None) -> Grid:
    """Decode ``source`` into an unclassified grid."""

    if threshold is None:
        threshold = load_settings().wall_threshold
    image = load_image(source)
    grid = Grid.from_image(image, threshold=threshold)
    logger.debug("Loaded %dx%d maze (threshold=%d).", grid.width, grid.height, threshold)
    return grid


def classify_maze(
    source: MazeSource,
    *,
    threshold: int | None = None,
    scale: int = 1,
    output_path: Path | None = None,
) -> ClassificationResult:
    """Load a maze, promote its nodes, and optionally save the preview PNG."""

    grid = load_grid(source, threshold=threshold)

    started = time.perf_counter()
    promoted = classify_nodes(grid)
    logger.info("Found %d nodes in %.1f ms.", promoted, (time.perf_counter() - started) * 1000)

    image = render_grid(grid, scale=scale)
    saved = save_png(image, output_path) if output_path is not None else None
    return ClassificationResult(
        grid=grid,
        image=image,
        summary=summarize_grid(grid),
        promoted=promoted,
        output_path=saved,
    )


__all__ = ["ClassificationResult", "MazeSource", "classify_maze", "load_grid"]
