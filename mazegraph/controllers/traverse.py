"""End-to-end run: maze image -> classified grid -> graph -> BFS artifacts."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from PIL import Image

from mazegraph.models.classifier import classify_nodes
from mazegraph.models.grid import Grid, Position
from mazegraph.models.maze_graph import MazeGraph, build_graph
from mazegraph.models.render import render_grid, render_traversal
from mazegraph.models.traversal import TraversalResult, breadth_first_search
from mazegraph.models.utils import apply_stage_prefix, save_png, strip_prefix

from .classify import MazeSource, load_grid
from .data_paths import DataPaths

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalRunResult:
    """Artifacts and in-memory results of a traversal run."""

    grid: Grid
    graph: MazeGraph
    traversal: TraversalResult
    overlay_image: Image.Image
    classified_path: Path
    overlay_path: Path
    graph_path: Path
    traversal_path: Path
    timings_ms: dict[str, float] = field(default_factory=dict)


def process_maze(
    source: MazeSource,
    *,
    base_name: str | None = None,
    data_paths: DataPaths | None = None,
    threshold: int | None = None,
    start: Position | None = None,
    scale: int = 1,
) -> TraversalRunResult:
    """Build the maze graph, walk it breadth first, and persist the results.

    Args:
        source: Pillow image or path to the maze image (white paths, black
            walls, one pixel per cell).
        base_name: Optional override for artifact filenames (without
            extension). Defaults to the source stem or a timestamp.
        data_paths: Output directories. Defaults to the configured data dir.
        threshold: Intensity at or below which a pixel is a wall. Defaults to
            the configured ``wall_threshold``.
        start: Node position to start from. Defaults to the first terminal.
        scale: Integer upscaling factor for the rendered PNGs.

    Returns:
        TraversalRunResult with the grid, graph, traversal, artifact paths
        and per-stage timings in milliseconds.
    """

    paths = data_paths or DataPaths.from_data_dir()
    paths.ensure_directories()
    sample_base = _derive_base_name(source, base_name)
    timings: dict[str, float] = {}
    run_started = time.perf_counter()

    grid = load_grid(source, threshold=threshold)

    started = time.perf_counter()
    classify_nodes(grid)
    timings["find_nodes"] = _elapsed_ms(started)
    logger.info("Total time to find nodes: %.1f ms", timings["find_nodes"])

    started = time.perf_counter()
    graph = build_graph(grid)
    timings["create_graph"] = _elapsed_ms(started)
    logger.info("Total time to create the graph: %.1f ms", timings["create_graph"])

    started = time.perf_counter()
    traversal = breadth_first_search(graph, start)
    timings["traverse"] = _elapsed_ms(started)
    timings["total"] = _elapsed_ms(run_started)
    logger.info("Total solve time: %.1f ms", timings["total"])

    classified_path = save_png(
        render_grid(grid, scale=scale),
        paths.classified_dir / f"{apply_stage_prefix('classified', sample_base)}.png",
    )
    overlay_image = render_traversal(grid, graph, traversal, scale=scale)
    overlay_path = save_png(
        overlay_image,
        paths.traversals_dir / f"{apply_stage_prefix('traversal', sample_base)}.png",
    )
    graph_path = graph.save(
        paths.graphs_dir / f"{apply_stage_prefix('graph', sample_base)}.json"
    )
    traversal_path = traversal.save(
        paths.traversals_dir / f"{apply_stage_prefix('traversal', sample_base)}.json"
    )

    return TraversalRunResult(
        grid=grid,
        graph=graph,
        traversal=traversal,
        overlay_image=overlay_image,
        classified_path=classified_path,
        overlay_path=overlay_path,
        graph_path=graph_path,
        traversal_path=traversal_path,
        timings_ms=timings,
    )


def parse_position(raw: str) -> Position:
    """Parse ``"x,y"`` into a position tuple."""

    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected a position as 'x,y', got {raw!r}.")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"Position coordinates must be integers, got {raw!r}.") from exc


def _derive_base_name(source: MazeSource, override: str | None) -> str:
    if override and override.strip():
        return strip_prefix(Path(override.strip()).stem)
    if isinstance(source, (str, Path)):
        stem = Path(source).stem.strip()
        if stem:
            return strip_prefix(stem)
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


__all__ = ["TraversalRunResult", "parse_position", "process_maze"]
