"""Command line entry point for classifying and traversing maze images."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from mazegraph.models.errors import MazeInputError, TraversalError

from .classify import classify_maze
from .data_paths import DataPaths
from .settings import load_settings
from .traverse import parse_position, process_maze


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazegraph",
        description="Turn a black/white maze image into a node graph and walk it breadth first.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every joined edge and stage timing (DEBUG level).",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser(
        "classify",
        help="Highlight dead-ends, corners and junctions in a maze image.",
    )
    classify.add_argument("image", type=Path, help="Maze image (one pixel per cell).")
    classify.add_argument(
        "--output",
        type=Path,
        default=Path("output.png"),
        help="Where to write the classified PNG (default: ./output.png).",
    )
    _add_common_options(classify)

    traverse = subparsers.add_parser(
        "traverse",
        help="Build the node graph, run BFS from a terminal, and save artifacts.",
    )
    traverse.add_argument("image", type=Path, help="Maze image (one pixel per cell).")
    traverse.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Root folder for classified/, graphs/, traversals/ (default: config.toml or $MAZEGRAPH_DATA_DIR).",
    )
    traverse.add_argument(
        "--name",
        default=None,
        help="Artifact basename (default: the image stem).",
    )
    traverse.add_argument(
        "--start",
        default=None,
        help="Start node as 'x,y' (default: the first terminal node).",
    )
    _add_common_options(traverse)
    return parser


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Pixels at or below this first-channel intensity are walls (default: config or 125).",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=1,
        help="Integer upscaling factor for rendered PNGs (default: 1).",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if args.scale < 1:
        parser.error("--scale must be at least 1.")
    start = None
    if getattr(args, "start", None):
        try:
            start = parse_position(args.start)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        if args.command == "classify":
            return _run_classify(args)
        return _run_traverse(args, start)
    except (MazeInputError, TraversalError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1


def _run_classify(args: argparse.Namespace) -> int:
    result = classify_maze(
        args.image,
        threshold=args.threshold,
        scale=args.scale,
        output_path=args.output,
    )
    summary = result.summary
    print(
        f"{args.image.name}: {summary.width}x{summary.height}, {summary.node_cells} nodes "
        f"({summary.dead_ends} dead-ends, {summary.corners} corners, "
        f"{summary.junctions} junctions), {summary.border_nodes} on the border"
    )
    if summary.open_regions > 1:
        print(f"[warning] {summary.open_regions} disconnected open regions", file=sys.stderr)
    print(f"Wrote {result.output_path}")
    return 0


def _run_traverse(args: argparse.Namespace, start: tuple[int, int] | None) -> int:
    data_dir = args.data_dir.expanduser() if args.data_dir else load_settings().data_dir
    result = process_maze(
        args.image,
        base_name=args.name,
        data_paths=DataPaths.from_data_dir(data_dir),
        threshold=args.threshold,
        start=start,
        scale=args.scale,
    )
    traversal = result.traversal
    print(
        f"{args.image.name}: {len(result.graph)} nodes, {result.graph.edge_count} edges, "
        f"{len(result.graph.terminal_nodes)} terminals"
    )
    print(
        f"BFS from {traversal.start}: visited {traversal.visited_count}, "
        f"unvisited {traversal.unvisited_count}, max depth {traversal.max_depth}"
    )
    for path in (
        result.classified_path,
        result.overlay_path,
        result.graph_path,
        result.traversal_path,
    ):
        print(f"Wrote {path}")
    return 0


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


__all__ = ["build_parser", "main"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
