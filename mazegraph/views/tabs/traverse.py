from __future__ import annotations

import gradio as gr

from mazegraph.controllers.data_paths import DataPaths
from mazegraph.controllers.traverse import parse_position, process_maze
from mazegraph.models.errors import MazeInputError, TraversalError
from mazegraph.views.components import maze_selector

from .classify import resolve_maze_source


def render(*, data_paths: DataPaths, default_threshold: int) -> None:
    """Build the node graph of a maze and colour nodes by BFS depth."""

    gr.Markdown(
        "Builds the junction graph and walks it breadth first from a border "
        "node. Visited nodes go from blue (start) to red (farthest); nodes "
        "that stay plain red were never reached."
    )

    with gr.Row():
        with gr.Column(scale=1):
            upload_input = gr.File(label="Maze image", file_types=["image"], file_count="single")
            existing_selector, _ = maze_selector(data_paths=data_paths)
            start_input = gr.Textbox(
                label="Start node (x,y)",
                placeholder="first terminal if left blank",
            )
            threshold_input = gr.Slider(
                label="Wall threshold",
                value=default_threshold,
                minimum=0,
                maximum=255,
                step=1,
            )
            scale_input = gr.Slider(label="Preview scale", value=4, minimum=1, maximum=16, step=1)
            run_button = gr.Button("Build graph & run BFS", variant="primary")
        with gr.Column(scale=1):
            overlay_preview = gr.Image(label="BFS depth overlay")
            stats_output = gr.JSON(label="Graph")
            status_output = gr.Markdown(value="")

    run_button.click(
        fn=lambda upload, selected, start, threshold, scale: _handle_traverse(
            data_paths, upload, selected, start, threshold, scale
        ),
        inputs=[upload_input, existing_selector, start_input, threshold_input, scale_input],
        outputs=[overlay_preview, stats_output, status_output],
        show_progress=True,
    )


def _handle_traverse(
    data_paths: DataPaths,
    uploaded_file: str | None,
    selected_filename: str | None,
    start_text: str | None,
    threshold: float | int,
    scale: float | int,
):
    source = resolve_maze_source(data_paths, uploaded_file, selected_filename)
    try:
        start = parse_position(start_text) if start_text and start_text.strip() else None
        result = process_maze(
            source,
            data_paths=data_paths,
            threshold=int(threshold),
            start=start,
            scale=int(scale),
        )
    except (MazeInputError, TraversalError, ValueError) as exc:
        raise gr.Error(str(exc)) from exc

    traversal = result.traversal
    stats = {
        "nodes": len(result.graph),
        "edges": result.graph.edge_count,
        "terminals": [list(pos) for pos in result.graph.terminal_nodes],
        "start": list(traversal.start),
        "visited": traversal.visited_count,
        "unvisited": traversal.unvisited_count,
        "max_depth": traversal.max_depth,
        "timings_ms": {key: round(value, 2) for key, value in result.timings_ms.items()},
    }
    status = (
        f"Saved `{result.overlay_path.name}`, `{result.graph_path.name}` "
        f"and `{result.traversal_path.name}`."
    )
    return result.overlay_image, stats, status


__all__ = ["render"]
