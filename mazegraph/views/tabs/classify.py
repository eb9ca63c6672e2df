from __future__ import annotations

from pathlib import Path

import gradio as gr

from mazegraph.controllers.classify import classify_maze
from mazegraph.controllers.data_paths import DataPaths
from mazegraph.models.errors import MazeInputError
from mazegraph.views.components import maze_selector
from mazegraph.views.config import resolve_maze_path


def render(*, data_paths: DataPaths, default_threshold: int) -> None:
    """Upload or pick a maze image and preview its node classification."""

    gr.Markdown(
        "Upload a **maze image** (black walls, white paths, one pixel per cell) "
        "or pick one from `data/mazes/`. Dead-ends, corners and junctions are "
        "painted red."
    )

    with gr.Row():
        with gr.Column(scale=1):
            upload_input = gr.File(label="Maze image", file_types=["image"], file_count="single")
            existing_selector, _ = maze_selector(data_paths=data_paths)
            threshold_input = gr.Slider(
                label="Wall threshold",
                value=default_threshold,
                minimum=0,
                maximum=255,
                step=1,
            )
            scale_input = gr.Slider(label="Preview scale", value=4, minimum=1, maximum=16, step=1)
            run_button = gr.Button("Classify", variant="primary")
        with gr.Column(scale=1):
            preview = gr.Image(label="Classified maze")
            summary_output = gr.JSON(label="Summary")
            status_output = gr.Markdown(value="")

    run_button.click(
        fn=lambda upload, selected, threshold, scale: _handle_classify(
            data_paths, upload, selected, threshold, scale
        ),
        inputs=[upload_input, existing_selector, threshold_input, scale_input],
        outputs=[preview, summary_output, status_output],
        show_progress=True,
    )


def _handle_classify(
    data_paths: DataPaths,
    uploaded_file: str | None,
    selected_filename: str | None,
    threshold: float | int,
    scale: float | int,
):
    source = resolve_maze_source(data_paths, uploaded_file, selected_filename)
    try:
        result = classify_maze(source, threshold=int(threshold), scale=int(scale))
    except MazeInputError as exc:
        raise gr.Error(str(exc)) from exc

    summary = result.summary
    status = f"Promoted {result.promoted} cells to nodes in `{source.name}`."
    if summary.open_regions > 1:
        status += f"  \n⚠️ {summary.open_regions} disconnected open regions."
    return result.image, summary.to_dict(), status


def resolve_maze_source(
    data_paths: DataPaths,
    uploaded_file: str | None,
    selected_filename: str | None,
) -> Path:
    if uploaded_file:
        return Path(uploaded_file)
    if selected_filename:
        candidate = resolve_maze_path(data_paths, selected_filename)
        if not candidate.exists():
            raise gr.Error(f"{candidate} does not exist. Refresh the list and try again.")
        return candidate
    raise gr.Error("Upload a maze image or choose an existing filename first.")


__all__ = ["render", "resolve_maze_source"]
