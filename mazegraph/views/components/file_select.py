from __future__ import annotations

import gradio as gr

from mazegraph.controllers.data_paths import DataPaths
from mazegraph.views.config import list_mazes, pick_maze


def maze_selector(
    *,
    data_paths: DataPaths,
    label: str = "Existing maze",
    refresh_label: str = "Refresh",
) -> tuple[gr.Dropdown, gr.Button]:
    """Dropdown of maze images under ``data_paths.mazes_dir`` plus a refresh button."""

    mazes = list_mazes(data_paths)
    dropdown = gr.Dropdown(
        label=label,
        choices=mazes,
        value=pick_maze(None, mazes),
        allow_custom_value=True,
    )
    refresh_button = gr.Button(refresh_label)

    def _refresh(current: str | None) -> gr.Dropdown:
        fresh = list_mazes(data_paths)
        return gr.Dropdown(choices=fresh, value=pick_maze(current, fresh))

    refresh_button.click(fn=_refresh, inputs=[dropdown], outputs=[dropdown])
    return dropdown, refresh_button


__all__ = ["maze_selector"]
