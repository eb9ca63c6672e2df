from __future__ import annotations

import logging
import os

import gradio as gr

from mazegraph.controllers.data_paths import DataPaths
from mazegraph.controllers.settings import load_settings
from mazegraph.views.tabs import classify, traverse


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = load_settings()
    paths = DataPaths.from_data_dir(settings.data_dir)
    paths.ensure_directories()

    with gr.Blocks(title="mazegraph") as demo:
        with gr.Tabs():
            with gr.Tab("Classify"):
                classify.render(data_paths=paths, default_threshold=settings.wall_threshold)
            with gr.Tab("Graph & BFS"):
                traverse.render(data_paths=paths, default_threshold=settings.wall_threshold)

    demo.launch(
        server_name=os.getenv("GRADIO_SERVER_NAME", "0.0.0.0"),
        server_port=int(os.getenv("GRADIO_SERVER_PORT", "7860")),
    )


if __name__ == "__main__":
    main()
