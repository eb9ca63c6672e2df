"""Thin wrappers around Pillow loading utilities."""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..errors import MazeInputError


def load_image(source: Image.Image | str | Path) -> Image.Image:
    """Return a copy of ``source`` (a path or an already opened image)."""

    if isinstance(source, Image.Image):
        return source.copy()
    path = Path(source)
    try:
        with Image.open(path) as opened:
            return opened.copy()
    except FileNotFoundError as exc:
        raise MazeInputError(f"Maze image {path} was not found.") from exc
    except UnidentifiedImageError as exc:
        raise MazeInputError(f"{path} is not a valid image file.") from exc


def encode_png(image: Image.Image) -> bytes:
    """Return PNG-encoded bytes for the provided Pillow image."""

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def save_png(image: Image.Image, destination: Path) -> Path:
    """Persist ``image`` as PNG at ``destination``."""

    destination = destination.expanduser()
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(encode_png(image))
    return destination


__all__ = ["load_image", "encode_png", "save_png"]
