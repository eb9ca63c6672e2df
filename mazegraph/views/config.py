from __future__ import annotations

from pathlib import Path

from mazegraph.controllers.data_paths import DataPaths

IMAGE_SUFFIXES = (".png", ".bmp", ".gif")


def list_mazes(data_paths: DataPaths | None = None) -> list[str]:
    """Return sorted maze image filenames under the configured mazes dir."""

    paths = data_paths or DataPaths.from_data_dir()
    if not paths.mazes_dir.exists():
        return []
    return sorted(
        path.name
        for path in paths.mazes_dir.iterdir()
        if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES
    )


def pick_maze(current: str | None, mazes: list[str]) -> str | None:
    """Keep ``current`` while it is still listed, else fall back to the first maze."""

    if current and current in mazes:
        return current
    return mazes[0] if mazes else None


def resolve_maze_path(data_paths: DataPaths, selected: str) -> Path:
    candidate = Path(selected)
    if not candidate.is_absolute():
        candidate = data_paths.mazes_dir / candidate.name
    return candidate


__all__ = ["IMAGE_SUFFIXES", "list_mazes", "pick_maze", "resolve_maze_path"]
