"""Shared filesystem layout for pipeline artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .settings import load_data_dir


@dataclass(slots=True)
class DataPaths:
    """Canonical directories for source mazes and generated artifacts."""

    mazes_dir: Path = Path("data/mazes")
    classified_dir: Path = Path("data/classified")
    graphs_dir: Path = Path("data/graphs")
    traversals_dir: Path = Path("data/traversals")

    def ensure_directories(self) -> None:
        self.mazes_dir.mkdir(parents=True, exist_ok=True)
        self.classified_dir.mkdir(parents=True, exist_ok=True)
        self.graphs_dir.mkdir(parents=True, exist_ok=True)
        self.traversals_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_data_dir(cls, data_dir: Path | None = None) -> DataPaths:
        base = data_dir or load_data_dir()
        base = base.expanduser().resolve()
        return cls(
            mazes_dir=base / "mazes",
            classified_dir=base / "classified",
            graphs_dir=base / "graphs",
            traversals_dir=base / "traversals",
        )


__all__ = ["DataPaths"]
