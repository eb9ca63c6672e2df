"""Load shared settings from config.toml."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import tomllib

from mazegraph.models.errors import MazeInputError
from mazegraph.models.grid import DEFAULT_WALL_THRESHOLD

CONFIG_FILENAME = "config.toml"
CONFIG_SECTION = "mazegraph"
CONFIG_ENV = "MAZEGRAPH_CONFIG"
DATA_DIR_ENV = "MAZEGRAPH_DATA_DIR"
DEFAULT_DATA_DIR = "data"


@dataclass(frozen=True, slots=True)
class Settings:
    data_dir: Path
    wall_threshold: int = DEFAULT_WALL_THRESHOLD


def load_settings(config_path: Path | None = None) -> Settings:
    """Return settings from config.toml, with environment overrides applied."""

    path = config_path or _default_config_path()
    section = _read_config_section(path.expanduser().resolve())

    raw_dir = section.get("data_dir")
    if not isinstance(raw_dir, str) or not raw_dir.strip():
        raw_dir = DEFAULT_DATA_DIR
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        raw_dir = env_dir

    threshold = section.get("wall_threshold", DEFAULT_WALL_THRESHOLD)
    if isinstance(threshold, bool) or not isinstance(threshold, int) or not 0 <= threshold <= 255:
        raise MazeInputError(
            f"[{CONFIG_SECTION}] wall_threshold in {path} must be an integer in 0-255, "
            f"got {threshold!r}."
        )

    return Settings(data_dir=_resolve_path(raw_dir), wall_threshold=threshold)


def load_data_dir() -> Path:
    """Return the canonical data directory resolved from config.toml."""

    return load_settings().data_dir


@lru_cache(maxsize=8)
def _read_config_section(config_path: Path) -> dict[str, Any]:
    if not config_path.is_file():
        return {}

    with config_path.open("rb") as handle:
        config = tomllib.load(handle)

    section = config.get(CONFIG_SECTION)
    if isinstance(section, dict):
        return section
    return {}


def _default_config_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    return _project_root() / CONFIG_FILENAME


def _resolve_path(raw_path: str) -> Path:
    path = Path(raw_path).expanduser()
    if path.is_absolute():
        return path.resolve()
    return (_project_root() / path).resolve()


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


__all__ = ["Settings", "load_data_dir", "load_settings"]
