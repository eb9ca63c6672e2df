"""Exception types raised by the maze pipeline."""

from __future__ import annotations


class MazeInputError(ValueError):
    """Raised when the pixel data or grid dimensions cannot be used."""


class GraphInvariantError(RuntimeError):
    """Raised when graph construction hits a state that should be impossible."""


class TraversalError(ValueError):
    """Raised when a traversal cannot be started."""


__all__ = ["MazeInputError", "GraphInvariantError", "TraversalError"]
