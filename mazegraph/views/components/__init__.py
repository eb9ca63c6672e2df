from .file_select import maze_selector

__all__ = ["maze_selector"]
