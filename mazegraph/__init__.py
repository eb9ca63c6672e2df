"""Turn maze images into junction graphs and walk them breadth first."""

__version__ = "0.1.0"
