"""Parse and validate .cub scene files for grid-based raycasting games, with small string, memory, list and formatting helpers."""

__version__ = "0.1.0"