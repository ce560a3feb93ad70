"""The parsed contents of a scene description file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

__all__ = ["SceneError", "Scene", "Color"]

Color = Tuple[int, int, int]


class SceneError(Exception):
    """Raised when a scene file cannot be read or is invalid."""


@dataclass
class Scene:
    """Everything taken from a scene file.

    lines holds the file's non-empty lines with leading blanks removed.
    grid holds the map as rows of equal width.
    """

    lines: List[str] = field(default_factory=list)
    north: Optional[str] = None
    south: Optional[str] = None
    east: Optional[str] = None
    west: Optional[str] = None
    floor_color: Optional[Color] = None
    ceiling_color: Optional[Color] = None
    grid: List[str] = field(default_factory=list)

    def textures(self) -> Dict[str, Optional[str]]:
        """The texture paths keyed by their identifiers NO, SO, EA and WE."""
        return {
            "NO": self.north,
            "SO": self.south,
            "EA": self.east,
            "WE": self.west,
        }