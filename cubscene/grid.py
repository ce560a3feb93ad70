"""Extracting the map grid from a scene file and checking it."""

from __future__ import annotations

import re
from typing import List, Sequence

from .chars import is_whitespace
from .scene import SceneError

__all__ = [
    "HEADER_LINES",
    "check_map_format",
    "copy_map",
    "get_width",
    "set_map_rectangle",
    "get_map_grid",
    "check_map_content",
    "horizontal_walls",
    "vertical_walls",
]

HEADER_LINES = 6
WALL = "1"
PLAYER_STARTS = frozenset("NSEW")
_ROW_PATTERN = re.compile(r"[ \t\n\v\f\r]*[10NEWS ]*")


def check_map_format(lines: Sequence[str]) -> bool:
    """True when every map line after the header holds only map symbols.

    A line may start with whitespace, then hold only 1, 0, N, S, E, W and
    spaces.
    """
    return all(_ROW_PATTERN.fullmatch(line) for line in lines[HEADER_LINES:])


def copy_map(lines: Sequence[str]) -> List[str]:
    """The map lines after the header, with every whitespace turned into a wall."""
    return [
        "".join(WALL if is_whitespace(ch) else ch for ch in line)
        for line in lines[HEADER_LINES:]
    ]


def get_width(rows: Sequence[str]) -> int:
    """The length of the longest row, 0 for no rows."""
    return max((len(row) for row in rows), default=0)


def set_map_rectangle(rows: Sequence[str], width: int) -> List[str]:
    """Each row padded on the right with walls up to width."""
    return [row.ljust(width, WALL) for row in rows]


def get_map_grid(lines: Sequence[str]) -> List[str]:
    """The rectangular map grid taken from a scene's lines.

    Raises SceneError when the map holds unexpected symbols.
    """
    if not check_map_format(lines):
        raise SceneError("invalid map")
    rows = copy_map(lines)
    return set_map_rectangle(rows, get_width(rows))


def check_map_content(rows: Sequence[str]) -> bool:
    """True when the grid holds exactly one player start."""
    return sum(ch in PLAYER_STARTS for row in rows for ch in row) == 1


def horizontal_walls(rows: Sequence[str]) -> bool:
    """True when the first and last rows are walls along the first row's width."""
    if not rows or not rows[0]:
        return False
    width = len(rows[0])
    return rows[0] == WALL * width and rows[-1][:width] == WALL * width


def vertical_walls(rows: Sequence[str]) -> bool:
    """True when every row is non-empty and starts and ends with a wall."""
    if not rows:
        return False
    return all(row and row[0] == WALL and row[-1] == WALL for row in rows)