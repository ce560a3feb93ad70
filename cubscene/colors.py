"""Parsing of the floor and ceiling colour lines of a scene file."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .chars import is_digit, is_whitespace
from .numconv import atoi
from .scene import Color, SceneError

__all__ = ["parse_color_value", "parse_rgb", "get_colors"]

_MAX_DIGITS = 3
_MAX_COMPONENT = 255


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and is_whitespace(text[pos]):
        pos += 1
    return pos


def parse_color_value(text: str, pos: int) -> Tuple[int, int]:
    """Read one colour component from text starting at pos.

    Leading whitespace is skipped. The component is one to three digits,
    followed by the end of the text, whitespace or a comma, and lies in
    0..255. Returns the value and the position just after its digits.
    Raises SceneError when the component is malformed.
    """
    pos = _skip_whitespace(text, pos)
    start = pos
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    if not digits or len(digits) > _MAX_DIGITS:
        raise SceneError(f"invalid colour component in {text!r}")
    if pos < len(text) and not is_whitespace(text[pos]) and text[pos] != ",":
        raise SceneError(f"invalid colour component in {text!r}")
    value = atoi(digits)
    if not 0 <= value <= _MAX_COMPONENT:
        raise SceneError(f"colour component {value} is out of range")
    return value, pos


def parse_rgb(line: str) -> Color:
    """Parse a line such as 'F 220,100,0' into an (r, g, b) tuple.

    The first character is the identifier and is skipped. Raises
    SceneError when the line is not three comma-separated components.
    """
    pos = 1
    values = []
    for index in range(3):
        value, pos = parse_color_value(line, pos)
        values.append(value)
        pos = _skip_whitespace(line, pos)
        if index < 2:
            if pos >= len(line) or line[pos] != ",":
                raise SceneError(f"expected ',' in colour line {line!r}")
            pos += 1
    if _skip_whitespace(line, pos) != len(line):
        raise SceneError(f"trailing text in colour line {line!r}")
    return values[0], values[1], values[2]


def get_colors(lines: Iterable[str]) -> Tuple[Optional[Color], Optional[Color]]:
    """Return the floor and ceiling colours found in lines.

    A line starting with 'F' gives the floor, one starting with 'C' the
    ceiling; a later line overrides an earlier one. A colour that is
    absent is None. Raises SceneError for a malformed colour line.
    """
    floor: Optional[Color] = None
    ceiling: Optional[Color] = None
    for line in lines:
        if len(line) <= 1:
            continue
        if line[0] == "F":
            floor = parse_rgb(line)
        elif line[0] == "C":
            ceiling = parse_rgb(line)
    return floor, ceiling