"""Finding and checking the wall texture lines of a scene file."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from .chars import is_whitespace

__all__ = ["TEXTURE_IDS", "check_dup_texture", "get_texture", "check_xpm", "check_texture"]

TEXTURE_IDS = ("NO", "SO", "EA", "WE")
_XPM_SUFFIX = ".xpm"


def _identifier(line: str) -> Optional[str]:
    if len(line) > 2 and line[:2] in TEXTURE_IDS:
        return line[:2]
    return None


def check_dup_texture(lines: Iterable[str]) -> bool:
    """True when each of NO, SO, EA and WE starts exactly one line."""
    counts = Counter(ident for ident in map(_identifier, lines) if ident)
    return all(counts[ident] == 1 for ident in TEXTURE_IDS)


def get_texture(lines: Iterable[str], prefix: str) -> Optional[str]:
    """The path given on the last line starting with prefix, or None.

    Whitespace between the identifier and the path is dropped.
    """
    found: Optional[str] = None
    for line in lines:
        if len(line) > 2 and line.startswith(prefix):
            pos = len(prefix)
            while pos < len(line) and is_whitespace(line[pos]):
                pos += 1
            found = line[pos:]
    return found


def check_xpm(path: Optional[str]) -> bool:
    """True when path names an '.xpm' file.

    Trailing whitespace is ignored; a space before the first '.' makes
    the path invalid.
    """
    if path is None or len(path) < 4:
        return False
    dot = path.find(".")
    before_dot = path if dot < 0 else path[:dot]
    if " " in before_dot:
        return False
    end = len(path)
    while end > 0 and is_whitespace(path[end - 1]):
        end -= 1
    trimmed = path[:end]
    return len(trimmed) >= len(_XPM_SUFFIX) and trimmed.endswith(_XPM_SUFFIX)


def check_texture(paths: Iterable[Optional[str]]) -> bool:
    """True when every path is a valid '.xpm' path."""
    return all(check_xpm(path) for path in paths)