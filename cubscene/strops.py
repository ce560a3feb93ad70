"""Splitting, trimming and per-character mapping of strings."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

__all__ = ["split", "strtrim", "strmapi", "striteri"]


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Split s on the character sep, dropping empty pieces.

    Runs of separators, and separators at either end, yield no empty
    strings. A NUL separator gives the whole string as one piece, or no
    pieces for an empty string. A missing string gives None.
    """
    if s is None:
        return None
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    if sep == "\0":
        return [s] if s else []
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove every leading and trailing character found in charset.

    Returns None when either argument is missing.
    """
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string built from func(index, character) for each character of s."""
    if s is None:
        raise TypeError("strmapi needs a string")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Apply func(index, character) to each item of s, in place.

    When func returns a value, it replaces the character at that index;
    when it returns None, the character is left as it is.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement