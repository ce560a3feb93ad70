"""String measuring, searching, comparing and copying helpers.

Positions are returned as integer offsets into the string, and "not found" is
None. Characters are compared by their code points.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strcmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strncpy",
    "strdup",
    "strjoin",
    "substr",
]

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return c as a one-character string; integer codes keep their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_count(n: int, what: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def _code_at(s: str, i: int) -> int:
    """Code point at i, or 0 past the end of the string."""
    return ord(s[i]) if i < len(s) else 0


def strlen(s: Optional[str]) -> int:
    """Length of s; a missing string has length 0."""
    return 0 if s is None else len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the code difference of the first differing pair, or 0.
    The end of a string compares as code 0.
    """
    _check_count(n)
    limit = min(n, max(len(s1), len(s2)))
    for i in range(limit):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b:
            return a - b
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare s1 and s2 in full; the code difference at the first mismatch, or 0."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Offset of little inside the first length characters of big, or None.

    An empty needle is found at offset 0.
    """
    _check_count(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src, which tells whether
    the copy was truncated.
    """
    _check_count(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters including the terminator.

    Returns the resulting text and the length the full result would have had.
    If the buffer is no larger than dest, dest is returned unchanged and the
    length reported is size plus the length of src.
    """
    _check_count(size, "size")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strncpy(src: str, n: int) -> str:
    """Exactly n characters: src truncated to n, padded with NUL characters."""
    _check_count(n)
    return src[:n].ljust(n, "\0")


def strdup(s: str) -> str:
    """A copy of s."""
    return "".join(s)


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return f"{s1}{s2}"


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of s starting at start.

    A start past the end gives an empty string; a missing string gives None.
    """
    if s is None:
        return None
    _check_count(start, "start")
    _check_count(length, "length")
    start = min(start, len(s))
    return s[start:start + length]