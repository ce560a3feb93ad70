"""Character classification and case conversion over the ASCII range.

Each function accepts either a one-character string or an integer code.
The classifiers return booleans. The converters return a value of the same
kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_whitespace",
    "to_upper",
    "to_lower",
]


def _code(c: CharLike) -> int:
    """Return the integer code of a character or code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def is_whitespace(c: CharLike) -> bool:
    """True for a space or one of the control characters 9 to 13."""
    code = _code(c)
    return code == ord(" ") or 9 <= code <= 13


def _convert(c: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map a lowercase ASCII letter to uppercase; leave anything else alone."""
    return _convert(c, ord("a"), ord("z"), -32)


def to_lower(c: CharLike) -> CharLike:
    """Map an uppercase ASCII letter to lowercase; leave anything else alone."""
    return _convert(c, ord("A"), ord("Z"), 32)