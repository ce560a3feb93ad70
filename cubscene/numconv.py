"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

from .chars import is_digit, is_whitespace

__all__ = ["atoi", "itoa"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0. The result wraps
    around like a 32-bit signed integer.
    """
    chars = iter(text)
    ch = next(chars, "")
    while ch and is_whitespace(ch):
        ch = next(chars, "")
    sign = 1
    if ch in ("+", "-"):
        if ch == "-":
            sign = -1
        ch = next(chars, "")
    value = 0
    while ch and is_digit(ch):
        value = _wrap32(value * 10 + int(ch))
        ch = next(chars, "")
    return _wrap32(value * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed integer")
    return str(n)