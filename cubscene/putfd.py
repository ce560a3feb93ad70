"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from .numconv import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write one character to stream."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write s to stream."""
    if s is None:
        raise TypeError("putstr_fd needs a string")
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write s followed by a newline to stream."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of a 32-bit signed integer to stream."""
    putstr_fd(itoa(n), stream)