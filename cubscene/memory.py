"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(length: int, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > length:
        raise IndexError(
            f"{what} span [{offset}, {offset + n}) lies outside a buffer of {length} bytes"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to the low byte of value."""
    _check_count(n)
    _check_span(len(buffer), 0, n, "fill")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buffer to zero."""
    return memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy the first n bytes of src into the start of dest and return dest.

    With neither buffer given, nothing is done and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_count(n)
    _check_span(len(src), 0, n, "source")
    _check_span(len(dest), 0, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buffer from offset src to offset dest.

    Overlapping spans are handled: the result is as if the source bytes were
    first copied aside.
    """
    _check_count(n)
    _check_span(len(buffer), src, n, "source")
    _check_span(len(buffer), dest, n, "destination")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to value's low byte within
    the first n bytes, or None."""
    _check_count(n)
    _check_span(len(data), 0, n, "search")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned bytes.

    Returns the difference of the first differing pair, or 0 if equal.
    """
    _check_count(n)
    _check_span(len(a), 0, n, "first")
    _check_span(len(b), 0, n, "second")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)