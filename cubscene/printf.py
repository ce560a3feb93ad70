"""A small printf-style formatter.

It supports the conversions %c, %s, %d, %i, %u, %x, %X, %p and %%.
There are no flags, widths or precisions. Integer conversions treat their
argument the way a 32-bit int does. Pointers are shown in 64-bit hex.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict

from .numconv import itoa

__all__ = ["sprintf", "printf"]

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _conv_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _conv_signed(value: Any) -> str:
    return itoa(_signed32(_as_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT32_MASK)


def _conv_hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _UINT32_MASK, "x")


def _conv_hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _UINT32_MASK, "X")


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & _UINT64_MASK
    else:
        address = id(value) & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
    "p": _conv_pointer,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with each conversion replaced by the next argument.

    Raises ValueError for an unknown conversion or a lone trailing '%'.
    Raises TypeError for a missing format or too few arguments.
    Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("a format string is required")
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise ValueError(f"unknown conversion '%{spec}'")
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for '%{spec}'") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)