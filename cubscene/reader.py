"""Reading a scene file into a list of cleaned lines."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Union

from .scene import SceneError
from .strops import split

__all__ = ["check_extension", "delete_space", "split_lines", "read_lines"]

_EXTENSION = ".cub"
_LEADING_BLANKS = " \r"


def check_extension(path: Union[str, "os.PathLike[str]"]) -> bool:
    """True when the path ends in '.cub' with something before it."""
    name = os.fspath(path)
    return len(name) > len(_EXTENSION) and name.endswith(_EXTENSION)


def delete_space(lines: Iterable[str]) -> List[str]:
    """Each line with its leading spaces and carriage returns removed."""
    return [line.lstrip(_LEADING_BLANKS) for line in lines]


def split_lines(text: str) -> List[str]:
    """The non-empty newline-separated lines of text."""
    pieces = split(text, "\n")
    return [] if pieces is None else pieces


def read_lines(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Read a scene file and return its non-empty lines, left-trimmed.

    Raises SceneError if the file cannot be read.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SceneError(f"could not read map: {exc}") from exc
    return delete_space(split_lines(text))