"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 42


def _newline_index(data: AnyStr) -> int:
    """Position of the first newline in data, or -1 if there is none."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return data.find(newline)


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the final line is returned without
    one if the stream does not end with a newline. The stream is read in
    chunks of buffer_size.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream has nothing more."""
        pending = self._pending
        while pending is None or _newline_index(pending) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = pending
            return None
        end = _newline_index(pending)
        if end < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[end + 1:]
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line