"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines from a text or binary stream.

    The stream only needs a ``read(size)`` method. Each line keeps its
    trailing newline; the last line may lack one.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline_index(self) -> int:
        """Position of the first newline in the pending data, or -1."""
        pending = self._pending
        if pending is None:
            return -1
        if isinstance(pending, (bytes, bytearray)):
            return pending.find(b"\n")
        return pending.find("\n")

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has no more data."""
        while self._newline_index() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        pending = self._pending
        index = self._newline_index()
        if index < 0:
            line, self._pending = pending, pending[:0]
        else:
            line, self._pending = pending[:index + 1], pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def iter_lines(stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Any]:
    """Yield every line of ``stream``, newlines included."""
    yield from LineReader(stream, buffer_size)