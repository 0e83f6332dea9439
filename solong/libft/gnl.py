"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line of a stream that
    does not end with a newline is returned without one. Once the stream
    is exhausted, :meth:`next_line` returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None
        self._eof = False

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or the stream ends."""
        while not self._eof:
            if self._pending is not None and self._newline in self._pending:
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._pending = chunk if self._pending is None else self._pending + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left to read."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline)
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[:index + 1], pending[index + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line