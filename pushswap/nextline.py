"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream, newline included.

    The stream is read ``buffer_size`` units at a time. Data past the last
    returned line is kept for the next call. At the end of the stream a final
    line without a newline is returned, then ``None``; later calls read the
    stream again, so data appended afterwards is still seen.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """The next line, ending in a newline unless it is the last; ``None`` at the end."""
        pending = self._pending
        while True:
            if pending is not None:
                index = pending.find(self._newline(pending))
                if index >= 0:
                    self._pending = pending[index + 1 :]
                    return pending[: index + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending if pending else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line