"""Line-by-line reading of a stream, one newline-terminated line at a time."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator

BUFFER_SIZE = 10_000_000


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in chunks.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], chunk_size: int = BUFFER_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stream = stream
        self._chunk_size = chunk_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        pending = self._pending
        searched = 0
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline, searched)
                if index != -1:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
                searched = len(pending)
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending if pending else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream)