"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, List, Optional, Union

DEFAULT_BUFFER_SIZE = 1

Chunk = Union[str, bytes]


def _newline(chunk: Chunk) -> Chunk:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


def _nul(chunk: Chunk) -> Chunk:
    return b"\0" if isinstance(chunk, (bytes, bytearray)) else "\0"


class LineReader:
    """Return successive lines of ``stream``, each ending in its newline.

    The stream is read ``buffer_size`` units at a time; text after a NUL in
    a chunk read is dropped. Works with text and binary streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[Chunk] = None

    def _newline_index(self) -> int:
        if not self._buffer:
            return -1
        return self._buffer.find(_newline(self._buffer))

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, newline included, or None when nothing is left."""
        while self._newline_index() < 0:
            try:
                chunk = self._stream.read(self._size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                if not self._buffer:
                    self._buffer = None
                    return None
                break
            chunk = chunk.split(_nul(chunk), 1)[0]
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
            if not self._buffer:
                self._buffer = None
                return None
        assert self._buffer is not None
        index = self._newline_index()
        if index < 0:
            line, self._buffer = self._buffer, None
            return line
        line = self._buffer[: index + 1]
        rest = self._buffer[index + 1:]
        self._buffer = rest if rest else None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(path: str) -> List[str]:
    """Return every line of the text file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))