"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 21

Chunk = Union[str, bytes]


def _newline(chunk: Chunk) -> Chunk:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


class LineReader:
    """Hand out the lines of ``stream``, each with its trailing newline.

    The stream is read ``buffer_size`` units at a time; whatever follows
    the line just returned is kept for the next call. Text and binary
    streams are both accepted.
    """

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def _fill(self) -> Chunk:
        stash = self._stash
        while stash is None or _newline(stash) not in stash:
            chunk = self._stream.read(self._buffer_size)
            if stash is None:
                stash = chunk[:0]
            if not chunk:
                break
            stash += chunk
        return stash

    def next_line(self) -> Optional[Chunk]:
        """The next line, or None once the stream is exhausted."""
        try:
            stash = self._fill()
        except Exception:
            self._stash = None
            raise
        if not stash:
            self._stash = None
            return None
        end = stash.find(_newline(stash))
        if end == -1:
            self._stash = None
            return stash
        self._stash = stash[end + 1:]
        return stash[:end + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> list:
    """All remaining lines of ``stream``."""
    return list(LineReader(stream, buffer_size))