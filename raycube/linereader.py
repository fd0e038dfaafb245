"""Line-at-a-time reading from a stream in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO

DEFAULT_BUFFER_SIZE = 100000


class LineReader:
    """Read lines from a text stream, pulling ``buffer_size`` characters at a time.

    Each line keeps its trailing newline; the last line of the stream is
    returned without one if the stream does not end with a newline.
    """

    def __init__(self, stream: IO[str], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def _fill(self) -> None:
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._pending += chunk

    def readline(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._pending:
            return None
        cut = self._pending.find("\n")
        end = len(self._pending) if cut < 0 else cut + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of the file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))