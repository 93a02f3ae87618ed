"""Reading streams line by line and reading whole files."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Generic, Iterator, Optional, Union

__all__ = ["LineReader", "read_file", "BUFFER_SIZE"]

BUFFER_SIZE = 64


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. A read that returns fewer than *buffer_size* items ends the
    gathering for the current call, so a short read yields what was read
    even without a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._nl: Optional[AnyStr] = None

    def _fill(self) -> None:
        while True:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            if self._nl is None:
                self._nl = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[assignment]
            self._pending = chunk if self._pending is None else self._pending + chunk
            if len(chunk) < self._buffer_size:
                return
            if self._nl in self._pending:
                return

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        if self._pending is None or self._nl not in self._pending:
            self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._nl)
        if end < 0:
            self._pending = None
            return pending
        line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_file(path: Union[str, os.PathLike], buffer_size: int = 4096) -> bytes:
    """Read the file at *path* in chunks and return its bytes.

    The final byte of the file, normally its trailing newline, is dropped.
    Raises OSError when the file cannot be opened.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    parts = []
    with open(path, "rb") as handle:
        while chunk := handle.read(buffer_size):
            parts.append(chunk)
    return b"".join(parts)[:-1]