"""A string builder that accumulates text in fixed-size chunks."""

from __future__ import annotations

__all__ = ["StringBuilder", "CHUNK_SIZE"]

CHUNK_SIZE = 128


class StringBuilder:
    """Collects text piece by piece and joins it on demand.

    Text is held in chunks of at most CHUNK_SIZE characters; a new chunk is
    started only when more text arrives after the last one is full.
    """

    def __init__(self) -> None:
        self._chunks: list[str] = [""]

    def _append(self, text: str) -> None:
        while text:
            room = CHUNK_SIZE - len(self._chunks[-1])
            if room == 0:
                self._chunks.append("")
                continue
            self._chunks[-1] += text[:room]
            text = text[room:]

    def add_char(self, c: str) -> None:
        """Append a single character."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError("add_char expects exactly one character")
        self._append(c)

    def add_str(self, text: str | None, length: int | None = None) -> bool:
        """Append the first *length* characters of *text* (all when None).

        Returns False, adding nothing, for a missing or empty text or a
        negative length.
        """
        if not text:
            return False
        if length is None:
            length = len(text)
        if length < 0:
            return False
        if length > len(text):
            raise ValueError(f"length {length} exceeds text length {len(text)}")
        self._append(text[:length])
        return True

    def set_chars(self, c: str, length: int) -> bool:
        """Append *c* repeated *length* times.

        Returns False, adding nothing, for a NUL or empty character or a
        negative length.
        """
        if not c or c == "\0" or length < 0:
            return False
        if len(c) != 1:
            raise ValueError("set_chars expects exactly one character")
        self._append(c * length)
        return True

    def build(self) -> str:
        """Return all the text collected so far."""
        return "".join(self._chunks)

    def chunk_count(self) -> int:
        """Number of chunks in use."""
        return len(self._chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def __str__(self) -> str:
        return self.build()