"""Hexadecimal and binary dumps of byte strings.

Each function returns the dump as text, one line per *bytes_per_line* bytes.
A hex line shows the bytes in hexadecimal, then ``|``, the printable
characters (``.`` for the rest), then ``|``. A binary line shows each byte as
two groups of four bits, then ``|``, the bytes in hexadecimal, then ``|``.
Short final lines are padded with spaces to full width.
"""

from __future__ import annotations

from typing import Iterator

__all__ = ["hexdump", "bindump"]


def _chunks(data: bytes, size: int) -> Iterator[bytes]:
    if size <= 0:
        raise ValueError(f"bytes_per_line must be positive, got {size}")
    return (data[start : start + size] for start in range(0, len(data), size))


def _printable(byte: int) -> str:
    return chr(byte) if 31 < byte < 127 else "."


def _hex_line(chunk: bytes, width: int) -> str:
    cells = [f"{byte:02X}" for byte in chunk] + ["  "] * (width - len(chunk))
    text = "".join(_printable(byte) for byte in chunk).ljust(width)
    return f"{' '.join(cells)}|{text}|\n"


def _bin_line(chunk: bytes, width: int) -> str:
    cells = [f"{byte >> 4:04b} {byte & 0xF:04b}" for byte in chunk]
    cells += [" " * 9] * (width - len(chunk))
    hex_part = "".join(f"{byte:02X}" for byte in chunk).ljust(2 * width)
    return f"{'  '.join(cells)} |{hex_part}|\n"


def hexdump(data: bytes, bytes_per_line: int = 16) -> str:
    """Hexadecimal dump of *data*."""
    raw = bytes(data)
    return "".join(_hex_line(chunk, bytes_per_line) for chunk in _chunks(raw, bytes_per_line))


def bindump(data: bytes, bytes_per_line: int = 16) -> str:
    """Binary dump of *data*, most significant bit first."""
    raw = bytes(data)
    return "".join(_bin_line(chunk, bytes_per_line) for chunk in _chunks(raw, bytes_per_line))