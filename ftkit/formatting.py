"""printf-style formatting with a small set of conversions.

Supported conversions are ``%s``, ``%d``, ``%x``, ``%X``, ``%u`` and ``%c``.
Any other character after ``%`` is copied through unchanged together with
the ``%``, so ``"%%"`` stays ``"%%"``. A ``%`` at the very end of the format
is copied as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from ftkit.conversions import INT_MIN, itoa, itoa_base
from ftkit.strbuilder import StringBuilder

__all__ = ["sprintf", "fprintf", "printf"]

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_NULL = "(null)"


def _as_int32(value: int) -> int:
    return ((value - INT_MIN) & 0xFFFFFFFF) + INT_MIN


def _as_char(value: Any) -> str:
    """Text for a %c argument: an int code (taken as a byte) or one character."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        code = ord(value)
    else:
        code = int(value) & 0xFF
    return "" if code == 0 else chr(code)


def _convert(spec: str, args: Iterator[Any]) -> str:
    def next_arg() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    if spec == "s":
        value = next_arg()
        return _NULL if value is None else str(value)
    if spec == "d":
        return itoa(_as_int32(int(next_arg())))
    if spec == "x":
        return itoa_base(int(next_arg()), _LOWER_HEX)
    if spec == "X":
        return itoa_base(int(next_arg()), _UPPER_HEX)
    if spec == "u":
        return itoa_base(int(next_arg()), _DECIMAL)
    if spec == "c":
        return _as_char(next_arg())
    return "%" + spec


def sprintf(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the resulting text.

    Raises TypeError when *fmt* is None or there are too few arguments.
    Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    builder = StringBuilder()
    remaining = iter(args)
    rest = fmt
    while True:
        index = rest.find("%")
        if index < 0:
            break
        builder.add_str(rest[:index])
        spec = rest[index + 1 : index + 2]
        builder.add_str(_convert(spec, remaining))
        rest = rest[index + 2 :]
    builder.add_str(rest)
    return builder.build()


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Format like :func:`sprintf` and write to *stream*.

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Format like :func:`sprintf` and write to standard output."""
    return fprintf(sys.stdout, fmt, *args)