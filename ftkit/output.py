"""Writing characters, strings and numbers to a text stream.

Each function writes to *stream* (standard output when omitted) and returns
the number of characters written.
"""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["put_char", "put_str", "put_nbr", "put_nbr_base"]

_DECIMAL = "0123456789"
_NULL = "(null)"


def _write(text: str, stream: TextIO | None) -> int:
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def _in_base(n: int, base: str) -> str:
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two digits")
    sign = "-" if n < 0 else ""
    n = abs(n)
    digits = []
    while True:
        n, digit = divmod(n, radix)
        digits.append(base[digit])
        if not n:
            break
    return sign + "".join(reversed(digits))


def put_char(c: str, stream: TextIO | None = None) -> int:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"put_char expects exactly one character, got {c!r}")
    return _write(c, stream)


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write *text*, or ``(null)`` when it is None."""
    return _write(_NULL if text is None else text, stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write *n* in decimal."""
    return _write(_in_base(n, _DECIMAL), stream)


def put_nbr_base(n: int, base: str, stream: TextIO | None = None) -> int:
    """Write *n* using the characters of *base* as digits, '-' for negatives."""
    return _write(_in_base(n, base), stream)