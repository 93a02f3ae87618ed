"""String helpers: splitting, searching, trimming, joining and comparing.

Searches that can fail return -1 when nothing is found, as ``str.find`` does.
"""

from __future__ import annotations

from itertools import groupby, zip_longest
from typing import Callable, Iterable

__all__ = [
    "split",
    "split_by",
    "find_if",
    "index_of",
    "trim",
    "substr",
    "join",
    "join_all",
    "ncompare",
    "find_in",
    "find_char",
    "rfind_char",
    "replace_char",
    "map_indexed",
]


def _single(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be exactly one character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must be non-negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    _single(sep, "separator")
    return [word for word in text.split(sep) if word]


def split_by(text: str, predicate: Callable[[str], object]) -> list[str]:
    """Split *text* into the runs of characters for which *predicate* is false."""
    return [
        "".join(run)
        for is_sep, run in groupby(text, key=lambda ch: bool(predicate(ch)))
        if not is_sep
    ]


def find_if(text: str, predicate: Callable[[str], object], inverted: bool = False) -> int:
    """Index of the first character where ``bool(predicate(ch)) != inverted``.

    Returns -1 when no character qualifies.
    """
    target = not inverted
    return next(
        (index for index, ch in enumerate(text) if bool(predicate(ch)) == target),
        -1,
    )


def index_of(text: str, c: str) -> int:
    """Index of the first occurrence of the character *c*, or -1."""
    return text.find(_single(c, "character"))


def trim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Up to *length* characters of *text* beginning at *start*.

    A start past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def join_all(parts: Iterable[str], sep: str) -> str:
    """Join *parts* with *sep* between each pair.

    Raises ValueError when there are no parts or no separator.
    """
    items = list(parts)
    if not items:
        raise ValueError("join_all needs at least one part")
    if sep is None:
        raise ValueError("join_all needs a separator")
    return sep.join(items)


def ncompare(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first differing code points, a shorter
    string comparing as if followed by a NUL; 0 when they match.
    """
    if n < 1:
        return 0
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_in(big: str, little: str, length: int) -> int:
    """Index of *little* within the first *length* characters of *big*, or -1.

    An empty *little* is found at index 0.
    """
    _non_negative(length, "length")
    return big.find(little, 0, length)


def find_char(text: str, c: str) -> int:
    """Index of the first *c* in *text*, or -1.

    A NUL character is found at the end of the text.
    """
    if _single(c, "character") == "\0":
        return len(text)
    return text.find(c)


def rfind_char(text: str, c: str) -> int:
    """Index of the last *c* in *text*, or -1.

    A NUL character is found at the end of the text.
    """
    if _single(c, "character") == "\0":
        return len(text)
    return text.rfind(c)


def replace_char(text: str, old: str, new: str) -> tuple[str, int]:
    """Replace every *old* character with *new*.

    Returns the new text and the number of replacements made.
    """
    _single(old, "character to replace")
    _single(new, "replacement character")
    return text.replace(old, new), text.count(old)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, ch)`` for each character of *text*."""
    return "".join(func(index, ch) for index, ch in enumerate(text))