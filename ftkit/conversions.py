"""Conversions between text and integers.

The parsers follow the behaviour of the classic C routines, results
included: they work on 32-bit signed integers and wrap around on overflow.
"""

from __future__ import annotations

__all__ = ["atoi", "atoi_base", "atoi_strict", "itoa", "itoa_base"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_UINT_MASK = 2**32 - 1

_ATOI_SPACE = frozenset(" \t\n\v\f\r")
_DECIMAL = "0123456789"


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a 32-bit signed integer, wrapping around."""
    return ((value - INT_MIN) & _UINT_MASK) + INT_MIN


def _skip_space(text: str) -> str:
    return text.lstrip("".join(_ATOI_SPACE))


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    rest = _skip_space(text)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DECIMAL:
            break
        value = value * 10 + ord(ch) - ord("0")
    return _wrap_int32(value * sign)


def atoi_base(text: str, base: str) -> int:
    """Parse a leading integer written with the digits of *base*.

    Whitespace is skipped, then any run of signs, each '-' flipping the sign.
    Parsing stops at a newline or at a character that is not a digit of *base*.
    """
    rest = _skip_space(text)
    sign = 1
    stripped = rest.lstrip("+-")
    sign = -1 if rest[: len(rest) - len(stripped)].count("-") % 2 else 1
    radix = len(base)
    value = 0
    for ch in stripped:
        if ch == "\n":
            break
        digit = base.find(ch)
        if digit < 0:
            break
        value = value * radix + digit
    return _wrap_int32(sign * value)


def atoi_strict(text: str) -> int:
    """Parse *text* as a whole 32-bit decimal integer.

    Only an optional leading '-' and digits are accepted; anything else, an
    empty number or a value outside the 32-bit range raises ValueError.
    """
    digits = text[1:] if text.startswith("-") else text
    sign = -1 if digits is not text else 1
    if not digits:
        raise ValueError(f"no digits in {text!r}")
    if any(ch not in _DECIMAL for ch in digits):
        raise ValueError(f"invalid integer {text!r}")
    value = sign * int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer {text!r} is out of the 32-bit range")
    return value


def itoa(n: int) -> str:
    """Decimal representation of *n*."""
    return str(n)


def itoa_base(k: int, base: str) -> str:
    """Represent *k* as an unsigned 32-bit integer with the digits of *base*.

    Negative values are taken modulo 2**32, as an unsigned int would be.
    """
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two digits")
    k &= _UINT_MASK
    digits = []
    while True:
        k, digit = divmod(k, radix)
        digits.append(base[digit])
        if not k:
            break
    return "".join(reversed(digits))