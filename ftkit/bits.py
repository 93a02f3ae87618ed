"""Reading and writing single bits of an integer.

Integers are immutable, so the setters return the updated value.
"""

from __future__ import annotations

__all__ = ["bit_get", "bit_set", "bit_invert"]


def _check_bit(bit: int) -> None:
    if bit < 0:
        raise ValueError(f"bit index must be non-negative, got {bit}")


def bit_get(value: int, bit: int) -> int:
    """Return bit number *bit* of *value* as 0 or 1."""
    _check_bit(bit)
    return (value >> bit) & 1


def bit_set(value: int, bit: int, flag: int) -> int:
    """Return *value* with bit *bit* set to the parity of *flag*."""
    _check_bit(bit)
    return (value & ~(1 << bit)) | ((flag & 1) << bit)


def bit_invert(value: int, bit: int) -> int:
    """Return *value* with bit *bit* flipped."""
    return bit_set(value, bit, 0 if bit_get(value, bit) else 1)