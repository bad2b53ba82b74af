"""Helpers for bit sequences and elapsed time."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["bits_to_uint", "bits_to_string", "invert_bits", "elapsed_ms"]

_UINT_MASK = 0xFFFFFFFF


def bits_to_uint(bits: Iterable) -> int:
    """Read bits most significant first as an unsigned 32-bit integer."""
    value = 0
    for bit in bits:
        value = ((value << 1) + (1 if bit else 0)) & _UINT_MASK
    return value


def bits_to_string(bits: Iterable) -> str:
    """Return the decimal text of the bits' unsigned value."""
    return str(bits_to_uint(bits))


def invert_bits(bits: Iterable) -> list[bool]:
    """Return the bits with every one of them toggled."""
    return [not bit for bit in bits]


def elapsed_ms(start: float, end: float) -> float:
    """Return the milliseconds between two times given in seconds."""
    return (end - start) * 1000.0