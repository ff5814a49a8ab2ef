"""Bit rotations over 32-bit and 64-bit unsigned words."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _rotate_left(v: int, times: int, width: int, mask: int) -> int:
    v &= mask
    if times <= 0:
        return v
    n = times % width
    return ((v << n) | (v >> (width - n))) & mask


def _rotate_right(v: int, times: int, width: int, mask: int) -> int:
    v &= mask
    if times <= 0:
        return v
    n = times % width
    return ((v >> n) | (v << (width - n))) & mask


def rol32(v: int, times: int) -> int:
    """Rotate a 32-bit word left by ``times`` bits; non-positive counts leave it unchanged."""
    return _rotate_left(v, times, 32, _MASK32)


def ror32(v: int, times: int) -> int:
    """Rotate a 32-bit word right by ``times`` bits; non-positive counts leave it unchanged."""
    return _rotate_right(v, times, 32, _MASK32)


def rol64(v: int, times: int) -> int:
    """Rotate a 64-bit word left by ``times`` bits; non-positive counts leave it unchanged."""
    return _rotate_left(v, times, 64, _MASK64)


def ror64(v: int, times: int) -> int:
    """Rotate a 64-bit word right by ``times`` bits; non-positive counts leave it unchanged."""
    return _rotate_right(v, times, 64, _MASK64)