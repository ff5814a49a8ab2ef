"""MD5 message digest computed in pure Python."""

from __future__ import annotations

import struct
from collections.abc import Callable, Sequence

from softhash.bits import rol32
from softhash.hexfmt import to_hex8_reverse_bytes

_MASK32 = 0xFFFFFFFF

INITIAL_STATE: tuple[int, int, int, int] = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = ((7, 12, 17, 22), (5, 9, 14, 20), (4, 11, 16, 23), (6, 10, 15, 21))


def f(x: int, y: int, z: int) -> int:
    """Round 1 function: bits of ``y`` where ``x`` is set, else bits of ``z``."""
    return ((x & y) | (~x & z)) & _MASK32


def g(x: int, y: int, z: int) -> int:
    """Round 2 function: bits of ``x`` where ``z`` is set, else bits of ``y``."""
    return ((x & z) | (y & ~z)) & _MASK32


def h(x: int, y: int, z: int) -> int:
    """Round 3 function: bitwise parity of the three words."""
    return (x ^ y ^ z) & _MASK32


def i(x: int, y: int, z: int) -> int:
    """Round 4 function: ``y`` xor (``x`` or not ``z``)."""
    return (y ^ (x | (~z & _MASK32))) & _MASK32


_ROUNDS: tuple[tuple[Callable[[int, int, int], int], Callable[[int], int]], ...] = (
    (f, lambda j: j),
    (g, lambda j: (1 + 5 * j) % 16),
    (h, lambda j: (5 + 3 * j) % 16),
    (i, lambda j: (7 * j) % 16),
)


def md5_compress(
    state: Sequence[int], words: Sequence[int]
) -> tuple[int, int, int, int]:
    """Apply the MD5 compression to one block of sixteen 32-bit little-endian words."""
    if len(state) != 4:
        raise ValueError(f"MD5 state needs 4 words, got {len(state)}")
    if len(words) != 16:
        raise ValueError(f"MD5 block needs 16 words, got {len(words)}")

    a, b, c, d = (value & _MASK32 for value in state)
    for step in range(64):
        round_no, j = divmod(step, 16)
        mix, index = _ROUNDS[round_no]
        shift = _SHIFTS[round_no][j % 4]
        total = (a + mix(b, c, d) + (words[index(j)] & _MASK32) + _K[step]) & _MASK32
        a, d, c, b = d, c, b, (b + rol32(total, shift)) & _MASK32

    return tuple(  # type: ignore[return-value]
        (old + new) & _MASK32 for old, new in zip(state, (a, b, c, d))
    )


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"cannot hash object of type {type(data).__name__}")


def _padded(message: bytes) -> bytes:
    bit_length = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    zeros = (55 - len(message)) % 64
    return message + b"\x80" + b"\x00" * zeros + bit_length.to_bytes(8, "little")


def md5_hash(data: bytes | bytearray | memoryview | str) -> str:
    """Return the MD5 digest of ``data`` as 32 lower-case hex digits."""
    padded = _padded(_as_bytes(data))
    state: tuple[int, int, int, int] = INITIAL_STATE
    for offset in range(0, len(padded), 64):
        words = struct.unpack("<16I", padded[offset : offset + 64])
        state = md5_compress(state, words)
    return "".join(to_hex8_reverse_bytes(word) for word in state)