"""SHA-256 and SHA-224 message digests computed in pure Python."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from softhash.bits import ror32
from softhash.hexfmt import to_hex8

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64
_ROUNDS = 64

SHA256_INITIAL_STATE: tuple[int, ...] = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

SHA224_INITIAL_STATE: tuple[int, ...] = (
    0xC1059ED8,
    0x367CD507,
    0x3070DD17,
    0xF70E5939,
    0xFFC00B31,
    0x68581511,
    0x64F98FA7,
    0xBEFA4FA4,
)

_K: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"cannot hash object of type {type(data).__name__}")


def pad_message(data: bytes | bytearray | memoryview | str) -> bytes:
    """Append the 0x80 marker, zero fill and the big-endian 64-bit bit length."""
    message = _as_bytes(data)
    bit_length = (len(message) * 8) & _MASK64
    zeros = (55 - len(message)) % _BLOCK_SIZE
    return message + b"\x80" + b"\x00" * zeros + bit_length.to_bytes(8, "big")


def expand_schedule(block: bytes | bytearray | memoryview) -> list[int]:
    """Turn one 64-byte block into the 64-word message schedule."""
    block = bytes(block)
    if len(block) != _BLOCK_SIZE:
        raise ValueError(f"block needs {_BLOCK_SIZE} bytes, got {len(block)}")

    w = list(struct.unpack(">16I", block))
    for t in range(16, _ROUNDS):
        x, y = w[t - 15], w[t - 2]
        s0 = ror32(x, 7) ^ ror32(x, 18) ^ (x >> 3)
        s1 = ror32(y, 17) ^ ror32(y, 19) ^ (y >> 10)
        w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK32)
    return w


def compress(state: Sequence[int], schedule: Sequence[int]) -> tuple[int, ...]:
    """Run the 64 rounds over one schedule and add the result into ``state``."""
    if len(state) != 8:
        raise ValueError(f"state needs 8 words, got {len(state)}")
    if len(schedule) != _ROUNDS:
        raise ValueError(f"schedule needs {_ROUNDS} words, got {len(schedule)}")

    a, b, c, d, e, f, g, h = (value & _MASK32 for value in state)
    for k, w in zip(_K, schedule):
        s1 = ror32(e, 6) ^ ror32(e, 11) ^ ror32(e, 25)
        ch = (e & f) ^ (~e & _MASK32 & g)
        temp1 = (h + s1 + ch + k + (w & _MASK32)) & _MASK32
        s0 = ror32(a, 2) ^ ror32(a, 13) ^ ror32(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (s0 + maj) & _MASK32

        h, g, f, e = g, f, e, (d + temp1) & _MASK32
        d, c, b, a = c, b, a, (temp1 + temp2) & _MASK32

    return tuple(
        (old + new) & _MASK32 for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


def _digest(
    data: bytes | bytearray | memoryview | str,
    initial: tuple[int, ...],
    words: int,
) -> str:
    padded = pad_message(data)
    state = initial
    for offset in range(0, len(padded), _BLOCK_SIZE):
        state = compress(state, expand_schedule(padded[offset : offset + _BLOCK_SIZE]))
    return "".join(to_hex8(word) for word in state[:words])


def sha256_hash(data: bytes | bytearray | memoryview | str) -> str:
    """Return the SHA-256 digest of ``data`` as 64 lower-case hex digits."""
    return _digest(data, SHA256_INITIAL_STATE, 8)


def sha224_hash(data: bytes | bytearray | memoryview | str) -> str:
    """Return the SHA-224 digest of ``data`` as 56 lower-case hex digits."""
    return _digest(data, SHA224_INITIAL_STATE, 7)