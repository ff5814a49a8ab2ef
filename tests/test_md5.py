import hashlib
import struct

import pytest

from softhash.hexfmt import to_hex8_reverse_bytes
from softhash.md5 import INITIAL_STATE, f, g, h, i, md5_compress, md5_hash

MASK = 0xFFFFFFFF


@pytest.mark.parametrize("length", range(0, 140))
def test_matches_reference_across_padding_boundaries(length):
    data = bytes((n * 7 + 3) & 0xFF for n in range(length))
    assert md5_hash(data) == hashlib.md5(data).hexdigest()


@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox jumps over the lazy dog." * 23,
        "abcdefghijklmnopqrstuvwxyz.,;:!@#$^&*()-+=_" * 24,
        "A" * 1010,
        "@" * 1010,
    ],
)
def test_long_messages_match_reference(text):
    assert md5_hash(text.encode()) == hashlib.md5(text.encode()).hexdigest()


def test_rfc_vectors():
    assert md5_hash(b"") == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5_hash(b"abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_str_input_is_hashed_as_utf8():
    assert md5_hash("héllo") == md5_hash("héllo".encode("utf-8"))


def test_bytearray_and_memoryview_accepted():
    data = b"some data"
    assert md5_hash(bytearray(data)) == md5_hash(memoryview(data)) == md5_hash(data)


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        md5_hash(12345)


def test_compress_single_padded_block_gives_empty_digest():
    block = b"\x80" + b"\x00" * 63
    words = struct.unpack("<16I", block)
    state = md5_compress(INITIAL_STATE, words)
    rendered = "".join(to_hex8_reverse_bytes(word) for word in state)
    assert rendered == hashlib.md5(b"").hexdigest()


def test_compress_rejects_bad_state_length():
    with pytest.raises(ValueError):
        md5_compress((1, 2, 3), [0] * 16)


def test_compress_rejects_bad_word_count():
    with pytest.raises(ValueError):
        md5_compress(INITIAL_STATE, [0] * 15)


def test_compress_outputs_stay_32_bit():
    state = md5_compress((MASK, MASK, MASK, MASK), [MASK] * 16)
    assert all(0 <= word <= MASK for word in state)
    assert len(state) == 4


def test_f_selects_by_x():
    assert f(MASK, 0x12345678, 0x9ABCDEF0) == 0x12345678
    assert f(0, 0x12345678, 0x9ABCDEF0) == 0x9ABCDEF0


def test_g_selects_by_z():
    assert g(0x12345678, 0x9ABCDEF0, MASK) == 0x12345678
    assert g(0x12345678, 0x9ABCDEF0, 0) == 0x9ABCDEF0


def test_h_is_parity():
    assert h(0xDEADBEEF, 0xDEADBEEF, 0x0BADF00D) == 0x0BADF00D
    assert h(0, 0, 0) == 0


def test_i_behaviour():
    assert i(0, 0, MASK) == 0
    assert i(0, 0x12345678, 0) == 0x12345678 ^ MASK
    assert 0 <= i(MASK, MASK, MASK) <= MASK