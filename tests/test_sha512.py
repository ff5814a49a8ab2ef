import hashlib

import pytest

from softhash.sha512 import (
    SHA384_INITIAL_STATE,
    SHA512_INITIAL_STATE,
    ch,
    compress,
    expand_schedule,
    maj,
    pad_message,
    rho0,
    rho1,
    sha384_hash,
    sha512_hash,
    sigma0,
    sigma1,
)

ONES = 0xFFFFFFFFFFFFFFFF

FOX = "The quick brown fox jumps over the lazy dog."


@pytest.mark.parametrize(
    "message",
    [b"", b"a", b"abc", FOX.encode(), b"A" * 111, b"A" * 112, b"@" * 127,
     b"@" * 128, b"0123456789abcdef" * 40],
)
def test_sha512_matches_reference(message):
    assert sha512_hash(message) == hashlib.sha512(message).hexdigest()


@pytest.mark.parametrize(
    "message",
    [b"", b"abc", FOX.encode(), b"A" * 111, b"A" * 112, b"x" * 300],
)
def test_sha384_matches_reference(message):
    assert sha384_hash(message) == hashlib.sha384(message).hexdigest()


@pytest.mark.parametrize("length", range(100, 260, 7))
def test_sweep_over_prefix_lengths(length):
    text = (FOX * 30)[:length]
    assert sha512_hash(text) == hashlib.sha512(text.encode()).hexdigest()
    assert sha384_hash(text) == hashlib.sha384(text.encode()).hexdigest()


def test_str_is_encoded_as_utf8():
    assert sha512_hash("héllo") == sha512_hash("héllo".encode("utf-8"))


def test_digest_lengths():
    assert len(sha512_hash(b"abc")) == 128
    assert len(sha384_hash(b"abc")) == 96


def test_sha384_is_not_prefix_of_sha512():
    assert not sha512_hash(b"abc").startswith(sha384_hash(b"abc"))


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        sha512_hash(12345)


@pytest.mark.parametrize("length", [0, 1, 110, 111, 112, 127, 128, 239, 240, 500])
def test_pad_message_layout(length):
    message = b"z" * length
    padded = pad_message(message)
    assert len(padded) % 128 == 0
    assert padded[:length] == message
    assert padded[length] == 0x80
    assert padded[-16:-8] == b"\x00" * 8
    assert int.from_bytes(padded[-8:], "big") == length * 8
    assert set(padded[length + 1 : -16]) <= {0}
    assert len(padded) - length <= 128 + 16


def test_expand_schedule_keeps_block_words():
    block = bytes(range(128))
    schedule = expand_schedule(block)
    assert len(schedule) == 80
    assert schedule[0] == int.from_bytes(block[:8], "big")
    assert schedule[15] == int.from_bytes(block[120:], "big")
    assert all(0 <= word <= ONES for word in schedule)


def test_expand_schedule_of_zero_block_is_zero():
    assert expand_schedule(bytes(128)) == [0] * 80


def test_expand_schedule_rejects_wrong_size():
    with pytest.raises(ValueError):
        expand_schedule(bytes(64))


def test_compress_single_block_matches_digest():
    padded = pad_message(b"abc")
    state = compress(SHA512_INITIAL_STATE, expand_schedule(padded))
    assert "".join(f"{word:016x}" for word in state) == hashlib.sha512(b"abc").hexdigest()


def test_compress_with_384_state():
    padded = pad_message(b"abc")
    state = compress(SHA384_INITIAL_STATE, expand_schedule(padded))
    assert "".join(f"{word:016x}" for word in state[:6]) == hashlib.sha384(b"abc").hexdigest()


def test_compress_rejects_bad_state():
    with pytest.raises(ValueError):
        compress(SHA512_INITIAL_STATE[:7], [0] * 80)


def test_compress_rejects_bad_schedule():
    with pytest.raises(ValueError):
        compress(SHA512_INITIAL_STATE, [0] * 64)


def test_ch_selects_by_bits():
    x = 0x0123456789ABCDEF
    assert ch(ONES, x, 0) == x
    assert ch(0, 0, x) == x
    assert ch(x, ONES, 0) == x


def test_maj_majority():
    x, y = 0x0123456789ABCDEF, 0xFEDCBA9876543210
    assert maj(x, x, y) == x
    assert maj(y, x, y) == y
    assert maj(x, y, y) == y


def test_sigma_functions_fixed_points():
    assert sigma0(0) == 0
    assert sigma1(0) == 0
    assert sigma0(ONES) == ONES
    assert sigma1(ONES) == ONES


def test_rho_functions_on_all_ones():
    assert rho0(0) == 0
    assert rho1(0) == 0
    assert rho0(ONES) == ONES >> 7
    assert rho1(ONES) == ONES >> 6