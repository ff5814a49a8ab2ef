# softhash

Hash functions written out step by step in plain Python: MD5, SHA-224,
SHA-256, SHA-384 and SHA-512, together with the small helpers they are
built from (bit rotations and hexadecimal formatting).

The code favours readability over speed. Each algorithm follows its
specification block by block: padding, message schedule, compression,
final digest. That makes it useful for studying the algorithms and for
checking intermediate values by hand.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing from Python

Every hash function takes `bytes`, `bytearray`, `memoryview` or `str`
(strings are encoded as UTF-8) and returns the digest as a lower-case
hexadecimal string. Any other type raises `TypeError`.

```python
from softhash.md5 import md5_hash
from softhash.sha256 import sha224_hash, sha256_hash
from softhash.sha512 import sha384_hash, sha512_hash

md5_hash(b"abc")
# '900150983cd24fb0d6963f7d28e17f72'

sha256_hash(b"abc")
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
```

Digest lengths: MD5 32 hex digits, SHA-224 56, SHA-256 64, SHA-384 96,
SHA-512 128.

## Building blocks

The pieces each digest is made of are public, for anyone who wants to
follow a computation through:

- `softhash.sha256`: `pad_message`, `expand_schedule` (one 64-byte block
  to 64 words) and `compress` (64 rounds over an 8-word state), plus the
  constants `SHA256_INITIAL_STATE` and `SHA224_INITIAL_STATE`.
- `softhash.sha512`: `pad_message`, `expand_schedule` (one 128-byte block
  to 80 words), `compress` and the round functions `ch`, `maj`, `sigma0`,
  `sigma1`, `rho0`, `rho1`, plus `SHA512_INITIAL_STATE` and
  `SHA384_INITIAL_STATE`.
- `softhash.md5`: `md5_compress` (one block of sixteen little-endian
  words), the round functions `f`, `g`, `h`, `i` and `INITIAL_STATE`.
- `softhash.bits`: `rol32`, `ror32`, `rol64`, `ror64`. A rotation count of
  zero or less leaves the word unchanged.
- `softhash.hexfmt`: `to_hex_digit`, `to_hex`, `to_hex64`, `to_hex2`,
  `to_hex4`, `to_hex8`, `to_hex16`, `to_hex8_reverse`,
  `to_hex8_reverse_bytes`, and the text dumps `format_words`,
  `format_titled_words` and `format_bytes`.

`compress` and `expand_schedule` raise `ValueError` when given a state,
schedule or block of the wrong size.

```python
from softhash.sha256 import SHA256_INITIAL_STATE, compress, expand_schedule, pad_message

block = pad_message(b"abc")          # exactly one 64-byte block
state = compress(SHA256_INITIAL_STATE, expand_schedule(block))
```

## What it does not do

The package is a library only. It has no command-line program, no
timing counter and no benchmark report that sweeps a hash over inputs of
growing length; measuring speed is left to the caller, for example with
the standard `timeit` module.