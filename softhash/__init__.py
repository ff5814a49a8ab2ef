"""Pure-software MD5, SHA-224, SHA-256, SHA-384 and SHA-512 hash functions."""

__version__ = "0.1.0"