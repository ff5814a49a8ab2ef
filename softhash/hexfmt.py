"""Hexadecimal rendering of words and bytes, and plain-text dumps of word arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_HEX_DIGITS = "0123456789abcdef"
_TITLE_RULE = "=" * 31


def to_hex_digit(c: int) -> str:
    """Return the lower-case hex digit for the low nibble of ``c``."""
    return _HEX_DIGITS[c & 0x0F]


def _render(d: int, digits: int, limit: int) -> str:
    digits = max(1, min(digits, limit))
    value = d & ((1 << (4 * digits)) - 1)
    return "".join(
        to_hex_digit(value >> shift) for shift in range(4 * (digits - 1), -1, -4)
    )


def to_hex(d: int, digits: int) -> str:
    """Render the low ``digits`` nibbles of a 32-bit value (1 to 8 digits)."""
    return _render(d, digits, 8)


def to_hex64(d: int, digits: int) -> str:
    """Render the low ``digits`` nibbles of a 64-bit value (1 to 16 digits)."""
    return _render(d, digits, 16)


def to_hex2(d: int) -> str:
    """Render a byte as two hex digits."""
    return to_hex(d & 0xFF, 2)


def to_hex4(d: int) -> str:
    """Render a 16-bit value as four hex digits."""
    return to_hex(d, 4)


def to_hex8(d: int) -> str:
    """Render a 32-bit word as eight hex digits."""
    return to_hex(d, 8)


def to_hex16(d: int) -> str:
    """Render a 64-bit word as sixteen hex digits."""
    return to_hex64(d, 16)


def to_hex8_reverse(d: int) -> str:
    """Render a 32-bit word as eight hex digits in reverse digit order."""
    return to_hex8(d)[::-1]


def to_hex8_reverse_bytes(d: int) -> str:
    """Render a 32-bit word as eight hex digits with its bytes in little-endian order."""
    text = to_hex8(d)
    return "".join(text[pos : pos + 2] for pos in (6, 4, 2, 0))


def _layout(cells: Iterable[str], cols: int) -> str:
    cols = max(1, cols)
    parts: list[str] = []
    for count, cell in enumerate(cells, start=1):
        parts.append(cell)
        if count % cols == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def format_words(
    values: Sequence[int], cols: int = 16, as_hex: bool = True, hex_digits: int = 8
) -> str:
    """Lay out words in rows of ``cols``, as hex (2, 4 or 8 digits) or decimal."""
    if as_hex:
        render = {2: to_hex2, 4: to_hex4}.get(hex_digits, to_hex8)
        cells = (render(value) + " " for value in values)
    else:
        cells = (f"{value} " for value in values)
    return _layout(cells, cols)


def format_titled_words(
    title: str,
    values: Sequence[int],
    cols: int = 16,
    as_hex: bool = True,
    hex_digits: int = 8,
) -> str:
    """Like :func:`format_words`, preceded by a title and an underline rule."""
    return f"{title}\n{_TITLE_RULE}\n" + format_words(values, cols, as_hex, hex_digits)


def format_bytes(values: Iterable[int], cols: int = 16, as_hex: bool = True) -> str:
    """Lay out bytes in rows of ``cols``; hex cells run together, decimal ones are spaced."""
    if as_hex:
        cells = (to_hex2(value) for value in values)
    else:
        cells = (f"{value & 0xFF} " for value in values)
    return _layout(cells, cols)