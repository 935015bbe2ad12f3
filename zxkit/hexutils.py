"""Parsing of hexadecimal strings into bytes."""

from __future__ import annotations

__all__ = ["hex_digit_value", "parse_hex_string"]

_HEX_DIGITS = "0123456789abcdef"


def hex_digit_value(char: str) -> int:
    """Return the value of a single hexadecimal digit, in either case.

    Raises ValueError when ``char`` is not a hexadecimal digit.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    index = _HEX_DIGITS.find(char.lower())
    if index < 0:
        raise ValueError(f"not a hexadecimal digit: {char!r}")
    return index


def parse_hex_string(text: str, max_len: int | None = None) -> bytes:
    """Decode ``text`` as pairs of hexadecimal digits.

    ``max_len`` bounds the number of output bytes. Raises ValueError when the
    input is too long, has an odd length or holds a non-hexadecimal character.
    """
    if max_len is not None and len(text) > 2 * max_len:
        raise ValueError(f"hex string longer than {max_len} bytes")
    if len(text) % 2:
        raise ValueError("hex string has an odd number of digits")
    pairs = zip(text[::2], text[1::2])
    return bytes((hex_digit_value(high) << 4) | hex_digit_value(low) for high, low in pairs)