"""Base58 encoding with the Bitcoin alphabet."""

from __future__ import annotations

__all__ = [
    "Base58Error",
    "ALPHABET",
    "MAX_DECODE_INPUT",
    "MAX_ENCODE_INPUT",
    "decode_base58",
    "encode_base58",
    "encode_base58_clip",
]

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
MAX_DECODE_INPUT = 164
MAX_ENCODE_INPUT = 120

_DIGITS = {ch: value for value, ch in enumerate(ALPHABET)}


class Base58Error(ValueError):
    """Raised when data cannot be encoded or decoded as Base58."""


def decode_base58(text: str) -> bytes:
    """Decode a Base58 string; each leading '1' becomes a zero byte."""
    if len(text) > MAX_DECODE_INPUT:
        raise Base58Error(f"input longer than {MAX_DECODE_INPUT} characters")
    number = 0
    for ch in text:
        digit = _DIGITS.get(ch)
        if digit is None:
            raise Base58Error(f"invalid Base58 character: {ch!r}")
        number = number * 58 + digit
    zeros = len(text) - len(text.lstrip(ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return bytes(zeros) + body


def encode_base58(data: bytes) -> str:
    """Encode bytes as Base58; each leading zero byte becomes a '1'."""
    if len(data) > MAX_ENCODE_INPUT:
        raise Base58Error(f"input longer than {MAX_ENCODE_INPUT} bytes")
    zeros = len(data) - len(bytes(data).lstrip(b"\x00"))
    number = int.from_bytes(data, "big")
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return ALPHABET[0] * zeros + "".join(reversed(digits))


def encode_base58_clip(value: int) -> str:
    """Map a byte value onto the Base58 alphabet, modulo 58."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return ALPHABET[value % 58]