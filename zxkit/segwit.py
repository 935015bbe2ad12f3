"""Bech32 / Bech32m strings and SegWit addresses."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

__all__ = [
    "Encoding",
    "Bech32Error",
    "BECH32_CONST",
    "BECH32M_CONST",
    "polymod_step",
    "convert_bits",
    "bech32_encode",
    "bech32_decode",
    "segwit_addr_encode",
    "segwit_addr_decode",
]

BECH32_CONST = 1
BECH32M_CONST = 0x2BC830A3

_MAX_LENGTH = 90
_CHECKSUM_LENGTH = 6
_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_REV = {
    **{ch: value for value, ch in enumerate(_CHARSET)},
    **{ch.upper(): value for value, ch in enumerate(_CHARSET)},
}
_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class Encoding(IntEnum):
    """Checksum variant of a Bech32 string."""

    NONE = 0
    BECH32 = 1
    BECH32M = 2


class Bech32Error(ValueError):
    """Raised when a Bech32 string or SegWit address cannot be built or read."""


def _final_constant(encoding: Encoding) -> int:
    if encoding == Encoding.BECH32:
        return BECH32_CONST
    if encoding == Encoding.BECH32M:
        return BECH32M_CONST
    return 0


def polymod_step(pre: int) -> int:
    """Advance the Bech32 checksum state by one step."""
    pre &= 0xFFFFFFFF
    top = pre >> 25
    chk = (pre & 0x1FFFFFF) << 5
    for bit, generator in enumerate(_GENERATORS):
        if (top >> bit) & 1:
            chk ^= generator
    return chk


def convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    """Regroup a sequence of ``from_bits``-wide values into ``to_bits``-wide ones.

    Without padding, raises Bech32Error when leftover bits are non-zero or
    form a whole input group.
    """
    acc = 0
    bits = 0
    maxv = (1 << to_bits) - 1
    out: list[int] = []
    for value in data:
        acc = ((acc << from_bits) | value) & 0xFFFFFFFF
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif ((acc << (to_bits - bits)) & maxv) or bits >= from_bits:
        raise Bech32Error("invalid padding in bit conversion")
    return out


def bech32_encode(hrp: str, data: Iterable[int], encoding: Encoding = Encoding.BECH32) -> str:
    """Build a Bech32 or Bech32m string from a human readable part and 5-bit values."""
    chk = 1
    for ch in hrp:
        code = ord(ch)
        if code < 33 or code > 126:
            raise Bech32Error(f"invalid character in human readable part: {ch!r}")
        if "A" <= ch <= "Z":
            raise Bech32Error("human readable part must be lower case")
        chk = polymod_step(chk) ^ (code >> 5)
    values = list(data)
    if len(hrp) + 7 + len(values) > _MAX_LENGTH:
        raise Bech32Error("encoded string would be too long")
    chk = polymod_step(chk)
    for ch in hrp:
        chk = polymod_step(chk) ^ (ord(ch) & 0x1F)
    parts = [hrp, "1"]
    for value in values:
        if value < 0 or value >> 5:
            raise Bech32Error(f"data value out of 5-bit range: {value}")
        chk = polymod_step(chk) ^ value
        parts.append(_CHARSET[value])
    for _ in range(_CHECKSUM_LENGTH):
        chk = polymod_step(chk)
    chk ^= _final_constant(encoding)
    parts.extend(_CHARSET[(chk >> ((5 - i) * 5)) & 0x1F] for i in range(_CHECKSUM_LENGTH))
    return "".join(parts)


def bech32_decode(text: str) -> tuple[str, list[int], Encoding]:
    """Decode a Bech32 or Bech32m string.

    Returns the lower-case human readable part, the 5-bit data values without
    the checksum, and the encoding whose checksum matched.
    """
    length = len(text)
    if length < 8 or length > _MAX_LENGTH:
        raise Bech32Error("invalid length")
    separator = text.rfind("1")
    if separator < 1:
        raise Bech32Error("missing separator or empty human readable part")
    if length - separator - 1 < _CHECKSUM_LENGTH:
        raise Bech32Error("data part too short")

    have_lower = have_upper = False
    chk = 1
    hrp_chars: list[str] = []
    for ch in text[:separator]:
        code = ord(ch)
        if code < 33 or code > 126:
            raise Bech32Error(f"invalid character in human readable part: {ch!r}")
        if "a" <= ch <= "z":
            have_lower = True
        elif "A" <= ch <= "Z":
            have_upper = True
            ch = ch.lower()
            code = ord(ch)
        hrp_chars.append(ch)
        chk = polymod_step(chk) ^ (code >> 5)
    chk = polymod_step(chk)
    for ch in text[:separator]:
        chk = polymod_step(chk) ^ (ord(ch) & 0x1F)

    values: list[int] = []
    for ch in text[separator + 1:]:
        if "a" <= ch <= "z":
            have_lower = True
        elif "A" <= ch <= "Z":
            have_upper = True
        value = _CHARSET_REV.get(ch)
        if value is None:
            raise Bech32Error(f"invalid data character: {ch!r}")
        chk = polymod_step(chk) ^ value
        values.append(value)

    if have_lower and have_upper:
        raise Bech32Error("mixed case string")
    if chk == BECH32_CONST:
        encoding = Encoding.BECH32
    elif chk == BECH32M_CONST:
        encoding = Encoding.BECH32M
    else:
        raise Bech32Error("checksum mismatch")
    return "".join(hrp_chars), values[:-_CHECKSUM_LENGTH], encoding


def segwit_addr_encode(hrp: str, version: int, program: bytes) -> str:
    """Encode a witness version and program as a SegWit address."""
    if version < 0 or version > 16:
        raise Bech32Error(f"invalid witness version: {version}")
    if version == 0 and len(program) not in (20, 32):
        raise Bech32Error("version 0 program must be 20 or 32 bytes")
    if not 2 <= len(program) <= 40:
        raise Bech32Error("witness program must be 2 to 40 bytes")
    encoding = Encoding.BECH32M if version > 0 else Encoding.BECH32
    data = [version, *convert_bits(program, 8, 5, True)]
    return bech32_encode(hrp, data, encoding)


def segwit_addr_decode(hrp: str, address: str) -> tuple[int, bytes]:
    """Decode a SegWit address expected to carry ``hrp``.

    Returns the witness version and the witness program.
    """
    hrp_actual, data, encoding = bech32_decode(address)
    if not data or len(data) > 65:
        raise Bech32Error("invalid data length")
    if hrp != hrp_actual:
        raise Bech32Error(f"unexpected human readable part: {hrp_actual!r}")
    version = data[0]
    if version > 16:
        raise Bech32Error(f"invalid witness version: {version}")
    if version == 0 and encoding != Encoding.BECH32:
        raise Bech32Error("version 0 address must use Bech32")
    if version > 0 and encoding != Encoding.BECH32M:
        raise Bech32Error("version 1+ address must use Bech32m")
    program = bytes(convert_bits(data[1:], 5, 8, False))
    if not 2 <= len(program) <= 40:
        raise Bech32Error("witness program must be 2 to 40 bytes")
    if version == 0 and len(program) not in (20, 32):
        raise Bech32Error("version 0 program must be 20 or 32 bytes")
    return version, program