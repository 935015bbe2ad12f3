"""Arbitrary-size binary numbers to packed BCD and decimal text.

``little_endian_to_bcd`` reads little-endian bytes and yields BCD with the
most significant digits first; ``format_bcd_little_endian`` prints that form.
``big_endian_to_bcd`` reads big-endian bytes and yields BCD with the least
significant digits first; ``format_bcd_big_endian`` prints that form.
"""

from __future__ import annotations

__all__ = [
    "BcdFormatError",
    "little_endian_to_bcd",
    "big_endian_to_bcd",
    "format_bcd_little_endian",
    "format_bcd_big_endian",
]

_MIN_OUTPUT = 4


class BcdFormatError(ValueError):
    """Raised when BCD digits do not fit the requested output size."""


def _to_bcd_msd_first(number: int, bcd_len: int) -> bytes:
    """Pack ``number`` into ``bcd_len`` BCD bytes, most significant first.

    Digits that do not fit are dropped from the top.
    """
    if bcd_len < 0:
        raise ValueError(f"BCD length must not be negative: {bcd_len}")
    if bcd_len == 0:
        return b""
    digits = 2 * bcd_len
    return bytes.fromhex(f"{number % 10 ** digits:0{digits}d}")


def little_endian_to_bcd(value: bytes, bcd_len: int) -> bytes:
    """Convert a little-endian number to ``bcd_len`` BCD bytes, most significant first."""
    return _to_bcd_msd_first(int.from_bytes(value, "little"), bcd_len)


def big_endian_to_bcd(value: bytes, bcd_len: int) -> bytes:
    """Convert a big-endian number to ``bcd_len`` BCD bytes, least significant first."""
    return _to_bcd_msd_first(int.from_bytes(value, "big"), bcd_len)[::-1]


def _format(bcd_msd_first: bytes, out_len: int | None) -> str:
    if out_len is not None:
        if out_len < _MIN_OUTPUT:
            raise BcdFormatError(f"output size {out_len} is too small")
        if 2 * len(bcd_msd_first) > out_len:
            raise BcdFormatError("BCD value does not fit the output size")
    return bcd_msd_first.hex().upper().lstrip("0") or "0"


def format_bcd_little_endian(bcd: bytes, out_len: int | None = None) -> str:
    """Print BCD bytes stored most significant first, without leading zeros."""
    return _format(bytes(bcd), out_len)


def format_bcd_big_endian(bcd: bytes, out_len: int | None = None) -> str:
    """Print BCD bytes stored least significant first, without leading zeros."""
    return _format(bytes(bcd)[::-1], out_len)