"""Bech32 encoding straight from bytes."""

from __future__ import annotations

from zxkit.segwit import Bech32Error, Encoding, bech32_encode, convert_bits

__all__ = ["MAX_INPUT_SIZE", "bech32_encode_from_bytes"]

MAX_INPUT_SIZE = 64


def bech32_encode_from_bytes(
    hrp: str,
    data: bytes,
    pad: bool = True,
    encoding: Encoding = Encoding.BECH32,
    out_len: int | None = None,
) -> str:
    """Regroup ``data`` into 5-bit values and encode them under ``hrp``.

    Without ``pad``, trailing bits that do not fill a 5-bit group are dropped.
    ``out_len`` is the size of the destination buffer, terminator included;
    when given it must be large enough. Raises Bech32Error on failure.
    """
    if len(data) > MAX_INPUT_SIZE:
        raise Bech32Error(f"input longer than {MAX_INPUT_SIZE} bytes")
    if out_len is not None and out_len < len(hrp) + 2 * len(data) + 7:
        raise Bech32Error("output buffer too small")
    groups = convert_bits(data, 8, 5, True)
    if not pad:
        groups = groups[: len(data) * 8 // 5]
    if out_len is not None and len(groups) >= out_len:
        raise Bech32Error("converted data does not fit the output buffer")
    return bech32_encode(hrp, groups, encoding)