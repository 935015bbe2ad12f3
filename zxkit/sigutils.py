"""Conversion of DER encoded ECDSA signatures into fixed-size R, S and V."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "ConvertError",
    "DerConversionError",
    "RsvSignature",
    "ECCINFO_PARITY_ODD",
    "ECCINFO_X_GT_N",
    "convert_der_to_rsv",
]

ECCINFO_PARITY_ODD = 0x01
ECCINFO_X_GT_N = 0x02

_DER_PREFIX = 0x30
_INT_MARKER = 0x02
_MIN_PAYLOAD = 1
_PAYLOAD = 32
_MAX_PAYLOAD = 33
_MIN_TOTAL = 2 + _MIN_PAYLOAD + 2 + _MIN_PAYLOAD
_MAX_TOTAL = 2 + _MAX_PAYLOAD + 2 + _MAX_PAYLOAD


class ConvertError(IntEnum):
    """Reasons a DER signature can be rejected."""

    NO_ERROR = 0
    INVALID_DER_PREFIX = 1
    INVALID_PAYLOAD_LEN = 2
    INVALID_R_MARKER = 3
    INVALID_R_LEN = 4
    INVALID_S_MARKER = 5
    INVALID_S_LEN = 6


class DerConversionError(ValueError):
    """Raised when a DER signature is malformed; ``error`` tells which part."""

    def __init__(self, error: ConvertError) -> None:
        super().__init__(f"invalid DER signature: {error.name.lower()}")
        self.error = error


@dataclass(frozen=True)
class RsvSignature:
    """A signature as 32-byte R, 32-byte S and a recovery value V."""

    r: bytes
    s: bytes
    v: int


def _byte(data: bytes, index: int) -> int:
    return data[index] if 0 <= index < len(data) else 0


def _fit(value: bytes) -> bytes:
    """Right-align ``value`` in 32 bytes, keeping its last 32 bytes."""
    return value[-_PAYLOAD:].rjust(_PAYLOAD, b"\x00")


def convert_der_to_rsv(signature: bytes, info: int = 0) -> RsvSignature:
    """Split a DER signature into R, S and V.

    ``info`` carries the parity and overflow flags of the signing operation,
    which give V. Raises DerConversionError on a malformed signature.
    """
    sig = bytes(signature)
    if _byte(sig, 0) != _DER_PREFIX:
        raise DerConversionError(ConvertError.INVALID_DER_PREFIX)

    payload_len = _byte(sig, 1)
    if not _MIN_TOTAL <= payload_len <= _MAX_TOTAL:
        raise DerConversionError(ConvertError.INVALID_PAYLOAD_LEN)

    if _byte(sig, 2) != _INT_MARKER:
        raise DerConversionError(ConvertError.INVALID_R_MARKER)

    r_len = _byte(sig, 3)
    if not _MIN_PAYLOAD <= r_len <= _MAX_PAYLOAD:
        raise DerConversionError(ConvertError.INVALID_R_LEN)

    if _byte(sig, 4 + r_len) != _INT_MARKER:
        raise DerConversionError(ConvertError.INVALID_S_MARKER)

    s_len = _byte(sig, 5 + r_len)
    if not _MIN_PAYLOAD <= s_len <= _MAX_PAYLOAD:
        raise DerConversionError(ConvertError.INVALID_S_LEN)

    r_data = sig[4:4 + r_len]
    if len(r_data) < r_len:
        raise DerConversionError(ConvertError.INVALID_R_LEN)
    s_start = 6 + r_len
    s_data = sig[s_start:s_start + s_len]
    if len(s_data) < s_len:
        raise DerConversionError(ConvertError.INVALID_S_LEN)

    v = 0
    if info & ECCINFO_PARITY_ODD:
        v += 1
    if info & ECCINFO_X_GT_N:
        v += 2

    return RsvSignature(r=_fit(r_data), s=_fit(s_data), v=v)