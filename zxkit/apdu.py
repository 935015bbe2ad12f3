"""ISO 7816 style APDU status words."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ApduCode", "encode_status"]


class ApduCode(IntEnum):
    """Status words returned at the end of an APDU response."""

    OK = 0x9000
    BUSY = 0x9001

    EXECUTION_ERROR = 0x6400

    WRONG_LENGTH = 0x6700

    EMPTY_BUFFER = 0x6982
    OUTPUT_BUFFER_TOO_SMALL = 0x6983
    DATA_INVALID = 0x6984
    CONDITIONS_NOT_SATISFIED = 0x6985
    COMMAND_NOT_ALLOWED = 0x6986
    TX_NOT_INITIALIZED = 0x6987

    BAD_KEY_HANDLE = 0x6A80
    INVALID_P1P2 = 0x6B00
    INS_NOT_SUPPORTED = 0x6D00
    CLA_NOT_SUPPORTED = 0x6E00

    UNKNOWN = 0x6F00
    SIGN_VERIFY_ERROR = 0x6F01


def encode_status(code: int) -> bytes:
    """Return the two big-endian bytes of a status word.

    Raises ValueError when ``code`` does not fit in 16 bits.
    """
    value = int(code)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"status word out of range: {value:#x}")
    return value.to_bytes(2, "big")