"""Low-level UTF-8 codepoint encoding, decoding and validation over bytes.

Byte strings are treated like zero-terminated text: scanning stops at the
first NUL byte or at the end of the data, whichever comes first, and reads
past the end of the data see a zero byte.
"""

from __future__ import annotations

__all__ = [
    "codepoint_size",
    "codepoint_calc_size",
    "encode_codepoint",
    "decode_codepoint",
    "find_invalid",
    "make_valid",
]


def _byte(data: bytes, index: int) -> int:
    """Return the byte at ``index``, or 0 when it lies past the end."""
    return data[index] if 0 <= index < len(data) else 0


def _is_continuation(value: int) -> bool:
    return (value & 0xC0) == 0x80


def codepoint_size(codepoint: int) -> int:
    """Number of bytes needed to encode ``codepoint``."""
    cp = codepoint & 0xFFFFFFFF
    if not cp & 0xFFFFFF80:
        return 1
    if not cp & 0xFFFFF800:
        return 2
    if not cp & 0xFFFF0000:
        return 3
    return 4


def codepoint_calc_size(lead: int) -> int:
    """Length of the sequence announced by the lead byte ``lead``."""
    lead &= 0xFF
    if (lead & 0xF8) == 0xF0:
        return 4
    if (lead & 0xF0) == 0xE0:
        return 3
    if (lead & 0xE0) == 0xC0:
        return 2
    return 1


def encode_codepoint(codepoint: int) -> bytes:
    """Encode a single codepoint as UTF-8 bytes."""
    cp = codepoint & 0xFFFFFFFF
    size = codepoint_size(cp)
    if size == 1:
        return bytes([cp])
    if size == 2:
        return bytes([0xC0 | ((cp >> 6) & 0x1F), 0x80 | (cp & 0x3F)])
    if size == 3:
        return bytes([
            0xE0 | ((cp >> 12) & 0x0F),
            0x80 | ((cp >> 6) & 0x3F),
            0x80 | (cp & 0x3F),
        ])
    return bytes([
        0xF0 | ((cp >> 18) & 0x07),
        0x80 | ((cp >> 12) & 0x3F),
        0x80 | ((cp >> 6) & 0x3F),
        0x80 | (cp & 0x3F),
    ])


def decode_codepoint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode the codepoint starting at ``offset``.

    Returns the codepoint and the offset of the following codepoint.
    """
    b0 = _byte(data, offset)
    size = codepoint_calc_size(b0)
    if size == 4:
        cp = (
            ((b0 & 0x07) << 18)
            | ((_byte(data, offset + 1) & 0x3F) << 12)
            | ((_byte(data, offset + 2) & 0x3F) << 6)
            | (_byte(data, offset + 3) & 0x3F)
        )
    elif size == 3:
        cp = (
            ((b0 & 0x0F) << 12)
            | ((_byte(data, offset + 1) & 0x3F) << 6)
            | (_byte(data, offset + 2) & 0x3F)
        )
    elif size == 2:
        cp = ((b0 & 0x1F) << 6) | (_byte(data, offset + 1) & 0x3F)
    else:
        cp = b0
    return cp, offset + size


def find_invalid(data: bytes, limit: int | None = None) -> int | None:
    """Return the offset of the first invalid codepoint, or None if valid.

    At most ``limit`` bytes are examined when a limit is given.
    """
    if limit is None:
        limit = len(data)
    pos = 0
    while pos < limit and _byte(data, pos) != 0:
        remained = limit - pos
        b0 = data[pos]
        if (b0 & 0xF8) == 0xF0:
            if remained < 4:
                return pos
            if not all(_is_continuation(_byte(data, pos + k)) for k in (1, 2, 3)):
                return pos
            if _is_continuation(_byte(data, pos + 4)):
                return pos
            if (b0 & 0x07) == 0 and (_byte(data, pos + 1) & 0x30) == 0:
                return pos
            pos += 4
        elif (b0 & 0xF0) == 0xE0:
            if remained < 3:
                return pos
            if not all(_is_continuation(_byte(data, pos + k)) for k in (1, 2)):
                return pos
            if _is_continuation(_byte(data, pos + 3)):
                return pos
            if (b0 & 0x0F) == 0 and (_byte(data, pos + 1) & 0x20) == 0:
                return pos
            pos += 3
        elif (b0 & 0xE0) == 0xC0:
            if remained < 2:
                return pos
            if not _is_continuation(_byte(data, pos + 1)):
                return pos
            if _is_continuation(_byte(data, pos + 2)):
                return pos
            if (b0 & 0x1E) == 0:
                return pos
            pos += 2
        elif (b0 & 0x80) == 0:
            pos += 1
        else:
            return pos
    return None


def make_valid(data: bytes, replacement: int) -> bytes:
    """Replace broken sequences in ``data`` with the ASCII ``replacement``.

    Raises ValueError when ``replacement`` is not a 7-bit value.
    """
    if replacement > 0x7F:
        raise ValueError("replacement must be an ASCII value")
    filler = bytes([replacement & 0xFF])
    out = bytearray()
    pos = 0
    while _byte(data, pos) != 0:
        size = codepoint_calc_size(data[pos])
        if size == 1 and data[pos] & 0x80:
            # dangling continuation byte
            out += filler
            pos += 1
            continue
        if not all(_is_continuation(_byte(data, pos + k)) for k in range(1, size)):
            out += filler
            pos += 1
            continue
        codepoint, pos = decode_codepoint(data, pos)
        out += encode_codepoint(codepoint)
    return bytes(out)