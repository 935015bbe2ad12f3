"""Case mapping of UTF-8 codepoints and byte strings.

Only Latin, Greek and Cyrillic letters are covered. Everything else maps to
itself.
"""

from __future__ import annotations

from collections.abc import Callable

from zxkit.utf8codec import decode_codepoint, encode_codepoint

__all__ = [
    "lower_codepoint",
    "upper_codepoint",
    "is_lower",
    "is_upper",
    "lower",
    "upper",
]

_Ranges = tuple[tuple[int, int], ...]


def _in_ranges(cp: int, ranges: _Ranges) -> bool:
    return any(low <= cp <= high for low, high in ranges)


# Ranges where upper and lower case alternate, even codepoint first.
_PAIRED_EVEN_FIRST: _Ranges = (
    (0x0100, 0x012F),
    (0x0132, 0x0137),
    (0x014A, 0x0177),
    (0x0182, 0x0185),
    (0x01A0, 0x01A5),
    (0x01DE, 0x01EF),
    (0x01F8, 0x021F),
    (0x0222, 0x0233),
    (0x0246, 0x024F),
    (0x03D8, 0x03EF),
    (0x0460, 0x0481),
    (0x048A, 0x04FF),
)

# Ranges where upper and lower case alternate, odd codepoint first.
_PAIRED_ODD_FIRST: _Ranges = (
    (0x0139, 0x0148),
    (0x0179, 0x017E),
    (0x01AF, 0x01B0),
    (0x01B3, 0x01B6),
    (0x01CD, 0x01DC),
)

_UPPER_OFFSET_32: _Ranges = (
    (0x0041, 0x005A),
    (0x00C0, 0x00D6),
    (0x00D8, 0x00DE),
    (0x0391, 0x03A1),
    (0x03A3, 0x03AB),
    (0x0410, 0x042F),
)

_LOWER_OFFSET_32: _Ranges = (
    (0x0061, 0x007A),
    (0x00E0, 0x00F6),
    (0x00F8, 0x00FE),
    (0x03B1, 0x03C1),
    (0x03C3, 0x03CB),
    (0x0430, 0x044F),
)

_TO_LOWER_SPECIAL = {
    0x0178: 0x00FF, 0x0243: 0x0180, 0x018E: 0x01DD, 0x023D: 0x019A,
    0x0220: 0x019E, 0x01B7: 0x0292, 0x01C4: 0x01C6, 0x01C7: 0x01C9,
    0x01CA: 0x01CC, 0x01F1: 0x01F3, 0x01F7: 0x01BF, 0x0187: 0x0188,
    0x018B: 0x018C, 0x0191: 0x0192, 0x0198: 0x0199, 0x01A7: 0x01A8,
    0x01AC: 0x01AD, 0x01AF: 0x01B0, 0x01B8: 0x01B9, 0x01BC: 0x01BD,
    0x01F4: 0x01F5, 0x023B: 0x023C, 0x0241: 0x0242, 0x03FD: 0x037B,
    0x03FE: 0x037C, 0x03FF: 0x037D, 0x037F: 0x03F3, 0x0386: 0x03AC,
    0x0388: 0x03AD, 0x0389: 0x03AE, 0x038A: 0x03AF, 0x038C: 0x03CC,
    0x038E: 0x03CD, 0x038F: 0x03CE, 0x0370: 0x0371, 0x0372: 0x0373,
    0x0376: 0x0377, 0x03F4: 0x03B8, 0x03CF: 0x03D7, 0x03F9: 0x03F2,
    0x03F7: 0x03F8, 0x03FA: 0x03FB,
}

_TO_UPPER_SPECIAL = {
    0x00FF: 0x0178, 0x0180: 0x0243, 0x01DD: 0x018E, 0x019A: 0x023D,
    0x019E: 0x0220, 0x0292: 0x01B7, 0x01C6: 0x01C4, 0x01C9: 0x01C7,
    0x01CC: 0x01CA, 0x01F3: 0x01F1, 0x01BF: 0x01F7, 0x0188: 0x0187,
    0x018C: 0x018B, 0x0192: 0x0191, 0x0199: 0x0198, 0x01A8: 0x01A7,
    0x01AD: 0x01AC, 0x01B0: 0x01AF, 0x01B9: 0x01B8, 0x01BD: 0x01BC,
    0x01F5: 0x01F4, 0x023C: 0x023B, 0x0242: 0x0241, 0x037B: 0x03FD,
    0x037C: 0x03FE, 0x037D: 0x03FF, 0x03F3: 0x037F, 0x03AC: 0x0386,
    0x03AD: 0x0388, 0x03AE: 0x0389, 0x03AF: 0x038A, 0x03CC: 0x038C,
    0x03CD: 0x038E, 0x03CE: 0x038F, 0x0371: 0x0370, 0x0373: 0x0372,
    0x0377: 0x0376, 0x03D1: 0x0398, 0x03D7: 0x03CF, 0x03F2: 0x03F9,
    0x03F8: 0x03F7, 0x03FB: 0x03FA,
}


def lower_codepoint(codepoint: int) -> int:
    """Return the lower-case form of ``codepoint``, if there is one."""
    cp = codepoint
    if _in_ranges(cp, _UPPER_OFFSET_32):
        return cp + 32
    if 0x0400 <= cp <= 0x040F:
        return cp + 80
    if _in_ranges(cp, _PAIRED_EVEN_FIRST):
        return cp | 0x1
    if _in_ranges(cp, _PAIRED_ODD_FIRST):
        return (cp + 1) & ~0x1
    return _TO_LOWER_SPECIAL.get(cp, cp)


def upper_codepoint(codepoint: int) -> int:
    """Return the upper-case form of ``codepoint``, if there is one."""
    cp = codepoint
    if _in_ranges(cp, _LOWER_OFFSET_32):
        return cp - 32
    if 0x0450 <= cp <= 0x045F:
        return cp - 80
    if _in_ranges(cp, _PAIRED_EVEN_FIRST):
        return cp & ~0x1
    if _in_ranges(cp, _PAIRED_ODD_FIRST):
        return (cp - 1) | 0x1
    return _TO_UPPER_SPECIAL.get(cp, cp)


def is_lower(codepoint: int) -> bool:
    """True when ``codepoint`` has a distinct upper-case form."""
    return codepoint != upper_codepoint(codepoint)


def is_upper(codepoint: int) -> bool:
    """True when ``codepoint`` has a distinct lower-case form."""
    return codepoint != lower_codepoint(codepoint)


def _transform(data: bytes, mapping: Callable[[int], int]) -> bytes:
    out = bytearray(data)
    pos = 0
    while True:
        cp, following = decode_codepoint(data, pos)
        if cp == 0:
            break
        mapped = mapping(cp)
        if mapped != cp:
            encoded = encode_codepoint(mapped)[: max(len(out) - pos, 0)]
            out[pos:pos + len(encoded)] = encoded
        pos = following
    return bytes(out)


def lower(data: bytes) -> bytes:
    """Lower-case the text in ``data`` up to its first NUL byte."""
    return _transform(data, lower_codepoint)


def upper(data: bytes) -> bytes:
    """Upper-case the text in ``data`` up to its first NUL byte."""
    return _transform(data, upper_codepoint)