"""Searching, comparing and measuring UTF-8 byte strings.

Byte strings are treated like zero-terminated text: everything from the
first NUL byte on is ignored, and reads past the end see a zero byte.
Offsets returned by the search functions are byte offsets into the data.
"""

from __future__ import annotations

from zxkit.utf8case import lower_codepoint, upper_codepoint
from zxkit.utf8codec import (
    codepoint_calc_size,
    codepoint_size,
    decode_codepoint,
    encode_codepoint,
)

__all__ = [
    "compare",
    "ncompare",
    "casecompare",
    "ncasecompare",
    "length",
    "nlength",
    "span",
    "cspan",
    "pbrk",
    "find",
    "casefind",
    "find_codepoint",
    "rfind_codepoint",
    "ncopy",
]


def _cstr(data: bytes) -> bytes:
    """Return ``data`` up to, not including, its first NUL byte."""
    return bytes(data).split(b"\x00", 1)[0]


def _byte(data: bytes, index: int) -> int:
    return data[index] if 0 <= index < len(data) else 0


def _is_continuation(value: int) -> bool:
    return (value & 0xC0) == 0x80


def _sign(first: bytes, second: bytes) -> int:
    return (first > second) - (first < second)


def compare(first: bytes, second: bytes) -> int:
    """Byte-wise comparison: -1, 0 or 1."""
    return _sign(_cstr(first), _cstr(second))


def ncompare(first: bytes, second: bytes, limit: int) -> int:
    """Byte-wise comparison of at most ``limit`` bytes: -1, 0 or 1."""
    return _sign(_cstr(first)[:limit], _cstr(second)[:limit])


def _case_mismatch(cp1: int, cp2: int) -> int | None:
    """Return None when the codepoints match regardless of case, else the difference."""
    low1, low2 = lower_codepoint(cp1), lower_codepoint(cp2)
    if low1 == low2 or upper_codepoint(cp1) == upper_codepoint(cp2):
        return None
    return low1 - low2


def casecompare(first: bytes, second: bytes) -> int:
    """Case-insensitive comparison; negative, zero or positive."""
    a, b = _cstr(first), _cstr(second)
    pos1 = pos2 = 0
    while True:
        cp1, pos1 = decode_codepoint(a, pos1)
        cp2, pos2 = decode_codepoint(b, pos2)
        if cp1 == 0 and cp2 == 0:
            return 0
        difference = _case_mismatch(cp1, cp2)
        if difference is not None:
            return difference


def ncasecompare(first: bytes, second: bytes, limit: int) -> int:
    """Case-insensitive comparison of at most ``limit`` bytes of each string."""
    a, b = _cstr(first), _cstr(second)
    pos1 = pos2 = 0
    remaining = limit
    while remaining > 0:
        lead1, lead2 = _byte(a, pos1), _byte(b, pos2)
        # A truncated multi-byte codepoint is compared on its lead bits only.
        for max_remaining, mask, pattern in ((1, 0xE0, 0xC0), (2, 0xF0, 0xE0), (3, 0xF8, 0xF0)):
            if remaining <= max_remaining and (
                (lead1 & mask) == pattern or (lead2 & mask) == pattern
            ):
                c1, c2 = lead1 & mask, lead2 & mask
                return c1 - c2 if c1 < c2 else 0
        cp1, pos1 = decode_codepoint(a, pos1)
        cp2, pos2 = decode_codepoint(b, pos2)
        remaining -= codepoint_size(cp1)
        if cp1 == 0 and cp2 == 0:
            return 0
        difference = _case_mismatch(cp1, cp2)
        if difference is not None:
            return difference
    return 0


def nlength(data: bytes, limit: int | None) -> int:
    """Number of codepoints within the first ``limit`` bytes."""
    text = _cstr(data)
    pos = 0
    count = 0
    while (limit is None or pos < limit) and _byte(text, pos) != 0:
        pos += codepoint_calc_size(text[pos])
        count += 1
    if limit is not None and pos > limit:
        count -= 1
    return count


def length(data: bytes) -> int:
    """Number of codepoints in ``data``."""
    return nlength(data, None)


def span(data: bytes, accept: bytes) -> int:
    """Number of leading codepoints of ``data`` that all occur in ``accept``."""
    src, acc = _cstr(data), _cstr(accept)
    chars = 0
    pos = 0
    while _byte(src, pos) != 0:
        a = 0
        offset = 0
        while _byte(acc, a) != 0:
            if not _is_continuation(acc[a]) and offset > 0:
                chars += 1
                pos += offset
                offset = 0
                break
            if acc[a] == _byte(src, pos + offset):
                offset += 1
                a += 1
            else:
                a += 1
                while _is_continuation(_byte(acc, a)):
                    a += 1
                offset = 0
        if offset > 0:
            chars += 1
            pos += offset
            continue
        if _byte(acc, a) == 0:
            return chars
    return chars


def _first_match(src: bytes, chars: bytes) -> tuple[int, int | None]:
    """Scan ``src`` for a codepoint from ``chars``.

    Returns the number of codepoints skipped and the offset of the match.
    """
    skipped = 0
    pos = 0
    while _byte(src, pos) != 0:
        r = 0
        offset = 0
        while _byte(chars, r) != 0:
            if not _is_continuation(chars[r]) and offset > 0:
                return skipped, pos
            if chars[r] == _byte(src, pos + offset):
                offset += 1
                r += 1
            else:
                r += 1
                while _is_continuation(_byte(chars, r)):
                    r += 1
                offset = 0
        if offset > 0:
            return skipped, pos
        pos += 1
        while _is_continuation(_byte(src, pos)):
            pos += 1
        skipped += 1
    return skipped, None


def cspan(data: bytes, reject: bytes) -> int:
    """Number of leading codepoints of ``data`` that do not occur in ``reject``."""
    skipped, _ = _first_match(_cstr(data), _cstr(reject))
    return skipped


def pbrk(data: bytes, accept: bytes) -> int | None:
    """Offset of the first codepoint of ``data`` found in ``accept``, or None."""
    _, offset = _first_match(_cstr(data), _cstr(accept))
    return offset


def find(haystack: bytes, needle: bytes) -> int | None:
    """Offset of the first occurrence of ``needle`` in ``haystack``, or None."""
    hay, ndl = _cstr(haystack), _cstr(needle)
    if not ndl:
        return 0
    pos = 0
    while _byte(hay, pos) != 0:
        start = pos
        n = 0
        while _byte(hay, pos) == _byte(ndl, n) and _byte(hay, pos) != 0:
            n += 1
            pos += 1
        if _byte(ndl, n) == 0:
            return start
        _, pos = decode_codepoint(hay, start)
    return None


def casefind(haystack: bytes, needle: bytes) -> int | None:
    """Case-insensitive :func:`find`."""
    hay, ndl = _cstr(haystack), _cstr(needle)
    if not ndl:
        return 0
    pos = 0
    while True:
        start = pos
        h_cp, pos = decode_codepoint(hay, pos)
        following = pos
        n_cp, npos = decode_codepoint(ndl, 0)
        while h_cp != 0 and n_cp != 0:
            if lower_codepoint(h_cp) != lower_codepoint(n_cp):
                break
            h_cp, pos = decode_codepoint(hay, pos)
            n_cp, npos = decode_codepoint(ndl, npos)
        if n_cp == 0:
            return start
        if h_cp == 0:
            return None
        pos = following


def find_codepoint(data: bytes, codepoint: int) -> int | None:
    """Offset of the first ``codepoint`` in ``data``, or None.

    Codepoint 0 gives the offset of the terminating NUL.
    """
    if codepoint == 0:
        return len(_cstr(data))
    return find(data, encode_codepoint(codepoint))


def rfind_codepoint(data: bytes, codepoint: int) -> int | None:
    """Offset of the last ``codepoint`` in ``data``, or None.

    Codepoint 0 gives the offset of the terminating NUL.
    """
    src = _cstr(data)
    if codepoint == 0:
        return len(src)
    target = encode_codepoint(codepoint)
    match = None
    pos = 0
    while _byte(src, pos) != 0:
        offset = 0
        while offset < len(target) and _byte(src, pos + offset) == target[offset]:
            offset += 1
        pos += offset
        if offset == len(target):
            match = pos - offset
        elif _byte(src, pos) != 0:
            pos += 1
            while _is_continuation(_byte(src, pos)):
                pos += 1
    return match


def ncopy(data: bytes, limit: int) -> bytes:
    """Copy at most ``limit`` bytes into a zero-filled buffer of ``limit`` bytes.

    A codepoint cut short by the limit is dropped.
    """
    if limit <= 0:
        return b""
    buffer = bytearray(limit)
    index = 0
    while index < limit:
        value = _byte(data, index)
        buffer[index] = value
        if value == 0:
            break
        index += 1
    if index > 0:
        check = index - 1
        while check > 0 and _is_continuation(buffer[check]):
            check -= 1
        if index - check < codepoint_calc_size(buffer[check]):
            index = check
    buffer[index:] = bytes(limit - index)
    return bytes(buffer)