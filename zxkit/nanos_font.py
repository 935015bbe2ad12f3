"""Pixel width of text lines in the regular 11px font of a small device screen."""

from __future__ import annotations

__all__ = ["line_width"]

_FIRST_CHAR = 0x20
_LAST_CHAR = 0x7F

# Width in pixels of each character from 0x20 to 0x7F.
_WIDTHS = (
    3, 3, 4, 7, 6, 9, 8, 2, 3, 3, 6, 6, 3, 4, 3, 4,
    6, 6, 6, 6, 8, 6, 6, 6, 6, 6, 3, 3, 6, 6, 6, 5,
    10, 7, 7, 7, 8, 6, 6, 8, 8, 3, 4, 7, 6, 10, 8, 9,
    7, 9, 7, 6, 7, 8, 7, 10, 6, 6, 6, 4, 4, 4, 6, 5,
    6, 6, 7, 5, 7, 6, 5, 6, 7, 3, 4, 6, 3, 10, 7, 7,
    7, 7, 4, 5, 4, 7, 6, 9, 6, 6, 5, 4, 6, 4, 6, 7,
)


def line_width(text: str | bytes) -> int:
    """Width of ``text`` up to its first line break.

    Characters outside the printable range contribute nothing.
    """
    codes = text if isinstance(text, (bytes, bytearray)) else (ord(ch) for ch in text)
    width = 0
    for code in codes:
        if _FIRST_CHAR <= code <= _LAST_CHAR:
            width += _WIDTHS[code - _FIRST_CHAR]
        elif code in (0x0A, 0x0D):
            break
    return width