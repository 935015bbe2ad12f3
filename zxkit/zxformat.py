"""Text helpers for display: ASCII folding, fixed-point numbers and joining."""

from __future__ import annotations

from zxkit.utf8codec import decode_codepoint, find_invalid

__all__ = [
    "BufferTooSmallError",
    "asciify",
    "int_to_fixed_point",
    "str3join",
]

_MAX_FIXED_POINT_LEN = 0xFF


class BufferTooSmallError(ValueError):
    """Raised when a result would not fit the given buffer size."""


def asciify(data: bytes | str) -> str:
    """Replace every codepoint outside 0x20..0x7F with '.'.

    Text that is not valid UTF-8 yields an empty string. Decoding stops at
    the first NUL byte.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if find_invalid(raw) is not None:
        return ""
    chars: list[str] = []
    pos = 0
    while pos < len(raw) and raw[pos] != 0:
        codepoint, pos = decode_codepoint(raw, pos)
        chars.append(chr(codepoint) if 32 <= codepoint <= 0x7F else ".")
    return "".join(chars)


def int_to_fixed_point(number: str, decimal_places: int, max_size: int | None = None) -> str:
    """Turn a string of decimal digits into a fixed-point number.

    Leading zeros are removed and a decimal point is placed ``decimal_places``
    digits from the right. ``max_size`` is the buffer size, terminator
    included. Raises ValueError on non-digit input, BufferTooSmallError when
    the result does not fit.
    """
    if decimal_places < 0:
        raise ValueError(f"decimal places must not be negative: {decimal_places}")
    if max_size is not None and (max_size < 1 or len(number) >= max_size):
        raise BufferTooSmallError("number does not fit the buffer")
    if any(not "0" <= ch <= "9" for ch in number):
        raise ValueError(f"not a decimal number: {number!r}")

    digits = number.lstrip("0") or "0"
    if decimal_places:
        digits = digits.rjust(decimal_places + 1, "0")
        point = len(digits) - decimal_places
        digits = f"{digits[:point]}.{digits[point:]}"

    if max_size is not None and len(digits) >= max_size:
        raise BufferTooSmallError("formatted number does not fit the buffer")
    if len(digits) > _MAX_FIXED_POINT_LEN:
        raise BufferTooSmallError("formatted number is too long")
    return digits


def str3join(message: str, prefix: str, suffix: str, buffer_size: int | None = None) -> str:
    """Return ``prefix + message + suffix``.

    When ``buffer_size`` is given, the result plus a terminator must fit in
    it, or BufferTooSmallError is raised.
    """
    required = 1 + len(message) + len(prefix) + len(suffix)
    if buffer_size is not None and buffer_size < required:
        raise BufferTooSmallError(f"need {required} bytes, buffer holds {buffer_size}")
    return f"{prefix}{message}{suffix}"