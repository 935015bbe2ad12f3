"""Standard Base64 encoding with padding."""

from __future__ import annotations

import base64 as _b64

__all__ = ["base64_encode"]


def base64_encode(data: bytes, out_len: int | None = None) -> str:
    """Encode ``data`` as padded Base64 text.

    ``out_len`` is the size of the destination buffer; when given, it is
    checked against a lower bound of ``ceil(len(data) / 6) + 1`` and
    ValueError is raised when it is smaller.
    """
    if out_len is not None:
        min_space = -(-len(data) // 6) + 1
        if out_len < min_space:
            raise ValueError(f"output size {out_len} is below the minimum {min_space}")
    return _b64.b64encode(bytes(data)).decode("ascii")