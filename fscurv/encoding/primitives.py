from __future__ import annotations

from typing import BinaryIO

import numpy as np

from ..errors import RangeError

# Fixed-width on-wire primitives. Byte order is part of the dtype so decoding
# does not depend on the host.
U8 = np.dtype("u1")
I32 = np.dtype(">i4")
F32 = np.dtype(">f4")

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

_CHUNK = 1 << 20


def read_exact(source: BinaryIO, nbytes: int) -> bytes:
    """
    Read up to ``nbytes`` from ``source``, looping over short reads.
    Returns fewer bytes only when the source is exhausted; callers decide
    whether that is an error.
    """
    parts = []
    remaining = int(nbytes)
    while remaining > 0:
        chunk = source.read(min(remaining, _CHUNK))
        if not chunk:
            break
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def check_int32(value: int, name: str) -> int:
    """Return ``value`` as int, raising RangeError if it does not fit in int32."""
    v = int(value)
    if v < INT32_MIN or v > INT32_MAX:
        raise RangeError(f"{name}={v} does not fit in a signed 32-bit integer.")
    return v


__all__ = ["U8", "I32", "F32", "INT32_MIN", "INT32_MAX", "read_exact", "check_int32"]
