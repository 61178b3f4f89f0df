from __future__ import annotations

from typing import BinaryIO

import numpy as np

from ..errors import FormatError, TruncatedDataError
from ..models import VALUE_SIZE
from .primitives import F32, read_exact


def read_values(source: BinaryIO, count: int) -> np.ndarray:
    """
    Read exactly ``count`` big-endian float32 values from ``source``.
    Returns a native-order (count,) float32 array.
    """
    count = int(count)
    if count < 0:
        raise FormatError(f"Invalid vertex count {count}: must be non-negative.")

    expected = count * VALUE_SIZE
    buf = read_exact(source, expected)
    if len(buf) < expected:
        raise TruncatedDataError(
            f"Curv payload truncated: expected {count} values ({expected} bytes), got {len(buf)} bytes."
        )
    if count == 0:
        return np.empty(0, dtype=np.float32)
    return np.frombuffer(buf, dtype=F32, count=count).astype(np.float32)


def write_values(sink: BinaryIO, values: np.ndarray) -> None:
    """Write float32 ``values`` big-endian, in order. No numeric conversion is done here."""
    arr = np.asarray(values)
    if arr.dtype.kind != "f" or arr.dtype.itemsize != 4:
        raise TypeError(f"write_values expects float32 values, got {arr.dtype}.")
    sink.write(arr.reshape(-1).astype(F32, copy=False).tobytes())


__all__ = ["read_values", "write_values"]
