from __future__ import annotations

import io
import os
import warnings
from pathlib import Path
from typing import BinaryIO, Sequence, Union

import numpy as np

from ..encoding.header import parse_header, write_header
from ..encoding.payload import read_values, write_values
from ..encoding.primitives import check_int32
from ..models import CurvFile, CurvHeader

ByteSource = Union[BinaryIO, bytes, bytearray, memoryview]


# ---------- Internal utilities ----------

def _as_stream(source: ByteSource) -> BinaryIO:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


def _to_float32(values: Sequence[float]) -> np.ndarray:
    """
    Narrow a 1D numeric sequence to float32 using numpy's IEEE-754 cast.
    Finite values beyond the float32 range become +/-inf (a RuntimeWarning is
    issued); NaN and infinities pass through unchanged.
    """
    arr = np.asarray(values)
    if arr.dtype == object:
        try:
            arr = arr.astype(np.float64)
        except (TypeError, ValueError) as e:
            raise TypeError("Curv values must be numeric.") from e
    if arr.dtype.kind not in "biuf":
        raise TypeError(f"Curv values must be numeric, got dtype {arr.dtype}.")
    if arr.ndim != 1:
        raise ValueError(f"Curv values must be a 1D sequence, got shape {arr.shape}.")

    with np.errstate(over="ignore", invalid="ignore"):
        out = arr.astype(np.float32)
    if arr.dtype.kind == "f":
        overflowed = np.isfinite(arr) & ~np.isfinite(out)
        if overflowed.any():
            warnings.warn(
                f"{int(np.count_nonzero(overflowed))} value(s) exceed the float32 range and were written as +/-inf.",
                RuntimeWarning,
                stacklevel=3,
            )
    return out


def _ensure_parent(path: str | os.PathLike[str]) -> None:
    parent = Path(path).expanduser().parent
    if parent != Path('.'):
        parent.mkdir(parents=True, exist_ok=True)


# ---------- Public API ----------

def decode(source: ByteSource, want_header: bool = False) -> np.ndarray | CurvFile:
    """
    Decode Curv data from a binary stream (or bytes).

    Returns the (N,) float32 values, or a CurvFile when ``want_header`` is set.
    The stream is left open and positioned right after the last value.

    Raises:
        FormatError if the data is not in Curv format or declares a negative count.
        TruncatedDataError if the data ends before the declared number of values.
    """
    stream = _as_stream(source)
    header = parse_header(stream)
    values = read_values(stream, header.num_vertices)
    if want_header:
        return CurvFile(header=header, values=values)
    return values


def encode(sink: BinaryIO, values: Sequence[float] | CurvFile) -> None:
    """
    Write ``values`` to ``sink`` in Curv format, converted to big-endian float32.

    The header always carries num_faces=0 and values_per_vertex=1. The value
    count is range-checked before anything is written (RangeError). I/O errors
    from ``sink`` propagate; a failed call may leave ``sink`` partially written.
    """
    if isinstance(values, CurvFile):
        values = values.values
    check_int32(len(values), "num_vertices")
    data = _to_float32(values)
    header = CurvHeader.for_values(data.shape[0])
    write_header(sink, header.num_vertices, header.num_faces, header.values_per_vertex)
    write_values(sink, data)


def read_curv(path: str | os.PathLike[str], with_header: bool = False) -> np.ndarray | CurvFile:
    """
    Read per-vertex data from the Curv file at ``path`` (e.g. ``lh.thickness``).
    Returns the float32 values, or a CurvFile when ``with_header`` is set.
    """
    with open(Path(path).expanduser(), "rb") as fobj:
        return decode(fobj, want_header=with_header)


def write_curv(path: str | os.PathLike[str], values: Sequence[float] | CurvFile) -> None:
    """
    Write a numeric vector to ``path`` in Curv format. Values are converted to float32.
    Missing parent directories are created.
    """
    _ensure_parent(path)
    with open(Path(path).expanduser(), "wb") as fobj:
        encode(fobj, values)


__all__ = ["decode", "encode", "read_curv", "write_curv"]
