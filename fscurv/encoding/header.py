from __future__ import annotations

from typing import BinaryIO

import numpy as np

from ..errors import FormatError, TruncatedDataError
from ..models import HEADER_SIZE, MAGIC_BYTE, CurvHeader
from .primitives import I32, U8, check_int32, read_exact

# Packed layout: no alignment padding between the magic bytes and the counts.
HEADER_DTYPE = np.dtype(
    [
        ("magic", U8, (3,)),
        ("num_vertices", I32),
        ("num_faces", I32),
        ("values_per_vertex", I32),
    ]
)
assert HEADER_DTYPE.itemsize == HEADER_SIZE

_MAGIC = bytes((MAGIC_BYTE,) * 3)


def parse_header(source: BinaryIO) -> CurvHeader:
    """
    Read the 15-byte header from the front of ``source``.

    Raises:
        FormatError if the magic bytes are missing or not 0xFF 0xFF 0xFF.
        TruncatedDataError if the magic matches but the counts are cut off.
    """
    buf = read_exact(source, HEADER_SIZE)
    if len(buf) < 3 or buf[:3] != _MAGIC:
        raise FormatError(f"Not a recognized Curv header: magic bytes {buf[:3].hex()!r} mismatch.")
    if len(buf) < HEADER_SIZE:
        raise TruncatedDataError(f"Curv header truncated: got {len(buf)} of {HEADER_SIZE} bytes.")

    rec = np.frombuffer(buf, dtype=HEADER_DTYPE, count=1)[0]
    b1, b2, b3 = (int(b) for b in rec["magic"])
    return CurvHeader(
        num_vertices=int(rec["num_vertices"]),
        num_faces=int(rec["num_faces"]),
        values_per_vertex=int(rec["values_per_vertex"]),
        magic_b1=b1,
        magic_b2=b2,
        magic_b3=b3,
    )


def write_header(sink: BinaryIO, num_vertices: int, num_faces: int = 0, values_per_vertex: int = 1) -> None:
    """Write magic and the three big-endian int32 counts. Counts are range-checked before writing."""
    nv = check_int32(num_vertices, "num_vertices")
    nf = check_int32(num_faces, "num_faces")
    vpv = check_int32(values_per_vertex, "values_per_vertex")

    rec = np.zeros(1, dtype=HEADER_DTYPE)
    rec["magic"] = MAGIC_BYTE
    rec["num_vertices"] = nv
    rec["num_faces"] = nf
    rec["values_per_vertex"] = vpv
    sink.write(rec.tobytes())


__all__ = ["HEADER_DTYPE", "parse_header", "write_header"]
