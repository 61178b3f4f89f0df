"""
fscurv: Reader and writer for the FreeSurfer binary Curv format.

A Curv file stores one float32 value per vertex of a triangulated surface
mesh (e.g. ``lh.thickness``). This package exposes:
- Core dataclasses (CurvHeader, CurvFile)
- Stream codec (decode, encode) and path helpers (read_curv, write_curv)
- Error types (FormatError, TruncatedDataError, RangeError)
"""

from .errors import CurvError, FormatError, TruncatedDataError, RangeError
from .models import CURV_MAGIC, HEADER_SIZE, CurvHeader, CurvFile
from .io import decode, encode, read_curv, write_curv

__all__ = [
    "CurvHeader",
    "CurvFile",
    "decode",
    "encode",
    "read_curv",
    "write_curv",
    "CurvError",
    "FormatError",
    "TruncatedDataError",
    "RangeError",
    "CURV_MAGIC",
    "HEADER_SIZE",
]

__version__ = "0.1.0"
