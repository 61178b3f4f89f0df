from __future__ import annotations


class CurvError(Exception):
    """Base class for errors raised while reading or writing Curv files."""


class FormatError(CurvError, ValueError):
    """Input is not a Curv file, or carries a count that cannot be used."""


class TruncatedDataError(CurvError, EOFError):
    """A Curv file ended before the number of bytes its header promises."""


class RangeError(CurvError, OverflowError):
    """A header field does not fit in a signed 32-bit integer."""


__all__ = ["CurvError", "FormatError", "TruncatedDataError", "RangeError"]
