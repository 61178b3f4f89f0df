def test_imports():
    import fscurv
    from fscurv import CurvHeader, CurvFile, decode, encode, read_curv, write_curv, FormatError, TruncatedDataError, RangeError
    assert hasattr(fscurv, "__version__")
    assert CurvHeader and CurvFile and decode and encode and read_curv and write_curv
    assert issubclass(FormatError, ValueError) and issubclass(TruncatedDataError, EOFError) and issubclass(RangeError, OverflowError)
