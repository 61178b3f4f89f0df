import io
import struct

import pytest

from fscurv.encoding.header import HEADER_DTYPE, parse_header, write_header
from fscurv.errors import FormatError, RangeError, TruncatedDataError
from fscurv.models import CURV_MAGIC, HEADER_SIZE, CurvHeader


def _header_bytes(nv: int, nf: int = 0, vpv: int = 1, magic: bytes = b"\xff\xff\xff") -> bytes:
    return magic + struct.pack(">iii", nv, nf, vpv)


def test_header_dtype_is_packed():
    assert HEADER_DTYPE.itemsize == HEADER_SIZE == 15
    assert int.from_bytes(b"\xff\xff\xff", "big") == CURV_MAGIC


def test_parse_header_fields_and_position():
    src = io.BytesIO(_header_bytes(163842, 327680, 1) + b"rest")
    h = parse_header(src)
    assert h == CurvHeader(num_vertices=163842, num_faces=327680, values_per_vertex=1)
    assert h.has_valid_magic
    assert h.magic == b"\xff\xff\xff"
    assert src.tell() == 15


def test_parse_header_keeps_negative_count():
    # sign is checked by the payload reader, not here
    h = parse_header(io.BytesIO(_header_bytes(-5)))
    assert h.num_vertices == -5


@pytest.mark.parametrize(
    "magic",
    [b"\x00\x00\x00", b"\xff\xff\xfe", b"\xfe\xff\xff", b"\xff\x00\xff", b"CRV"],
)
def test_parse_header_rejects_bad_magic(magic):
    with pytest.raises(FormatError):
        parse_header(io.BytesIO(_header_bytes(3, magic=magic) + b"\x00" * 12))


@pytest.mark.parametrize("data", [b"", b"\xff", b"\xff\xff"])
def test_parse_header_too_short_for_magic_is_format_error(data):
    with pytest.raises(FormatError):
        parse_header(io.BytesIO(data))


def test_parse_header_truncated_after_magic():
    with pytest.raises(TruncatedDataError):
        parse_header(io.BytesIO(_header_bytes(3)[:10]))


def test_write_header_layout():
    sink = io.BytesIO()
    write_header(sink, 3)
    assert sink.getvalue() == bytes.fromhex("FFFFFF" "00000003" "00000000" "00000001")


def test_write_header_explicit_fields():
    sink = io.BytesIO()
    write_header(sink, 2, num_faces=7, values_per_vertex=1)
    assert sink.getvalue() == _header_bytes(2, 7, 1)


@pytest.mark.parametrize("nv", [2**31, -(2**31) - 1])
def test_write_header_out_of_range_writes_nothing(nv):
    sink = io.BytesIO()
    with pytest.raises(RangeError):
        write_header(sink, nv)
    assert sink.getvalue() == b""


def test_write_header_accepts_int32_max():
    sink = io.BytesIO()
    write_header(sink, 2**31 - 1)
    assert sink.getvalue()[3:7] == b"\x7f\xff\xff\xff"


def test_header_file_size():
    assert CurvHeader.for_values(0).file_size == 15
    assert CurvHeader.for_values(3).file_size == 27
