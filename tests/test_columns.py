import re

import pytest

from mf_ftp.core.base import ParseError
from mf_ftp.parsers.columns import ColumnSpan, HeaderSpanResolver, RowDecoder, parse_int


DATASET_HEADER = "Volume Unit    Referred Ext Used Recfm Lrecl BlkSz Dsorg Dsname"
LOADLIB_HEADER = " Name      Size     TTR   Alias-of AC --------- Attributes --------- Amode Rmode "
BANNER = re.compile(r"-+ Attributes -+")


def test_token_spans_use_actual_positions():
    spans = HeaderSpanResolver().token_spans("Ext Used Ext2")

    assert spans == [
        ColumnSpan("Ext", 0, 3),
        ColumnSpan("Used", 4, 8),
        ColumnSpan("Ext2", 9, 13),
    ]


def test_contiguous_spans_tile_the_line():
    spans = HeaderSpanResolver().contiguous_spans(DATASET_HEADER)

    assert [s.name for s in spans][:3] == ["Volume", "Unit", "Referred"]
    assert spans[0].start == 0
    for previous, current in zip(spans, spans[1:]):
        assert current.start == previous.end
    assert spans[-1].end is None


def test_anchored_spans_insert_banner_column():
    spans = HeaderSpanResolver().anchored_spans(LOADLIB_HEADER, BANNER, "Attributes")
    names = [s.name for s in spans]

    assert names == ["Name", "Size", "TTR", "Alias-of", "AC", "Attributes", "Amode", "Rmode"]
    banner = spans[names.index("Attributes")]
    assert LOADLIB_HEADER[banner.start:banner.end].strip("- ") == "Attributes"
    # Right-hand spans are offset to absolute positions
    amode = spans[names.index("Amode")]
    assert LOADLIB_HEADER[amode.start:amode.end] == "Amode"


def test_anchored_spans_require_banner():
    with pytest.raises(ParseError):
        HeaderSpanResolver().anchored_spans(" Name Size Amode", BANNER, "Attributes")


def test_correct_spans_widens_overrunning_column():
    spans = HeaderSpanResolver().contiguous_spans(DATASET_HEADER)
    line = "XRFS95 3390   2017/08/04  313875  FB    1024 27648  PS  'USERHLQI.T2.HISPAXZ'"

    corrected = RowDecoder().correct_spans(line, spans)

    by_name = {s.name: s for s in corrected}
    assert by_name["Ext"].end == by_name["Used"].start
    assert corrected[-1].end is None
    # Input spans are left untouched
    assert spans == HeaderSpanResolver().contiguous_spans(DATASET_HEADER)


def test_decode_boundary_separates_abutting_values():
    spans = HeaderSpanResolver().contiguous_spans(DATASET_HEADER)
    line = "XRFS95 3390   2017/08/04  313875  FB    1024 27648  PS  'USERHLQI.T2.HISPAXZ'"

    fields = RowDecoder().decode_boundary(line, spans)

    assert fields == [
        "XRFS95", "3390", "2017/08/04", "3", "13875",
        "FB", "1024", "27648", "PS", "'USERHLQI.T2.HISPAXZ'",
    ]


def test_decode_boundary_drops_columns_past_end_of_line():
    spans = HeaderSpanResolver().contiguous_spans(DATASET_HEADER)

    fields = RowDecoder().decode_boundary("F1DBAR 3390", spans)

    assert fields == ["F1DBAR", "3390"]


def test_scan_field_finds_value_offset_under_label():
    decoder = RowDecoder()
    line = "DD        03DBD8   031506 IRRENV00 01 FO             RN RU            31    24   "
    spans = HeaderSpanResolver().anchored_spans(LOADLIB_HEADER, BANNER, "Attributes")

    assert decoder.decode_anchored(line, spans) == [
        "DD", "03DBD8", "031506", "IRRENV00", "01", "FO             RN RU", "31", "24",
    ]


def test_scan_field_beyond_line_is_empty():
    assert RowDecoder().scan_field("short", ColumnSpan("X", 20, 25)) == ""


@pytest.mark.parametrize("text,base,expected", [
    ("42", 10, 42),
    (" 7 ", 10, 7),
    ("03DBD8", 16, 252888),
    ("", 10, None),
    (None, 10, None),
    ("N/A", 10, None),
])
def test_parse_int(text, base, expected):
    assert parse_int(text, base) == expected
