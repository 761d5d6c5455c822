import pytest

from ftkit.scan import Arguments, parse_spec
from ftkit.textfmt import (
    encode_utf8,
    format_char,
    format_string,
    format_wide_char,
    format_wide_string,
    utf8_length,
)


def spec(text):
    parsed, _ = parse_spec(text, 0, Arguments(()))
    return parsed


@pytest.mark.parametrize("code", [0x41, 0x7F, 0x80, 0xE9, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600])
def test_encoding_matches_utf8(code):
    assert encode_utf8(code) == chr(code).encode("utf-8")
    assert utf8_length(code) == len(chr(code).encode("utf-8"))


def test_largest_encodable_code_takes_four_bytes():
    assert utf8_length(2**21 - 1) == 4
    assert len(encode_utf8(2**21 - 1)) == 4


@pytest.mark.parametrize("code", [2**21, -1])
def test_unencodable_code_rejected(code):
    with pytest.raises(ValueError):
        utf8_length(code)
    with pytest.raises(ValueError):
        encode_utf8(code)


@pytest.mark.parametrize("text", ["c", "5c", "-5c"])
def test_char_matches_standard_formatting(text):
    assert format_char("A", spec(text)) == (("%" + text) % "A").encode()


def test_char_from_int_and_zero_fill():
    assert format_char(65, spec("c")) == b"A"
    assert format_char(ord("A"), spec("04c")) == b"0" * 3 + b"A"


def test_char_int_is_taken_as_a_byte():
    assert format_char(256 + 66, spec("c")) == format_char("B", spec("c"))


def test_percent_sign_as_char():
    assert format_char("%", spec("-3%")) == ("%-3s" % "%").encode()


def test_wide_char_padding_counts_bytes():
    euro = chr(0x20AC)
    assert format_wide_char(euro, spec("5lc")) == b" " * 2 + euro.encode("utf-8")
    assert format_wide_char(0x20AC, spec("-5lc")) == euro.encode("utf-8") + b" " * 2


def test_wide_char_unencodable():
    with pytest.raises(ValueError):
        format_wide_char(2**21, spec("lc"))


@pytest.mark.parametrize(
    "text, value",
    [("s", "hello"), ("10.3s", "hello"), ("-8s", "abc"), (".2s", "abc"), ("3s", "abcdef"), ("s", "")],
)
def test_string_matches_standard_formatting(text, value):
    assert format_string(value.encode(), spec(text)) == (("%" + text) % value).encode()


def test_null_string():
    assert format_string(None, spec("s")) == b"(null)"
    assert format_string(None, spec(".3s")) == b"(null)"[:3]


def test_string_stops_at_nul():
    assert format_string(b"ab\0cd", spec("s")) == b"ab"


def test_string_zero_fill():
    assert format_string(b"abc", spec("05s")) == b"0" * 2 + b"abc"


def test_raw_conversion_escapes_unprintable():
    assert format_string(b"a\nb", spec("r")) == b"a\\12b"


def test_raw_conversion_keeps_printable():
    assert format_string(b"plain text", spec("r")) == b"plain text"


def test_wide_string_whole_characters_within_precision():
    text = "é" + chr(0x20AC)
    assert format_wide_string(text, spec(".3ls")) == "é".encode("utf-8")
    assert format_wide_string(text, spec(".5ls")) == text.encode("utf-8")
    assert format_wide_string(text, spec(".0ls")) == b""


def test_wide_string_width_counts_bytes():
    text = "é" + chr(0x20AC)
    assert format_wide_string(text, spec("6ls")) == b" " + text.encode("utf-8")
    assert format_wide_string(text, spec("-6ls")) == text.encode("utf-8") + b" "


def test_wide_string_from_code_list_stops_at_zero():
    assert format_wide_string([0x41, 0x42, 0, 0x43], spec("ls")) == b"AB"


def test_wide_null_string():
    assert format_wide_string(None, spec("ls")) == b"(null)"


def test_wide_string_unencodable_raises_when_right_aligned():
    with pytest.raises(ValueError):
        format_wide_string([0x41, 2**21], spec("ls"))


def test_wide_string_unencodable_left_aligned_stops_and_pads():
    assert format_wide_string([0x41, 2**21], spec("-4ls")) == b"A" + b" " * 4


def test_bad_string_type_rejected():
    with pytest.raises(TypeError):
        format_string(42, spec("s"))