import io

import pytest

from ftkit.printf import format_bytes, printf


def test_plain_text_passes_through():
    assert format_bytes("plain text") == b"plain text"


def test_bytes_format_accepted():
    assert format_bytes(b"abc %d", 12) == b"abc 12"


def test_double_percent():
    assert format_bytes("100%%") == b"100%"


def test_trailing_percent_prints_nothing():
    assert format_bytes("abc%") == b"abc"


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%5d", (-7,)),
        ("%-6s|", ("ab",)),
        ("%x", (255,)),
        ("%#x", (255,)),
        ("%X", (48879,)),
        ("%o", (8,)),
        ("%.3f", (3.14159,)),
        ("%+d", (5,)),
        ("%c", ("A",)),
        ("%.2s", ("hello",)),
        ("[%d] [%s]", (3, "x")),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_bytes(fmt, *args) == (fmt % args).encode()


def test_star_width():
    assert format_bytes("%*d", 4, 7) == ("%*d" % (4, 7)).encode()


def test_negative_star_width_left_aligns():
    assert format_bytes("%*d|", -4, 7) == ("%*d|" % (-4, 7)).encode()


def test_positional_strings():
    assert format_bytes("%2$s %1$s", "a", "b") == b"b a"


def test_positional_number_moves_cursor():
    assert format_bytes("%2$d %d", 1, 2, 3) == b"2 3"


def test_pointer_is_prefixed_hex():
    assert format_bytes("%p", 255) == ("%#x" % 255).encode()


def test_binary_conversion():
    assert format_bytes("%b", 5) == format(5, "b").encode()


def test_null_string():
    assert format_bytes("%s", None) == b"(null)"


def test_wide_char_is_utf8():
    assert format_bytes("%C", 0x20AC) == chr(0x20AC).encode("utf-8")


def test_wide_string_is_utf8():
    text = "h\u00e9llo"
    assert format_bytes("%S", text) == text.encode("utf-8")


def test_unknown_conversion_is_printed_padded():
    assert format_bytes("%5k") == b"    k"


def test_unencodable_wide_char_stops_output():
    assert format_bytes("ok %d then %C end", 5, 0x200000) == b"ok 5"


def test_missing_argument_raises():
    with pytest.raises(IndexError):
        format_bytes("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_bytes(None)


def test_printf_writes_to_binary_stream():
    stream = io.BytesIO()
    count = printf("value=%d %s", 9, "done", stream=stream)
    written = stream.getvalue()
    assert written == format_bytes("value=%d %s", 9, "done")
    assert count == len(written)


def test_printf_writes_to_text_stream():
    stream = io.StringIO()
    count = printf("%s-%d", "id", 4, stream=stream)
    assert stream.getvalue() == "%s-%d" % ("id", 4)
    assert count == len(stream.getvalue())


def test_printf_count_is_bytes_not_characters():
    stream = io.BytesIO()
    count = printf("%S", "\u00e9\u00e9", stream=stream)
    assert count == len("\u00e9\u00e9".encode("utf-8"))
    assert stream.getvalue().decode("utf-8") == "\u00e9\u00e9"