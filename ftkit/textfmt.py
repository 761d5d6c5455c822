"""Character and string conversions: ``c C s S r``.

The formatting functions return the field as ``bytes``.  Wide
characters are written as UTF-8; code points of 2**21 and above, and
negative ones, cannot be encoded and raise ``ValueError``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from .chars import is_print
from .scan import FormatSpec

_NULL = b"(null)"

ByteText = Union[str, bytes, bytearray, memoryview]
WideText = Union[str, Iterable[int]]


def utf8_length(code: int) -> int:
    """Return how many bytes the UTF-8 form of ``code`` takes."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int code point, got {type(code).__name__}")
    if code < 0 or code >> 21:
        raise ValueError(f"code point {code} cannot be encoded")
    if code >> 16:
        return 4
    if code >> 11:
        return 3
    if code >> 7:
        return 2
    return 1


def encode_utf8(code: int) -> bytes:
    """Return the UTF-8 bytes of ``code``."""
    size = utf8_length(code)
    if size == 1:
        return bytes([code])
    if size == 2:
        return bytes([0xC0 | code >> 6, 0x80 | code & 0x3F])
    if size == 3:
        return bytes([0xE0 | code >> 12, 0x80 | (code >> 6) & 0x3F, 0x80 | code & 0x3F])
    return bytes(
        [
            0xF0 | code >> 18,
            0x80 | (code >> 12) & 0x3F,
            0x80 | (code >> 6) & 0x3F,
            0x80 | code & 0x3F,
        ]
    )


def _padding(spec: FormatSpec, length: int) -> bytes:
    return (b"0" if spec.zero else b" ") * max(0, spec.width - length)


def _limit(spec: FormatSpec) -> Optional[int]:
    if spec.precision is None or spec.precision < 0:
        return None
    return spec.precision


def _byte(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError("expected a character, got bool")
    if isinstance(value, int):
        return value & 0xFF
    if isinstance(value, (bytes, bytearray, str)):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        code = value[0] if not isinstance(value, str) else ord(value)
        if code > 0xFF:
            raise ValueError(f"character {value!r} does not fit in a byte")
        return code
    raise TypeError(f"expected a character, got {type(value).__name__}")


def _code_point(value: object) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a code point, got {type(value).__name__}")
    return value


def format_char(value: object, spec: FormatSpec) -> bytes:
    """Format one byte, padded to the field width."""
    body = bytes([_byte(value)])
    pad = (b"0" if spec.zero else b" ") * max(0, spec.width - 1)
    return body + pad if spec.minus else pad + body


def format_wide_char(code: object, spec: FormatSpec) -> bytes:
    """Format one code point as UTF-8, padded to the field width in bytes."""
    body = encode_utf8(_code_point(code))
    pad = (b"0" if spec.zero else b" ") * max(0, spec.width - len(body))
    return body + pad if spec.minus else pad + body


def _c_string(value: ByteText) -> bytes:
    if isinstance(value, str):
        raw = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    return raw.split(b"\0", 1)[0]


def _visible(byte: int) -> bytes:
    if is_print(byte):
        return bytes([byte])
    signed = byte - 256 if byte >= 128 else byte
    return b"\\" + format(signed & 0xFFFFFFFF, "o").encode("ascii")


def format_string(value: Optional[ByteText], spec: FormatSpec) -> bytes:
    """Format a byte string, cut to the precision and padded to the width.

    None prints as ``(null)``.  With the ``r`` conversion, unprintable
    bytes are shown as a backslash and their octal code.
    """
    data = _NULL if value is None else _c_string(value)
    limit = _limit(spec)
    if limit is not None:
        data = data[:limit]
    pad = _padding(spec, len(data))
    if spec.conversion == "r":
        body = b"".join(_visible(byte) for byte in data)
    else:
        body = data
    return body + pad if spec.minus else pad + body


def _codes(value: WideText) -> List[int]:
    codes: List[int] = []
    for item in value:
        code = _code_point(item)
        if code == 0:
            break
        codes.append(code)
    return codes


def _measure(codes: List[int], limit: Optional[int]) -> int:
    count = 0
    for code in codes:
        try:
            size = utf8_length(code)
        except ValueError:
            return 0
        if limit is not None and count + size > limit:
            return count
        count += size
    return count


def _encode_wide(codes: List[int], limit: Optional[int], strict: bool) -> bytes:
    out = bytearray()
    used = 0
    piece = b""
    for code in codes:
        if limit is not None and used >= limit:
            break
        try:
            piece = encode_utf8(code)
        except ValueError:
            if strict:
                raise
            break
        out += piece
        used += len(piece)
    if limit is not None and used > limit:
        del out[-len(piece):]
    return bytes(out)


def format_wide_string(value: Optional[WideText], spec: FormatSpec) -> bytes:
    """Format a wide string as UTF-8, with precision and width counted in bytes.

    A character that would cross the precision is left out whole.  None
    prints as ``(null)``.  An unencodable code point raises ``ValueError``
    unless the field is left-aligned, where output stops before it.
    """
    if value is None:
        return format_string(None, spec)
    codes = _codes(value)
    limit = _limit(spec)
    pad = _padding(spec, _measure(codes, limit))
    if not spec.minus:
        return pad + _encode_wide(codes, limit, strict=True)
    return _encode_wide(codes, limit, strict=False) + pad