"""Formatted output with printf-style conversion specifications.

Supported conversions: ``d i u o x X p b`` and ``D I O U`` for integers,
``f F e E g G`` for floating point, ``c C s S r`` for characters and
strings, and ``%%``.  Any other conversion character is printed itself,
padded to the field width.  Arguments can be picked by number with ``N$``.

When a wide character cannot be encoded, output stops.  What the earlier
conversions produced is kept.  The literal text that came right before
the failing conversion is dropped.
"""

from __future__ import annotations

import io
import sys
from typing import IO, Any, Optional, Union

from .floatfmt import format_float
from .intfmt import format_integer
from .scan import Arguments, FormatSpec, Length, parse_spec
from .textfmt import (
    format_char,
    format_string,
    format_wide_char,
    format_wide_string,
    utf8_length,
)

Format = Union[str, bytes, bytearray]

_INTEGER_CONVERSIONS = frozenset("diouxDIOUXpb")
_FLOAT_CONVERSIONS = frozenset("fFeEgG")
_STRING_CONVERSIONS = frozenset("sSr")


class _Unencodable(Exception):
    """Raised internally when a wide character cannot be written."""


def _as_bytes(fmt: Format) -> bytes:
    if fmt is None:
        raise TypeError("format must not be None")
    if isinstance(fmt, str):
        return fmt.encode("utf-8")
    if isinstance(fmt, (bytes, bytearray)):
        return bytes(fmt)
    raise TypeError(f"expected str or bytes format, got {type(fmt).__name__}")


def _fetch(spec: FormatSpec, args: Arguments, moves: bool = True) -> Any:
    if spec.arg_num == 0:
        return args.take()
    return args.jump(spec.arg_num) if moves else args.get(spec.arg_num)


def _wide_code(value: Any) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a code point, got {type(value).__name__}")
    return value


def _convert_string(spec: FormatSpec, args: Arguments) -> bytes:
    if spec.conversion != "r" and (spec.length == Length.LONG or spec.conversion == "S"):
        value = _fetch(spec, args, moves=False)
        try:
            return format_wide_string(value, spec)
        except ValueError as exc:
            raise _Unencodable from exc
    return format_string(_fetch(spec, args, moves=False), spec)


def _convert_char(spec: FormatSpec, args: Arguments) -> bytes:
    if spec.conversion not in ("c", "C"):
        return format_char(spec.conversion, spec)
    if spec.length == Length.LONG or spec.conversion == "C":
        code = _wide_code(_fetch(spec, args))
        try:
            utf8_length(code)
        except ValueError as exc:
            raise _Unencodable from exc
        return format_wide_char(code, spec)
    return format_char(_fetch(spec, args), spec)


def _convert(spec: FormatSpec, args: Arguments) -> bytes:
    conv = spec.conversion
    if not conv:
        return b""
    if conv in _STRING_CONVERSIONS:
        return _convert_string(spec, args)
    if conv in _INTEGER_CONVERSIONS:
        return format_integer(_fetch(spec, args), spec).encode("ascii")
    if conv in _FLOAT_CONVERSIONS:
        return format_float(_fetch(spec, args), spec).encode("ascii")
    return _convert_char(spec, args)


def format_bytes(fmt: Format, *args: Any) -> bytes:
    """Return the bytes that ``fmt`` produces with ``args``."""
    data = _as_bytes(fmt)
    arguments = Arguments(args)
    out = bytearray()
    pos = 0
    while pos < len(data):
        start = data.find(b"%", pos)
        if start < 0:
            out += data[pos:]
            break
        literal = data[pos:start]
        spec, pos = parse_spec(data, start + 1, arguments)
        try:
            field = _convert(spec, arguments)
        except _Unencodable:
            break
        out += literal
        out += field
    return bytes(out)


def _write(stream: IO, data: bytes) -> None:
    target = getattr(stream, "buffer", stream)
    if isinstance(target, io.TextIOBase):
        target.write(data.decode("utf-8", "surrogateescape"))
    else:
        target.write(data)
    if hasattr(target, "flush"):
        target.flush()


def printf(fmt: Format, *args: Any, stream: Optional[IO] = None) -> int:
    """Write the formatted output to ``stream`` (standard output by default).

    Returns the number of bytes produced.
    """
    data = format_bytes(fmt, *args)
    _write(sys.stdout if stream is None else stream, data)
    return len(data)