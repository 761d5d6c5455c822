"""Parsing of printf-style conversion specifications.

A specification is everything after a ``%`` up to and including its
conversion character: flags, field width, precision, length modifiers
and an optional ``N$`` argument number.  Widths and precisions may come
from the argument list through ``*`` (the next argument) or ``*N$``
(argument number N).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence, Tuple, Union

from .chars import is_digit, is_space

Text = Union[str, bytes, bytearray]

_NOT_CONVERSION = "'*+,-.0123456789lhLjtz#$"


class Length(IntEnum):
    """Integer length modifiers, ordered from narrowest to widest."""

    NONE = 0
    CHAR = 1
    SHORT = 2
    INT = 3
    LONG = 4
    LONGLONG = 5


@dataclass
class FormatSpec:
    """One parsed conversion specification.

    ``precision`` is None when no precision was given.  ``arg_num`` is the
    1-based argument number from an ``N$`` prefix, or 0 for the next one.
    ``conversion`` is the empty string when the text ended first.
    """

    conversion: str = ""
    zero: bool = False
    minus: bool = False
    plus: bool = False
    alternate: bool = False
    space: bool = False
    length: Length = Length.NONE
    long_double: bool = False
    width: int = 0
    precision: Optional[int] = None
    arg_num: int = 0


class Arguments:
    """The values handed to a formatting call, with a cursor for the next one."""

    def __init__(self, values: Sequence[Any]) -> None:
        self.values = tuple(values)
        self.cursor = 0

    def take(self) -> Any:
        """Return the next argument and move past it."""
        if self.cursor >= len(self.values):
            raise IndexError("not enough arguments for format")
        value = self.values[self.cursor]
        self.cursor += 1
        return value

    def get(self, number: int) -> Any:
        """Return argument ``number`` (counted from 1) without moving the cursor."""
        if number < 1 or number > len(self.values):
            raise IndexError(f"no argument number {number}")
        return self.values[number - 1]

    def jump(self, number: int) -> Any:
        """Return argument ``number`` and continue after it."""
        value = self.get(number)
        self.cursor = number
        return value


def _at(text: Text, pos: int) -> str:
    if pos < 0 or pos >= len(text):
        return "\0"
    ch = text[pos]
    return chr(ch) if isinstance(ch, int) else ch


def _int_arg(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an int argument, got {type(value).__name__}")
    return int(value)


def parse_integer(text: Text, pos: int) -> Tuple[int, int]:
    """Read a signed decimal integer starting at ``pos``.

    Leading whitespace is skipped.  Returns the value and the position
    after the last digit; when no number follows, returns 0 and the
    position after the whitespace.
    """
    while is_space(_at(text, pos)):
        pos += 1
    ch = _at(text, pos)
    if not (is_digit(ch) or (ch in "+-" and is_digit(_at(text, pos + 1)))):
        return 0, pos
    negative = ch == "-"
    if ch in "+-":
        pos += 1
    value = 0
    while is_digit(ch := _at(text, pos)):
        value = value * 10 + (ord(ch) - ord("0"))
        pos += 1
    return (-value if negative else value), pos


def is_conversion_char(text: Text, pos: int) -> bool:
    """Tell whether the character at ``pos`` ends a specification."""
    ch = _at(text, pos)
    code = ord(ch)
    if code <= 32 or code >= 127:
        return False
    return ch not in _NOT_CONVERSION


def _apply_flag(spec: FormatSpec, text: Text, pos: int) -> None:
    ch = _at(text, pos)
    if ch == "0":
        prev = _at(text, pos - 1)
        if prev <= "0" or prev > "9":
            spec.zero = True
    elif ch == "-":
        spec.minus = True
    elif ch == "+":
        spec.plus = True
    elif ch == "#":
        spec.alternate = True
    elif ch == " ":
        spec.space = True


def _apply_length(spec: FormatSpec, ch: str) -> None:
    if ch == "h":
        if spec.length < Length.SHORT:
            spec.length = Length.SHORT
        elif spec.length == Length.SHORT:
            spec.length = Length.CHAR
    elif ch == "l":
        if spec.length < Length.LONG or spec.length == Length.LONGLONG:
            spec.length = Length.LONG
        elif spec.length == Length.LONG:
            spec.length = Length.LONGLONG
    elif ch in "jtz":
        spec.length = Length.LONGLONG
    elif ch == "L":
        spec.long_double = True


def _read_precision(spec: FormatSpec, text: Text, pos: int, args: Arguments) -> int:
    pos += 1
    if _at(text, pos) != "*":
        spec.precision, pos = parse_integer(text, pos)
        return pos
    pos += 1
    after_star = pos
    if is_digit(_at(text, pos)):
        number, pos = parse_integer(text, pos)
        pos += 1
        if _at(text, pos) == "$":
            spec.precision = -number
        return pos
    value = _int_arg(args.take())
    spec.precision = None if value < 0 else value
    return after_star


def _read_star_width(spec: FormatSpec, text: Text, pos: int, args: Arguments) -> int:
    pos += 1
    if is_digit(_at(text, pos)):
        start = pos
        number, pos = parse_integer(text, pos)
        if _at(text, pos) == "$":
            spec.width = -number
            return pos + 1
        pos = start
    value = _int_arg(args.take())
    if value < 0:
        spec.minus = True
        value = -value
    spec.width = value
    return pos


def _read_width_or_argnum(spec: FormatSpec, text: Text, pos: int) -> int:
    number, pos = parse_integer(text, pos)
    if _at(text, pos) == "$":
        spec.arg_num = number
        return pos + 1
    spec.width = number
    return pos


def _resolve_positional(spec: FormatSpec, args: Arguments) -> None:
    if spec.minus:
        spec.zero = False
    if spec.width < 0:
        value = _int_arg(args.get(-spec.width))
        if value < 0:
            spec.minus = True
            value = -value
        spec.width = value
    if spec.precision is not None and spec.precision < 0:
        value = _int_arg(args.get(-spec.precision))
        if value < 0:
            spec.minus = True
            value = -value
        spec.precision = value


def parse_spec(text: Text, pos: int, args: Arguments) -> Tuple[FormatSpec, int]:
    """Parse the specification starting at ``pos``, just after a ``%``.

    Arguments consumed by ``*`` are taken from ``args``.  Returns the
    specification and the position after its conversion character.
    """
    spec = FormatSpec()
    while _at(text, pos) != "\0" and not is_conversion_char(text, pos):
        ch = _at(text, pos)
        _apply_flag(spec, text, pos)
        if ch == ".":
            pos = _read_precision(spec, text, pos, args)
        elif ch == "*":
            pos = _read_star_width(spec, text, pos, args)
        elif "1" <= ch <= "9":
            pos = _read_width_or_argnum(spec, text, pos)
        elif ch == "$":
            break
        else:
            _apply_length(spec, ch)
            pos += 1
    pos = min(pos, len(text))
    ch = _at(text, pos)
    spec.conversion = "" if ch == "\0" else ch
    _resolve_positional(spec, args)
    if spec.conversion in ("D", "I", "O", "U"):
        spec.conversion = spec.conversion.lower()
        spec.length = Length.LONG
    if spec.conversion:
        pos += 1
    return spec, pos