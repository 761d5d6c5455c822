"""Integer conversions: ``d i u o x X p b``.

The formatting functions return the converted field as a ``str``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from .scan import FormatSpec, Length

_BASES = {"u": 10, "o": 8, "x": 16, "X": 16, "p": 16, "b": 2}
_HEX = ("x", "X")


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def digit(num: int, base: int, upper: bool = False) -> str:
    """Return the character for digit value ``num`` in ``base``."""
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    if not 0 <= num < base:
        raise ValueError(f"digit {num} out of range for base {base}")
    if num < 10:
        return chr(ord("0") + num)
    return chr((ord("A") if upper else ord("a")) + num - 10)


@dataclass
class _Field:
    conversion: str
    width: int
    precision: int
    zero: bool
    minus: bool
    plus: bool
    space: bool
    hash: int
    modl: int
    chars: int = 0
    out: List[str] = field(default_factory=list)

    @classmethod
    def from_spec(cls, spec: FormatSpec) -> "_Field":
        return cls(
            conversion=spec.conversion,
            width=spec.width,
            precision=-1 if spec.precision is None else spec.precision,
            zero=spec.zero,
            minus=spec.minus,
            plus=spec.plus,
            space=spec.space,
            hash=1 if spec.alternate or spec.conversion == "p" else 0,
            modl=1 if spec.long_double else 0,
        )

    def fill(self, ch: str, count: int) -> None:
        if count > 0:
            self.out.extend(ch * count)

    def text(self) -> str:
        return "".join(self.out)


def _append_hash(st: _Field, num: int) -> None:
    conv = st.conversion
    bare_zero = num == 0 and conv in _HEX and st.modl == 0
    if conv == "p" or (conv != "o" and not bare_zero):
        st.out.append("0")
    if conv == "p":
        st.out.append("x")
    elif conv in _HEX and not bare_zero:
        st.out.append(conv)
    elif conv == "o" and (num != 0 or st.precision == 0) and st.precision <= st.chars:
        if st.width > st.chars and not st.minus and st.out:
            st.out.pop()
        st.modl = 1
        st.chars += 1
        st.out.append("0")


def _fill_width(st: _Field, sign: int) -> None:
    if not (st.width > st.precision + sign and st.width > st.chars + sign):
        return
    if st.precision > st.chars:
        st.fill(" ", st.width - st.precision - sign)
    elif st.zero and st.precision < 0:
        if st.conversion in _HEX and st.hash == 1 and st.modl != 1:
            _append_hash(st, sign)
            st.modl = 1
        if st.conversion == "p":
            _append_hash(st, 0)
        st.hash = 3
        st.fill("0", st.width - st.chars - sign)
    else:
        st.fill(" ", st.width - st.chars - sign)


def _fill_precision(st: _Field) -> None:
    if st.precision > st.chars:
        st.fill("0", st.precision - st.chars)
        st.chars -= 1


def _scale(num: int, base: int) -> tuple:
    """Return the highest power of ``base`` not above ``num`` and its exponent."""
    power, count = 1, 0
    while power * base <= num:
        power *= base
        count += 1
    return power, count


def _append_digits(st: _Field, num: int, power: int, base: int, upper: bool) -> None:
    if num == 0 and st.precision == 0:
        return
    while power >= 1:
        st.out.append(digit(num // power, base, upper))
        num %= power
        power //= base


def format_unsigned(num: int, base: int, spec: FormatSpec) -> str:
    """Format a non-negative ``num`` in ``base`` according to ``spec``."""
    _require_int(num)
    if num < 0:
        raise ValueError(f"unsigned value expected, got {num}")
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    st = _Field.from_spec(spec)
    conv = st.conversion
    st.chars = 0 if num == 0 and st.precision == 0 else 1
    sign = 2 if conv == "p" or (st.hash == 1 and conv not in ("u", "o") and num != 0) else 0
    power, count = _scale(num, base)
    st.chars += count
    if not st.minus:
        _fill_width(st, sign)
    if (conv == "p" and st.hash != 3) or (conv != "p" and st.hash == 1):
        _append_hash(st, num)
    _fill_precision(st)
    _append_digits(st, num, power, base, conv == "X")
    if st.minus:
        _fill_width(st, sign)
    return st.text()


def _append_sign(st: _Field, num: int) -> None:
    if num < 0:
        st.out.append("-")
    elif st.plus:
        st.out.append("+")
    elif st.space:
        st.out.append(" ")


def format_signed(num: int, spec: FormatSpec) -> str:
    """Format a signed ``num`` in decimal according to ``spec``."""
    _require_int(num)
    st = _Field.from_spec(spec)
    st.chars = 0 if num == 0 and st.precision == 0 else 1
    sign = 1 if num < 0 or st.space or st.plus else 0
    magnitude = -num if num < 0 else num
    power, count = _scale(magnitude, 10)
    st.chars += count
    if not st.minus and st.zero and st.precision < 0:
        _append_sign(st, num)
    if not st.minus:
        _fill_width(st, sign)
    if not st.zero or st.precision >= 0:
        _append_sign(st, num)
    _fill_precision(st)
    _append_digits(st, magnitude, power, 10, False)
    if st.minus:
        _fill_width(st, sign)
    return st.text()


def _signed_bits(length: Length) -> int:
    if length == Length.CHAR:
        return 8
    if length == Length.SHORT:
        return 16
    if length in (Length.NONE, Length.INT):
        return 32
    return 64


def format_integer(value: int, spec: FormatSpec) -> str:
    """Format an integer argument for an integer conversion.

    The value is taken as a 64-bit machine integer and narrowed to the
    width its length modifier names; ``p`` always uses 64 bits.
    """
    _require_int(value)
    conv = spec.conversion
    if conv in ("D", "I", "O", "U"):
        spec = replace(spec, conversion=conv.lower(), length=Length.LONG)
        conv = spec.conversion
    number = _wrap(value, 64, True)
    if conv in ("d", "i"):
        return format_signed(_wrap(number, _signed_bits(spec.length), True), spec)
    if conv not in _BASES:
        raise ValueError(f"not an integer conversion: {conv!r}")
    bits = 64 if conv == "p" else _signed_bits(spec.length)
    return format_unsigned(_wrap(number, bits, False), _BASES[conv], spec)