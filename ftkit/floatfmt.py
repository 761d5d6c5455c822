"""Floating-point conversions: ``f F e E g G``.

Every floating conversion is written in fixed-point notation.  The value
is expanded exactly from its binary mantissa and exponent, so any number
of decimal places can be printed without loss.  Rounding to the precision
is half-to-even on the exact value.  ``F`` only changes the spelling of
infinities and NaNs to upper case.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Optional

from .scan import FormatSpec

_FLOAT_CONVERSIONS = frozenset("fFeEgG")
_DEFAULT_PRECISION = 6
_MANTISSA_BITS = 64


def _as_float(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    return float(value)


def _precision(spec: FormatSpec) -> Optional[int]:
    if spec.precision is None or spec.precision < 0:
        return None
    return spec.precision


def _special(value: float, negative: bool, spec: FormatSpec) -> str:
    upper = spec.conversion == "F"
    if math.isnan(value):
        return "NAN" if upper else "nan"
    sign = "-" if negative else ("+" if spec.plus else "")
    return sign + ("INF" if upper else "inf")


def _fixed_zero(precision: Optional[int]) -> str:
    # A zero always keeps its decimal point, even at precision 0.
    places = _DEFAULT_PRECISION if precision is None else precision
    return "0." + "0" * places


def _fixed(magnitude: float, precision: Optional[int], alternate: bool) -> str:
    fraction, exponent = math.frexp(magnitude)
    mantissa = int(fraction * 2**_MANTISSA_BITS)
    shift = exponent - _MANTISSA_BITS
    keep = _DEFAULT_PRECISION if precision is None else precision
    if shift >= 0:
        whole = str(mantissa << shift)
        if precision == 0:
            return whole
        return whole + "." + "0" * keep
    places = -shift
    digits = mantissa * 5**places  # the value is digits / 10**places
    if keep >= places:
        digits *= 10 ** (keep - places)
    else:
        digits, dropped = divmod(digits, 10 ** (places - keep))
        first, rest = divmod(dropped, 10 ** (places - keep - 1))
        if first >= 5 and (rest or digits % 2):
            digits += 1
    if keep == 0:
        return str(digits) + ("." if alternate else "")
    text = str(digits).rjust(keep + 1, "0")
    return f"{text[:-keep]}.{text[-keep:]}"


def float_to_text(value: object, spec: FormatSpec) -> str:
    """Return the digits of ``value`` with its sign, before field padding.

    With the ``0`` flag the digits are zero-filled to the field width
    (one less when ``+`` or space is set) before the sign is added.
    """
    number = _as_float(value)
    negative = math.copysign(1.0, number) < 0
    if math.isnan(number) or math.isinf(number):
        return _special(number, negative, spec)
    precision = _precision(spec)
    if number == 0:
        body = _fixed_zero(precision)
    else:
        body = _fixed(abs(number), precision, spec.alternate)
    if spec.zero:
        target = spec.width - 1 if spec.plus or spec.space else spec.width
        body = body.rjust(target, "0")
    if negative:
        return "-" + body
    if spec.plus:
        return "+" + body
    return body


def format_float(value: object, spec: FormatSpec) -> str:
    """Format ``value`` as a complete field for a floating conversion."""
    if spec.conversion not in _FLOAT_CONVERSIONS:
        raise ValueError(f"not a floating conversion: {spec.conversion!r}")
    text = float_to_text(value, spec)
    width = spec.width
    prefix = ""
    if not spec.plus and "-" not in text and text[0] not in "nN" and spec.space:
        prefix = " "
        width = width - 1 if width else 0
    special = any(ch in text for ch in "nNiI")
    pad = " " * max(0, width - len(text)) if (not spec.zero or special) else ""
    body = text + pad if spec.minus else pad + text
    return prefix + body