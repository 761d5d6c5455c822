"""Small integer helpers."""

from __future__ import annotations


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def absolute(x: int) -> int:
    """Return the magnitude of ``x``."""
    _require_int(x)
    return x if x > 0 else -x


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading '-' when negative."""
    _require_int(n)
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits