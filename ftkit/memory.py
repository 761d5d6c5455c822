"""Byte-buffer operations over ``bytearray`` and other byte sequences.

Buffers are mutable ``bytearray`` objects where written to; sources may be
any bytes-like sequence.  Byte values are taken modulo 256.  Requests that
reach past the end of a buffer raise ``IndexError``.
"""

from __future__ import annotations

from typing import Optional

BytesLike = "bytes | bytearray | memoryview"


def _check_span(name: str, buf, start: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"{name}: span [{start}, {start + n}) exceeds buffer of length {len(buf)}"
        )


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_span("memset", buf, 0, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf`` and return ``buf``."""
    if n == 0:
        return buf
    return memset(buf, 0, n)


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    return bytearray(size)


def memcpy(dst: bytearray, src, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_span("memcpy", dst, 0, n)
    _check_span("memcpy", src, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` until byte ``c`` is copied or ``n`` bytes are.

    Returns the index in ``dst`` just past the copy of ``c``, or None if
    ``c`` was not among the first ``n`` bytes (all ``n`` are then copied).
    """
    target = c & 0xFF
    _check_span("memccpy", src, 0, n)
    found = bytes(src[:n]).find(target)
    count = n if found < 0 else found + 1
    _check_span("memccpy", dst, 0, count)
    dst[:count] = bytes(src[:count])
    return None if found < 0 else count


def memchr(s, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` within the first ``n`` bytes of ``s``, or None."""
    _check_span("memchr", s, 0, n)
    found = bytes(s[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_span("memcmp", s1, 0, n)
    _check_span("memcmp", s2, 0, n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied
    out first.  Returns ``buf``.
    """
    _check_span("memmove", buf, src, n)
    _check_span("memmove", buf, dst, n)
    if dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf