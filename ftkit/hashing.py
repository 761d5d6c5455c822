"""String hashing for hash-table bucket selection."""

from __future__ import annotations

from typing import Union

_MASK = (1 << 64) - 1
_SEED = 5381

Hashable = Union[str, bytes, bytearray, memoryview]


def djb2(data: Hashable, capacity: int) -> int:
    """Return the djb2 hash of ``data`` reduced to a bucket index below ``capacity``.

    Text is hashed as its UTF-8 bytes.  Hashing stops at the first NUL
    byte, and the running value wraps at 64 bits.
    """
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    value = _SEED
    for byte in raw.split(b"\0", 1)[0]:
        value = ((value << 5) + value + byte) & _MASK
    return value % capacity