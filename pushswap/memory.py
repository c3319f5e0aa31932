"""Operations on raw byte buffers."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > len(buffer) for buffer in buffers):
        raise IndexError(f"byte count {n} exceeds the buffer length")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dst_offset``.

    Overlapping ranges are handled as if the source were copied out first.
    """
    if min(dst_offset, src_offset) < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dst_offset, src_offset) + n > len(buffer):
        raise IndexError("range exceeds the buffer length")
    buffer[dst_offset : dst_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` among the first ``n``."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(s1: Bytes, s2: Bytes, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, or 0."""
    _check_length(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer for ``count`` items of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)