"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _count(n: int, *buffers: Buffer) -> int:
    """Check that ``n`` is a usable byte count for every buffer given."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of {len(buf)} bytes")
    return n


def _span(buf: Buffer, offset: int, n: int) -> slice:
    """Slice of ``n`` bytes at ``offset`` that must lie inside ``buf``."""
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if offset + n > len(buf):
        raise IndexError(
            f"range {offset}..{offset + n} exceeds buffer of {len(buf)} bytes"
        )
    return slice(offset, offset + n)


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes.

    A zero count or size gives a one-byte buffer.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        count = size = 1
    return bytearray(count * size)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` taken modulo 256."""
    _count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    if n == 0 or dst is src:
        return dst
    _count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf``; overlapping ranges are handled."""
    _count(n)
    source = _span(buf, src_offset, n)
    target = _span(buf, dst_offset, n)
    if dst_offset != src_offset:
        buf[target] = bytes(buf[source])
    return buf


def memchr(data: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in the first ``n``."""
    _count(n, data)
    wanted = value & 0xFF
    return next((i for i, byte in enumerate(bytes(data[:n])) if byte == wanted), None)


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, else 0."""
    _count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0