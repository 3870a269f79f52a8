"""Byte-buffer helpers: fill, search, compare, copy and move."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: bytes | bytearray) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (taken mod 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer``."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > SIZE_MAX // size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``count``, or None."""
    if count < 0:
        raise ValueError("count must not be negative")
    index = data.find(bytes([value & 0xFF]), 0, count)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Difference of the first differing bytes within ``count``, or 0."""
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Move ``count`` bytes within ``dest``; the regions may overlap."""
    if min(dest_offset, src_offset, count) < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest_offset, src_offset) + count > len(dest):
        raise ValueError("move runs past the end of the buffer")
    dest[dest_offset:dest_offset + count] = bytes(dest[src_offset:src_offset + count])
    return dest