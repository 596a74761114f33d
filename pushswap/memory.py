"""Byte-buffer helpers working on bytearrays and other byte sequences."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_span(length: int, start: int, count: int) -> None:
    if count < 0 or start < 0:
        raise ValueError("offsets and counts must not be negative")
    if start + count > length:
        raise IndexError(
            f"span of {count} bytes at offset {start} exceeds buffer of {length} bytes"
        )


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    _check_span(len(buffer), 0, count)
    buffer[:count] = bytes(count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes with the low byte of ``value``."""
    _check_span(len(buffer), 0, count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def memcpy(dest: bytearray, src: Bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dest``."""
    _check_span(len(dest), 0, count)
    _check_span(len(src), 0, count)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled as if the source were copied first.
    """
    _check_span(len(buffer), dest, count)
    _check_span(len(buffer), src, count)
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(buffer: Bytes, value: int, size: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` within ``size`` bytes, or None."""
    _check_span(len(buffer), 0, size)
    target = value & 0xFF
    index = bytes(buffer[:size]).find(target)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, size: int) -> int:
    """Compare ``size`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(len(first), 0, size)
    _check_span(len(second), 0, size)
    for a, b in zip(bytes(first[:size]), bytes(second[:size])):
        if a != b:
            return a - b
    return 0