"""Byte-buffer operations on bytearray and bytes objects."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(data: BytesLike, start: int, length: int, name: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start < 0 or start + length > len(data):
        raise IndexError(
            f"{name}: span [{start}, {start + length}) outside buffer of size {len(data)}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (as an unsigned byte)."""
    _check_span(buffer, 0, length, "memset")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def memcpy(dst: Optional[bytearray], src: Optional[BytesLike], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` into the start of ``dst``.

    Returns ``dst``, or None when both buffers are None.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(src, 0, n, "memcpy source")
    _check_span(dst, 0, n, "memcpy destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_span(buffer, src, length, "memmove source")
    _check_span(buffer, dst, length, "memmove destination")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    _check_span(data, 0, n, "memchr")
    target = value & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    if n == 0:
        return 0
    _check_span(a, 0, n, "memcmp first")
    _check_span(b, 0, n, "memcmp second")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow the platform size type.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise MemoryError(f"calloc({count}, {size}) overflows")
    return bytearray(count * size)