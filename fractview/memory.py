"""Byte-buffer helpers: fill, copy, move, search and compare.

Buffers are bytes-like objects. Every function checks its count against
the buffers it touches and raises ``ValueError`` rather than reading or
writing past their end. Byte values are reduced modulo 256, the way a C
``unsigned char`` would be.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBytes = Union[bytearray, memoryview]

SSIZE_MAX = 2**63 - 1


def _count(n: int, name: str = "n") -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def _fits(n: int, data: BytesLike, name: str) -> None:
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def _byte(value: int) -> int:
    return value & 0xFF


def fill(buffer: WritableBytes, value: int, n: int) -> WritableBytes:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` and return it."""
    _count(n)
    _fits(n, buffer, "buffer")
    buffer[:n] = bytes([_byte(value)]) * n
    return buffer


def zero(buffer: WritableBytes, n: int) -> WritableBytes:
    """Set the first ``n`` bytes of ``buffer`` to zero and return it."""
    return fill(buffer, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each.

    Raises ``OverflowError`` when the total would not fit in a signed
    64-bit size.
    """
    _count(count, "count")
    _count(size, "size")
    total = count * size
    if total > SSIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes is too large to allocate")
    return bytearray(total)


def copy(dst: WritableBytes, src: BytesLike, n: int) -> WritableBytes:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _count(n)
    _fits(n, dst, "dst")
    _fits(n, src, "src")
    dst[:n] = bytes(src[:n])
    return dst


def move(buffer: WritableBytes, dest: int, source: int, n: int) -> WritableBytes:
    """Move ``n`` bytes within ``buffer`` from ``source`` to ``dest``.

    The regions may overlap; the result is as if the bytes were first
    copied aside. Returns ``buffer``.
    """
    _count(n)
    _count(dest, "dest")
    _count(source, "source")
    if dest + n > len(buffer) or source + n > len(buffer):
        raise ValueError(
            f"moving {n} bytes from {source} to {dest} overruns "
            f"a buffer of {len(buffer)} bytes"
        )
    buffer[dest : dest + n] = bytes(buffer[source : source + n])
    return buffer


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first ``value`` among the first ``n`` bytes, or ``None``."""
    _count(n)
    _fits(n, data, "data")
    index = bytes(data[:n]).find(bytes([_byte(value)]))
    return None if index < 0 else index


def compare(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns zero when they are equal, otherwise the difference of the
    first pair of bytes that differ.
    """
    _count(n)
    _fits(n, first, "first")
    _fits(n, second, "second")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0