"""Byte-buffer helpers: fill, compare, search and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > length:
        raise ValueError(f"{what} holds {length} bytes, {n} requested")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (low 8 bits) and return it."""
    _check_span(len(buffer), n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Readable, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_span(len(data), n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Readable, second: Readable, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(len(first), n, "first")
    _check_span(len(second), n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Optional[Buffer], src: Optional[Readable], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``.

    With no destination and no source nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(len(dest), n, "destination")
    _check_span(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest_start: int, src_start: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buffer`` from ``src_start`` to ``dest_start``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest_start < 0 or src_start < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buffer) - src_start, n, "source region")
    _check_span(len(buffer) - dest_start, n, "destination region")
    buffer[dest_start:dest_start + n] = bytes(buffer[src_start:src_start + n])
    return buffer