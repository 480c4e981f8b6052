"""Byte-buffer primitives: fill, copy, move, search, compare and allocate."""

import sys
from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")


def _check_span(size: int, offset: int, length: int, what: str) -> None:
    if offset < 0 or offset + length > size:
        raise IndexError(
            f"{what} span [{offset}, {offset + length}) exceeds buffer of {size} bytes"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (mod 256)."""
    _check_length(length)
    _check_span(len(buffer), 0, length, "fill")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def memcpy(
    dst: Optional[bytearray], src: Optional[Bytes], length: int
) -> Optional[bytearray]:
    """Copy ``length`` bytes from ``src`` to the start of ``dst`` and return ``dst``.

    When both are ``None`` nothing is copied and ``None`` is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_length(length)
    _check_span(len(src), 0, length, "source")
    _check_span(len(dst), 0, length, "destination")
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to ``dst``.

    Overlapping regions are handled correctly.
    """
    _check_length(length)
    _check_span(len(buffer), src, length, "source")
    _check_span(len(buffer), dst, length, "destination")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data: Bytes, c: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` (mod 256) within
    the first ``length`` bytes of ``data``, or ``None``."""
    _check_length(length)
    target = c & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:length])) if byte == target),
        None,
    )


def memcmp(data1: Bytes, data2: Bytes, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns the difference of the first unequal pair of bytes, or 0.
    """
    _check_length(length)
    _check_span(len(data1), 0, length, "first")
    _check_span(len(data2), 0, length, "second")
    for left, right in zip(bytes(data1[:length]), bytes(data2[:length])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)