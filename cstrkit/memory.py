"""Byte-buffer operations on mutable and immutable byte sequences.

Buffers that are written to must support slice assignment, such as
``bytearray`` or a writable ``memoryview``.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memccpy",
    "memmove",
    "memchr",
    "memcmp",
]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: WritableBuffer, c: int, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_count(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(
    dst: Optional[WritableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[WritableBuffer]:
    """Copy ``n`` bytes from ``src`` into the start of ``dst`` and return ``dst``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: WritableBuffer, src: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first byte ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dst`` just past the
    copied ``c``, or ``None`` if ``c`` was not among the first ``n`` bytes.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    head = bytes(src[:n])
    stop = head.find(bytes([c & 0xFF]))
    if stop >= 0:
        _check_count(stop + 1, dst)
        dst[: stop + 1] = head[: stop + 1]
        return stop + 1
    _check_count(n, dst, src)
    dst[:n] = head
    return None


def memmove(buf: WritableBuffer, dst: int, src: int, length: int) -> WritableBuffer:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"byte count must not be negative, got {length}")
    if src + length > len(buf) or dst + length > len(buf):
        raise ValueError("move runs past the end of the buffer")
    buf[dst : dst + length] = bytes(buf[src : src + length])
    return buf


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte among the first ``n`` equal to ``c``.

    Each byte is read as a signed char before the comparison, so bytes of
    128 and above match only negative values of ``c``. Returns ``None`` when
    there is no match.
    """
    _check_count(n, data)
    for offset, byte in enumerate(bytes(data[:n])):
        signed = byte - 256 if byte >= 128 else byte
        if signed == c:
            return offset
    return None


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0 if they match.
    """
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0