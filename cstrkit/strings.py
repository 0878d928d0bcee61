"""NUL-terminated string routines over ``str`` and bytes-like values.

A string ends at its first NUL character (``"\\0"`` or ``b"\\0"``) or at
its end, whichever comes first. Search functions return an index into the
string, or None where nothing is found. Functions that write take a mutable
byte buffer such as a ``bytearray`` and change it in place.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice, takewhile, zip_longest
from typing import Union

from .chars import isdigit

StrLike = Union[str, bytes, bytearray, memoryview]

LONG_MAX = 9223372036854775807
# The lower bound exactly as the library defines it.
LONG_MIN = -9223372036854755808

_LONG_MAX_DIV10 = LONG_MAX // 10
_LONG_MIN_DIV10 = -(-LONG_MIN // 10)  # C division truncates toward zero

_WHITESPACE = " \t\n\r\f\v"
_INT_MODULUS = 1 << 32
_INT_HALF = 1 << 31


def _terminated(s: StrLike) -> str | bytes | bytearray:
    """Return ``s`` cut at its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        if isinstance(s, memoryview):
            s = s.tobytes()
        end = s.find(b"\0")
    return s if end < 0 else s[:end]


def _codes(s: str | bytes | bytearray) -> Iterable[int]:
    return map(ord, s) if isinstance(s, str) else s


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _needle(text: str | bytes | bytearray, code: int) -> str | bytes | None:
    if isinstance(text, str):
        return chr(code) if 0 <= code <= 0x10FFFF else None
    return bytes([code]) if 0 <= code <= 0xFF else None


def _require_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _require_bytes(src: StrLike) -> bytes | bytearray:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like when writing into a byte buffer")
    return _terminated(src)


def strlen(s: StrLike) -> int:
    """Return the length of ``s`` up to its first NUL."""
    return len(_terminated(s))


def strlcpy(dst: bytearray | memoryview, src: StrLike, dstsize: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``dstsize`` bytes, NUL included.

    Returns the length of ``src``; a result of ``dstsize`` or more means the
    copy was cut short. Nothing is written when ``dstsize`` is zero.
    """
    _require_size(dstsize, "dstsize")
    source = _require_bytes(src)
    length = len(source)
    if dstsize == 0:
        return length
    count = min(length, dstsize - 1)
    if count >= len(dst):
        raise ValueError("destination buffer too small")
    dst[:count] = source[:count]
    dst[count] = 0
    return length


def strlcat(dst: bytearray | memoryview, src: StrLike, dstsize: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total under ``dstsize``.

    Returns the length of the string it tried to build: the length of ``src``
    plus the smaller of ``dstsize`` and the original length of ``dst``.
    """
    _require_size(dstsize, "dstsize")
    source = _require_bytes(src)
    start = strlen(dst)
    length = len(source)
    result = dstsize + length if dstsize < start else start + length
    if dstsize <= start or length == 0:
        return result
    count = min(length, dstsize - start - 1)
    end = start + count
    if end >= len(dst):
        raise ValueError("destination buffer too small")
    dst[start:end] = source[:count]
    dst[end] = 0
    return result


def strchr(s: StrLike, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(text)
    needle = _needle(text, code)
    if needle is None:
        return None
    index = text.find(needle)
    return None if index < 0 else index


def strrchr(s: StrLike, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(text)
    needle = _needle(text, code)
    if needle is None:
        return None
    index = text.rfind(needle)
    return None if index < 0 else index


def strncmp(s1: StrLike, s2: StrLike, n: int) -> int:
    """Compare at most ``n`` characters as unsigned codes.

    Returns zero when they match, otherwise the difference between the
    first pair of codes that differ.
    """
    _require_size(n, "n")
    pairs = zip_longest(
        _codes(_terminated(s1)), _codes(_terminated(s2)), fillvalue=0
    )
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: StrLike, needle: StrLike, length: int) -> int | None:
    """Return the index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index zero.
    """
    _require_size(length, "length")
    pattern = _terminated(needle)
    if not pattern:
        return 0
    window = _terminated(haystack)[:length]
    index = window.find(pattern)
    return None if index < 0 else index


def strdup(s: StrLike) -> str | bytes | bytearray:
    """Return a new copy of ``s`` up to its first NUL, of the same kind."""
    text = _terminated(s)
    if isinstance(text, str):
        return text
    if isinstance(s, bytearray):
        return bytearray(text)
    return bytes(text)


def _to_int(value: int) -> int:
    return (value + _INT_HALF) % _INT_MODULUS - _INT_HALF


def atoi(s: StrLike) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A value above LONG_MAX gives -1 and one below LONG_MIN gives 0.
    Anything else is reduced to a 32-bit signed int.
    """
    text = _terminated(s)
    if isinstance(text, str):
        text = text.lstrip(_WHITESPACE)
    else:
        text = text.lstrip(_WHITESPACE.encode())
    codes = list(_codes(text))
    sign = -1 if codes and codes[0] == ord("-") else 1
    if codes and codes[0] in (ord("-"), ord("+")):
        codes = codes[1:]
    result = 0
    for code in takewhile(isdigit, codes):
        digit = code - ord("0")
        if result > _LONG_MAX_DIV10 or (
            result == _LONG_MAX_DIV10 and digit > 7 and sign == 1
        ):
            return -1
        if result < _LONG_MIN_DIV10 or (
            result == _LONG_MIN_DIV10 and digit > 8 and sign == -1
        ):
            return 0
        result = result * 10 + sign * digit
    return _to_int(result)