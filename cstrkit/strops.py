"""Building new strings from existing ones: slicing, joining, trimming,
splitting, number formatting and per-character mapping.

Inputs are read up to their first NUL, like the routines in
:mod:`cstrkit.strings`, and results are of the same kind as the input
(``str`` for text, bytes-like for byte strings).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .strings import StrLike, strdup


def _require_unsigned(value: int, name: str) -> None:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _separator(text: str | bytes | bytearray, sep: int | str) -> str | bytes:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {len(sep)} characters")
        code = ord(sep)
    elif isinstance(sep, int):
        code = sep
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(sep).__name__}")
    if isinstance(text, str):
        if not 0 <= code <= 0x10FFFF:
            raise ValueError(f"character code out of range: {code}")
        return chr(code)
    if not 0 <= code <= 0xFF:
        raise ValueError(f"byte value out of range: {code}")
    return bytes([code])


def substr(s: StrLike, start: int, length: int) -> str | bytes | bytearray:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of the string gives an empty result.
    """
    _require_unsigned(start, "start")
    _require_unsigned(length, "length")
    text = strdup(s)
    return text[start:start + length]


def strjoin(s1: StrLike, s2: StrLike) -> str | bytes | bytearray:
    """Return ``s1`` followed by ``s2``, each read up to its first NUL."""
    first = strdup(s1)
    second = strdup(s2)
    if isinstance(first, str) != isinstance(second, str):
        raise TypeError("cannot join text with a byte string")
    return first + second


def strtrim(s: StrLike, charset: StrLike) -> str | bytes | bytearray:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    text = strdup(s)
    chars = strdup(charset)
    if isinstance(text, str) != isinstance(chars, str):
        raise TypeError("string and character set must both be text or both be bytes")
    return text.strip(chars)


def split(s: StrLike, sep: int | str) -> list[Any]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    text = strdup(s)
    needle = _separator(text, sep)
    return [part for part in text.split(needle) if part]


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strmapi(s: StrLike, f: Callable[[int, Any], Any]) -> str | bytes:
    """Build a new string from ``f(index, character)`` for each character of ``s``.

    For text, ``f`` receives and returns one-character strings; for byte
    strings, it receives and returns byte values.
    """
    text = strdup(s)
    if isinstance(text, str):
        return "".join(f(index, char) for index, char in enumerate(text))
    return bytes(f(index, value) for index, value in enumerate(text))