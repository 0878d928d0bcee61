"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Only the ASCII ranges count: anything outside them is never a
letter, digit or printable character, and case conversion leaves it alone.
"""

from __future__ import annotations

CharLike = "int | str"


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def isalpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return _is_digit(_code(c))


def isalnum(c: int | str) -> bool:
    """Return True for an ASCII letter or decimal digit."""
    code = _code(c)
    return _is_digit(code) or _is_upper(code) or _is_lower(code)


def isascii(c: int | str) -> bool:
    """Return True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; return anything else unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return _convert(c, code)


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; return anything else unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return _convert(c, code)