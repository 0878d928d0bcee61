"""Writing characters, strings and numbers to a file descriptor or stream.

The target is either an integer file descriptor or a file object. Text
streams receive ``str``; descriptors and binary streams receive UTF-8 bytes.
"""

from __future__ import annotations

import io
import os
from typing import IO, Union

from .strings import StrLike, strdup

Target = Union[int, IO]


def _emit(fd: Target, data: str | bytes) -> None:
    if isinstance(fd, int):
        payload = data.encode() if isinstance(data, str) else bytes(data)
        view = memoryview(payload)
        while view:
            written = os.write(fd, view)
            view = view[written:]
    elif isinstance(fd, io.TextIOBase):
        fd.write(data if isinstance(data, str) else bytes(data).decode())
    else:
        fd.write(data.encode() if isinstance(data, str) else bytes(data))


def put_char(c: int | str, fd: Target) -> None:
    """Write one character: a one-character string or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        _emit(fd, c)
    elif isinstance(c, int):
        _emit(fd, bytes([c]))
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def put_str(s: StrLike, fd: Target) -> None:
    """Write ``s`` up to its first NUL."""
    _emit(fd, strdup(s))


def put_endl(s: StrLike, fd: Target) -> None:
    """Write ``s`` up to its first NUL, then a newline."""
    put_str(s, fd)
    _emit(fd, "\n")


def put_nbr(n: int, fd: Target) -> None:
    """Write ``n`` in decimal, with a leading minus sign when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _emit(fd, str(n))