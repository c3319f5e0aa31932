"""Writing characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional, Union

INT_MIN = -2147483648
INT_MAX = 2147483647


def _write(fd: int, data: bytes) -> int:
    view = memoryview(data)
    total = 0
    while total < len(data):
        total += os.write(fd, view[total:])
    return total


def put_char(c: Union[str, int], fd: int) -> int:
    """Write one character (or one byte given as an integer); return the bytes written."""
    if isinstance(c, int):
        return _write(fd, bytes([c & 0xFF]))
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write(fd, c.encode("utf-8"))


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s``; ``None`` writes nothing."""
    if s is not None:
        _write(fd, s.encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing."""
    if s is not None:
        _write(fd, (s + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    _write(fd, str(n).encode("ascii"))