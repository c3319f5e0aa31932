"""String helpers with terminator-aware semantics.

A string is read up to its first ``"\\0"``, which plays the part of the end
marker; positions are returned as indexes, and ``None`` means not found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

from .validate import parse_int

Char = Union[str, int]

_NUL = "\0"


def _text(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: Char) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Number of characters before the first terminator."""
    return len(_text(s))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``; a size of 0 copies nothing.
    """
    text = _text(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so that the result fits in ``size`` with its terminator.

    Returns the result and the length it tried to create. When ``dst`` already
    fills ``size``, it is returned unchanged with ``size + len(src)``.
    """
    head = _text(dst)
    tail = _text(src)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for the terminator gives the length."""
    text = _text(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return index if index >= 0 else None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for the terminator gives the length."""
    text = _text(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None


def _compare(s1: str, s2: str, n: Optional[int]) -> int:
    pairs = zip_longest(_text(s1) + _NUL, _text(s2) + _NUL, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order, 0 means equal."""
    return _compare(s1, s2, max(n, 0))


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign tells the order, 0 means equal."""
    return _compare(s1, s2, None)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    needle = _text(little)
    if not needle:
        return 0
    haystack = _text(big)
    index = haystack.find(needle, 0, min(max(length, 0), len(haystack)))
    return index if index >= 0 else None


def atoi(text: str) -> int:
    """Read a leading integer: whitespace, one optional sign, then digits; 0 if none."""
    return parse_int(_text(text))