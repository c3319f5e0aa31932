"""Building new strings out of existing ones.

Input strings are read up to their first ``"\\0"``, which acts as the end marker.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUL = "\0"


def _text(s: str) -> str:
    return s.split(_NUL, 1)[0]


def strdup(s: str) -> str:
    """A copy of ``s`` up to its terminator."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at index ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return _text(s)[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return _text(s1) + _text(s2)


def split(s: str, sep: str) -> list[str]:
    """The non-empty words of ``s`` separated by the single character ``sep``."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    text = _text(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(_text(s)))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each character of ``s`` in place.

    Iteration stops at a ``"\\0"`` element. When ``func`` returns a character,
    it replaces the one at that index; ``None`` leaves it as it is.
    """
    for index, char in enumerate(s):
        if char == _NUL:
            break
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    return _text(s).strip(_text(charset))


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)