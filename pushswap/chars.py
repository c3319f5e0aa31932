"""Classification and case mapping of single ASCII characters."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: Char) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: Char, first: str, last: str, offset: int) -> Char:
    code = _code(c)
    if ord(first) <= code <= ord(last):
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged.

    A string gives a string back and a code point gives a code point.
    """
    return _shift(c, "a", "z", -32)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged.

    A string gives a string back and a code point gives a code point.
    """
    return _shift(c, "A", "Z", 32)