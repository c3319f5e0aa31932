"""A small formatted printer handling the ``c s d i u x X p %`` conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, Union

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _to_uint32(number: int) -> int:
    return number & _UINT32


def _to_int32(number: int) -> int:
    value = number & _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``number`` read as a 32-bit unsigned value."""
    digits = format(_to_uint32(number), "x")
    return digits.upper() if upper else digits


def format_signed(number: int) -> str:
    """Decimal text of ``number`` read as a 32-bit signed value."""
    return str(_to_int32(number))


def format_unsigned(number: int) -> str:
    """Decimal text of ``number`` read as a 32-bit unsigned value."""
    return str(_to_uint32(number))


def format_pointer(address: int) -> str:
    """``0x`` followed by lower-case hex digits, or ``(nil)`` for address 0."""
    value = address & _UINT64
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def format_str(text: Optional[str]) -> str:
    """The text itself, or ``(null)`` for ``None``."""
    if text is None:
        return "(null)"
    if not isinstance(text, str):
        raise TypeError(f"%s expects a string or None, got {type(text).__name__}")
    return text


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"%c expects a single character, got {value!r}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp" or spec == "":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "s":
        return format_str(value)
    if spec == "c":
        return _format_char(value)
    if spec in "di":
        return format_signed(value)
    if spec == "u":
        return format_unsigned(value)
    if spec in "xX":
        return format_hex(value, upper=spec == "X")
    return format_pointer(value)


def render(fmt: str, *args: Any) -> str:
    """The text ``printf`` would write for ``fmt`` and ``args``.

    An unknown conversion character, or a ``%`` at the very end, produces
    nothing and consumes no argument. Extra arguments are ignored.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            pieces.append(_convert(next(chars, ""), remaining))
        else:
            pieces.append(char)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)