"""Checking and parsing of the command-line values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_ARGUMENT_LENGTH = 18

_WHITESPACE = " \t\n\v\f\r"
_ALLOWED_SYMBOLS = frozenset('-"+')


class InputError(ValueError):
    """Raised when the arguments cannot be sorted; its message is always ``Error``."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a leading integer: skip whitespace, one optional sign, then digits.

    Anything after the digits is ignored; no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def check_lengths(args: Iterable[str]) -> None:
    """Reject any argument longer than 18 characters."""
    if any(len(arg) > MAX_ARGUMENT_LENGTH for arg in args):
        raise InputError()


def check_characters(args: Iterable[str]) -> None:
    """Reject any argument holding something other than digits, ``-``, ``+`` or ``"``."""
    for arg in args:
        for char in arg:
            if not ("0" <= char <= "9" or char in _ALLOWED_SYMBOLS):
                raise InputError()


def check_range(values: Iterable[int]) -> None:
    """Reject any value outside the 32-bit signed range."""
    if any(value > INT_MAX or value < INT_MIN for value in values):
        raise InputError()


def check_duplicates(values: Sequence[int]) -> None:
    """Reject a list in which some value appears twice."""
    if len(set(values)) != len(values):
        raise InputError()


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return their values in order.

    An empty argument list gives an empty list.
    """
    if not args:
        return []
    check_lengths(args)
    check_characters(args)
    values = [parse_int(arg) for arg in args]
    check_range(values)
    check_duplicates(values)
    return values