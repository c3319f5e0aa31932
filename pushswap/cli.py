"""The command: print the instructions that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .chunks import sort_chunks
from .small import sort_five, sort_four, sort_three
from .stacks import Stacks
from .validate import InputError, parse_arguments


def choose_sort(stacks: Stacks, count: int) -> None:
    """Sort ``stacks`` with the strategy suited to ``count`` values."""
    if count < 4:
        sort_three(stacks)
    elif count == 4:
        sort_four(stacks)
    elif count == 5:
        sort_five(stacks)
    else:
        sort_chunks(stacks)


def sort_operations(args: Sequence[str]) -> list[str]:
    """The instructions that sort the values given as arguments.

    Raises InputError for invalid input. Nothing is needed for no value,
    one value, or values already in order.
    """
    values = parse_arguments(list(args))
    if len(values) <= 1:
        return []
    stacks = Stacks(values)
    if stacks.is_sorted():
        return []
    stacks.update_median_a()
    choose_sort(stacks, len(values))
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line, or ``Error`` for invalid input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        operations = sort_operations(args)
    except InputError:
        print("Error")
        return 0
    sys.stdout.write("".join(f"{name}\n" for name in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())