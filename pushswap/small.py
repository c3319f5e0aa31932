"""Sorting of short stacks: up to five values."""

from __future__ import annotations

from .stacks import Stacks


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds at most three values, using ``sa`` and ``rra``."""
    a = stacks.a
    if len(a) > 1 and a[0] > a[1]:
        stacks.swap_a()
    if len(a) > 2 and a[0] > a[2]:
        stacks.reverse_rotate_a()
    if len(a) > 2 and a[1] > a[2]:
        stacks.reverse_rotate_a()
    if len(a) > 1 and a[0] > a[1]:
        stacks.swap_a()


def _push_all_back(stacks: Stacks) -> None:
    while stacks.b:
        stacks.push_a()


def sort_four(stacks: Stacks) -> None:
    """Sort four values: park the smallest on ``b``, sort the rest, bring it back."""
    smallest = min(stacks.a)
    while stacks.a[0] != smallest:
        stacks.reverse_rotate_a()
    stacks.push_b()
    sort_three(stacks)
    _push_all_back(stacks)


def sort_five(stacks: Stacks) -> None:
    """Sort five values: park the two smallest on ``b``, sort the rest, bring them back.

    Each smallest value is brought to the top by ``ra`` when it lies at or above
    ``median_a`` and by ``rra`` otherwise.
    """
    for _ in range(2):
        smallest = min(stacks.a)
        while stacks.a[0] != smallest:
            if stacks.a.index(smallest) > stacks.median_a:
                stacks.reverse_rotate_a()
            else:
                stacks.rotate_a()
        stacks.push_b()
    sort_three(stacks)
    _push_all_back(stacks)