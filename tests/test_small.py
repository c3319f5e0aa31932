from itertools import permutations

import pytest

from pushswap.small import sort_five, sort_four, sort_three
from pushswap.stacks import Stacks

_APPLY = {
    "pa": Stacks.push_a,
    "pb": Stacks.push_b,
    "sa": Stacks.swap_a,
    "sb": Stacks.swap_b,
    "ra": Stacks.rotate_a,
    "rb": Stacks.rotate_b,
    "rra": Stacks.reverse_rotate_a,
    "rrb": Stacks.reverse_rotate_b,
}


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        _APPLY[name](stacks)
    return list(stacks.a), list(stacks.b)


@pytest.mark.parametrize("values", list(permutations([-7, 0, 12])))
def test_sort_three_sorts_every_order(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert _replay(values, stacks.operations) == (sorted(values), [])


def test_sort_three_two_values():
    stacks = Stacks([9, 4])
    sort_three(stacks)
    assert list(stacks.a) == [4, 9]
    assert stacks.operations == ["sa"]


def test_sort_three_reversed():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert stacks.operations == ["sa", "rra"]


def test_sort_three_sorted_input_emits_nothing():
    stacks = Stacks([1, 2, 3])
    sort_three(stacks)
    assert stacks.operations == []
    assert list(stacks.a) == [1, 2, 3]


@pytest.mark.parametrize("values", list(permutations([5, -2, 40, 8])))
def test_sort_four_sorts_every_order(values):
    stacks = Stacks(values)
    sort_four(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert _replay(values, stacks.operations) == (sorted(values), [])


@pytest.mark.parametrize("values", list(permutations([-7, 0, 3, 12, 40])))
def test_sort_five_sorts_every_order(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert _replay(values, stacks.operations) == (sorted(values), [])


def test_sort_four_on_empty_stack_raises():
    with pytest.raises(ValueError):
        sort_four(Stacks([]))