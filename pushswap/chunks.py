"""Chunk-based sorting for six or more values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .stacks import Stacks


@dataclass
class ChunkWindow:
    """The range of values ``[low, high]`` currently being moved to ``b``."""

    size: int
    low: int
    high: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("chunk size must be at least 1")

    def __contains__(self, value: int) -> bool:
        return self.low <= value <= self.high

    def advance(self) -> None:
        """Shift the window up by one chunk."""
        self.low += self.size
        self.high += self.size


def chunk_window(stacks: Stacks) -> ChunkWindow:
    """The first window: starts at the smallest value of ``a``.

    The chunk size is the stack size divided by 2 (up to 10 values),
    4 (up to 150) or 10 (more).
    """
    smallest = min(stacks.a)
    if stacks.size <= 10:
        parts = 2
    elif stacks.size <= 150:
        parts = 4
    else:
        parts = 10
    size = stacks.size // parts
    return ChunkWindow(size=size, low=smallest, high=smallest + size)


def _find(stacks: Stacks, window: ChunkWindow, order: Callable[[], Iterable[int]]) -> int:
    while stacks.a:
        for value in order():
            if value in window:
                return value
        window.advance()
    return 0


def find_from_top(stacks: Stacks, window: ChunkWindow) -> int:
    """First value of ``a`` from the top inside the window, advancing it as needed.

    Returns 0 when ``a`` is empty.
    """
    return _find(stacks, window, lambda: iter(stacks.a))


def find_from_bottom(stacks: Stacks, window: ChunkWindow) -> int:
    """First value of ``a`` from the bottom inside the window, advancing it as needed.

    Returns 0 when ``a`` is empty.
    """
    return _find(stacks, window, lambda: reversed(stacks.a))


def _bring_to_top_of_b(stacks: Stacks, value: int) -> None:
    while stacks.b.index(value) != 0:
        if stacks.median_b >= stacks.b.index(value):
            stacks.rotate_b()
        else:
            stacks.reverse_rotate_b()


def push_near(stacks: Stacks) -> None:
    """Push the top of ``a`` onto ``b`` next to its nearest smaller value.

    When the value is above or below everything in ``b``, the largest value of
    ``b`` is brought to the top first, so ``b`` stays in descending order
    around its rotation.
    """
    stacks.update_median_b()
    highest = max(stacks.b)
    smallest = min(stacks.b)
    top = stacks.a[0]
    if top > highest or top < smallest:
        _bring_to_top_of_b(stacks, highest)
    elif smallest < top < highest:
        nearest_less = max(value for value in stacks.b if value < top)
        _bring_to_top_of_b(stacks, nearest_less)
    stacks.push_b()


def _move_to_b(stacks: Stacks, target: int, rotate: Callable[[], None]) -> None:
    while stacks.a[0] != target:
        rotate()
    if stacks.b:
        push_near(stacks)
    else:
        stacks.push_b()


def sort_chunks(stacks: Stacks) -> None:
    """Sort ``a`` by moving it chunk by chunk onto ``b``, then pushing everything back."""
    window = chunk_window(stacks)
    while stacks.a:
        data_top = find_from_top(stacks, window)
        position_top = stacks.a.index(data_top)
        data_bottom = find_from_bottom(stacks, window)
        position_bottom = stacks.a.index(data_bottom)
        stacks.update_median_a()
        if position_top <= stacks.size - position_bottom:
            _move_to_b(stacks, data_top, stacks.rotate_a)
        else:
            _move_to_b(stacks, data_bottom, stacks.reverse_rotate_a)
        if len(stacks.a) == 1:
            push_near(stacks)
    if stacks.b:
        highest = max(stacks.b)
        while stacks.b[0] != highest:
            stacks.reverse_rotate_b()
    while stacks.b:
        stacks.push_a()