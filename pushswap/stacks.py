"""The two stacks and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import pairwise


class Stacks:
    """Stacks ``a`` and ``b`` (top at index 0) and the log of instructions applied."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []
        self.size = len(self.a)
        self.median_a = 0
        self.median_b = 0
        self.update_median_a()

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _push(self, source: deque[int], target: deque[int], name: str) -> None:
        if not source:
            raise IndexError(f"{name}: nothing to push, the source stack is empty")
        target.appendleft(source.popleft())
        self.operations.append(name)

    def _swap(self, stack: deque[int], name: str) -> None:
        if len(stack) < 2:
            raise IndexError(f"{name}: the stack holds fewer than two values")
        stack[0], stack[1] = stack[1], stack[0]
        self.operations.append(name)

    def _rotate(self, stack: deque[int], name: str) -> None:
        if not stack:
            raise IndexError(f"{name}: cannot rotate an empty stack")
        stack.rotate(-1)
        self.operations.append(name)

    def _reverse_rotate(self, stack: deque[int], name: str) -> None:
        # An empty stack is left as it is, but the instruction is still emitted.
        if stack:
            stack.rotate(1)
        self.operations.append(name)

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a`` (``pa``)."""
        self._push(self.b, self.a, "pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b`` (``pb``)."""
        self._push(self.a, self.b, "pb")

    def swap_a(self) -> None:
        """Exchange the first two values of ``a`` (``sa``)."""
        self._swap(self.a, "sa")

    def swap_b(self) -> None:
        """Exchange the first two values of ``b`` (``sb``)."""
        self._swap(self.b, "sb")

    def swap_both(self) -> None:
        """Apply ``sa`` then ``sb``."""
        self.swap_a()
        self.swap_b()

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom (``ra``)."""
        self._rotate(self.a, "ra")

    def rotate_b(self) -> None:
        """Move the top of ``b`` to its bottom (``rb``)."""
        self._rotate(self.b, "rb")

    def rotate_both(self) -> None:
        """Apply ``ra`` then ``rb``."""
        self.rotate_a()
        self.rotate_b()

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top (``rra``)."""
        self._reverse_rotate(self.a, "rra")

    def reverse_rotate_b(self) -> None:
        """Move the bottom of ``b`` to its top (``rrb``)."""
        self._reverse_rotate(self.b, "rrb")

    def reverse_rotate_both(self) -> None:
        """Apply ``rra`` then ``rrb``."""
        self.reverse_rotate_a()
        self.reverse_rotate_b()

    def update_median_a(self) -> None:
        """Set ``median_a`` to half the length of ``a``, or 0 when it holds fewer than two."""
        count = len(self.a)
        self.median_a = count // 2 if count >= 2 else 0

    def update_median_b(self) -> None:
        """Set ``median_b`` to half the length of ``b``.

        When ``b`` holds fewer than two values, ``median_b`` is kept and
        ``median_a`` is reset to 0 instead.
        """
        count = len(self.b)
        if count >= 2:
            self.median_b = count // 2
        else:
            self.median_a = 0

    def is_sorted(self) -> bool:
        """Whether ``a`` is strictly increasing from top to bottom."""
        return all(upper < lower for upper, lower in pairwise(self.a))