"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List


def _swap(stack: Deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: Deque[int], dst: Deque[int]) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: Deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of every move made.

    ``a`` starts with the given items and ``b`` starts empty. A move that
    has nothing to act on leaves the stacks as they are but is still logged.
    """

    def __init__(self, items: Iterable[int]) -> None:
        self.a: Deque[int] = deque(items)
        self.b: Deque[int] = deque()
        self.moves: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        _swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        _swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self.moves.append("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self.moves.append("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.moves.append("rrr")