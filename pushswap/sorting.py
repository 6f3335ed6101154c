"""Strategies that sort stack ``a`` of a :class:`Stacks` by rank.

Every function here works on ranks (1 for the smallest number), so the
values held in the stacks are expected to be the distinct integers
``1..n``. Small inputs get dedicated routines; larger ones are pushed to
``b`` in chunks and pulled back in descending order.
"""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

from .stacks import Stacks


def root(x: float) -> float:
    """Approximate the square root of ``x`` digit by digit, to six decimals."""
    steps = [1.0]
    for _ in range(6):
        steps.append(steps[-1] / 10)
    result = 0.0
    for step in steps:
        previous = -1.0
        while result * result <= x and result != previous:
            previous = result
            result += step
        result -= step
    return result


def is_sorted(stack: Iterable[int]) -> bool:
    """Return whether ``stack`` is in non-decreasing order, top first."""
    return all(upper <= lower for upper, lower in pairwise(stack))


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three elements using ``a`` moves only."""
    a = stacks.a
    if is_sorted(a):
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def set_target(stack_a: Sequence[int], index: int) -> int:
    """Return how many leading elements of ``stack_a`` are not above ``index``.

    This is the position at which ``index`` belongs in the sorted ``stack_a``.
    """
    for position, value in enumerate(stack_a):
        if value > index:
            return position
    return len(stack_a)


def place_back(stacks: Stacks, target: int) -> None:
    """Insert the top of ``b`` at position ``target`` of the sorted ``a``."""
    size = len(stacks.a)
    if target == 2:
        if size == 4:
            stacks.rra()
        stacks.rra()
    elif target == 3 and size == 4:
        stacks.rra()
    stacks.pa()
    if target == 1:
        stacks.sa()
    elif (target == 3 and size == 3) or target == 4:
        stacks.ra()
    elif target == 2 or (target == 3 and size == 4):
        stacks.ra()
        stacks.ra()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five ranks by parking one or two of them on ``b``."""
    a = stacks.a
    if is_sorted(a):
        return
    size = len(a)
    if a[0] == 3:
        stacks.ra()
    stacks.pb()
    if a[0] == 3:
        stacks.ra()
    if size == 5:
        stacks.pb()
    sort_three(stacks)
    place_back(stacks, set_target(stacks.a, stacks.b[0]))
    if size == 5:
        place_back(stacks, set_target(stacks.a, stacks.b[0]))


def push_chunks(stacks: Stacks, k: int) -> int:
    """Move all of ``a`` onto ``b`` in chunks of width ``k``.

    The smallest ranks seen so far are rotated to the bottom of ``b`` so that
    ``b`` ends up roughly ordered. Returns one more than the number pushed.
    """
    pushed = 1
    while stacks.a:
        top = stacks.a[0]
        if top <= pushed:
            stacks.pb()
            if len(stacks.b) > 1:
                stacks.rb()
            pushed += 1
        elif top < k + pushed:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
    return pushed


def calc_move(stack: Sequence[int], i: int) -> int:
    """Return the rotations that bring rank ``i`` to the top of ``stack``.

    A positive result counts forward rotations, a negative one reverse
    rotations; ``stack`` is expected to hold ``i`` elements.
    """
    position = next(
        (pos for pos, value in enumerate(stack) if value == i), len(stack)
    )
    if position > i // 2:
        position -= i
    return position


def sort_back(stacks: Stacks, count: int) -> None:
    """Pull ranks ``count`` down to 1 from ``b`` onto ``a``, largest first."""
    for rank in range(count, 0, -1):
        move = calc_move(stacks.b, rank)
        for _ in range(move):
            stacks.rb()
        for _ in range(-move):
            stacks.rrb()
        stacks.pa()


def solve(stacks: Stacks, size: int) -> None:
    """Sort ``stacks.a``, holding ``size`` ranks, choosing a strategy by size."""
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    elif not is_sorted(stacks.a):
        side = root(size)
        k = int(side + 0.4 * side)
        push_chunks(stacks, k)
        sort_back(stacks, size)