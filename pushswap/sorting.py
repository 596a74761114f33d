"""Sorting stack ``a`` with the puzzle operations."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, List, Sequence

from pushswap.stacks import Operation, Stacks


def index_values(values: Iterable[int]) -> List[int]:
    """Replace every value by its rank among the values, counting from 0."""
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    return all(first <= second for first, second in pairwise(values))


def find_position(values: Sequence[int], target: int) -> int:
    """Return the position of ``target`` in ``values``, or -1 when it is absent."""
    return next((position for position, value in enumerate(values) if value == target), -1)


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a must hold three elements")
    first, second, third = list(stacks.a)[:3]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort up to five elements: park the smallest on ``b``, sort three, bring them back."""
    size = len(stacks.a)
    while len(stacks.a) > 3:
        position = find_position(stacks.a, min(stacks.a))
        if position == 0:
            stacks.pb()
        elif position <= size // 2:
            stacks.ra()
        else:
            stacks.rra()
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort non-negative values in ``a`` bit by bit, least significant bit first."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    highest = max(stacks.a)
    if min(stacks.a) < 0:
        raise ValueError("radix sort needs non-negative values")
    for bit in range(highest.bit_length()):
        for _ in range(len(stacks.a)):
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` with the method suited to its size; a sorted stack is left alone."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif 1 < size <= 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)


def solve(values: Iterable[int]) -> List[Operation]:
    """Return the operations that sort ``values`` when applied to stack ``a``."""
    stacks = Stacks(index_values(values), echo=False)
    sort_stack(stacks)
    return list(stacks.operations)