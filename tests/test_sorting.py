import io

import pytest
from hypothesis import given, strategies as st

from pushswap.sorting import (
    find_position,
    index_values,
    is_sorted,
    radix_sort,
    solve,
    sort_five,
    sort_stack,
    sort_three,
)
from pushswap.stacks import Operation, Stacks


def _replay(values, operations):
    stacks = Stacks(values, echo=False)
    for operation in operations:
        stacks.apply(operation)
    return stacks


def test_index_values_preserves_order():
    values = [10, -5, 3, 7]
    ranks = index_values(values)
    assert sorted(ranks) == list(range(len(values)))
    for (a, ra), (b, rb) in zip(zip(values, ranks), zip(values[1:], ranks[1:])):
        assert (a < b) == (ra < rb)


def test_index_values_rejects_duplicates():
    with pytest.raises(ValueError):
        index_values([1, 2, 1])


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([1, 2, 2, 5]) is True
    assert is_sorted([2, 1]) is False


def test_find_position():
    assert find_position([4, 7, 9], 7) == 1
    assert find_position([4, 7, 9], 5) == -1


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 0, 2], [Operation.SA]),
        ([2, 1, 0], [Operation.SA, Operation.RRA]),
        ([2, 0, 1], [Operation.RA]),
        ([0, 2, 1], [Operation.SA, Operation.RA]),
        ([1, 2, 0], [Operation.RRA]),
        ([0, 1, 2], []),
    ],
)
def test_sort_three_cases(values, expected):
    stacks = Stacks(values, echo=False)
    sort_three(stacks)
    assert list(stacks.a) == [0, 1, 2]
    assert stacks.operations == expected


def test_sort_three_needs_three():
    with pytest.raises(ValueError):
        sort_three(Stacks([1, 0], echo=False))


@pytest.mark.parametrize("values", [[3, 0, 4, 1, 2], [4, 3, 2, 1, 0], [1, 0, 2, 3], [3, 2, 1, 0]])
def test_sort_five(values):
    stacks = Stacks(values, echo=False)
    sort_five(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_radix_sort():
    values = [5, 2, 7, 0, 3, 6, 1, 4]
    stacks = Stacks(values, echo=False)
    radix_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_radix_sort_rejects_negative_and_empty():
    with pytest.raises(ValueError):
        radix_sort(Stacks([1, -1, 0], echo=False))
    with pytest.raises(ValueError):
        radix_sort(Stacks([], echo=False))


def test_sort_stack_writes_operations():
    out = io.StringIO()
    sort_stack(Stacks([1, 0], stream=out))
    assert out.getvalue() == "sa\n"


def test_sort_stack_leaves_sorted_alone():
    stacks = Stacks([0, 1, 2, 3, 4, 5, 6], echo=False)
    sort_stack(stacks)
    assert stacks.operations == []


def test_solve_two():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_small_is_short():
    assert len(solve([30, -4, 12])) <= 2


@given(
    st.lists(
        st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=60, unique=True
    )
)
def test_solve_sorts(values):
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b