import pytest
from hypothesis import given, strategies as st

from pushswap.parsing import (
    InputError,
    check_duplicates,
    is_valid_token,
    parse_arguments,
    parse_integer,
)


@pytest.mark.parametrize("token", ["42", "-7", "+0", "0", "-2147483648"])
def test_valid_tokens(token):
    assert is_valid_token(token) is True


@pytest.mark.parametrize("token", ["", "+", "-", "1a", " 1", "1 ", "--1", "+-1", "a", "1.5"])
def test_invalid_tokens(token):
    assert is_valid_token(token) is False


def test_parse_integer_limits():
    assert parse_integer("2147483647") == 2147483647
    assert parse_integer("-2147483648") == -2147483648


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999"])
def test_parse_integer_out_of_range(token):
    with pytest.raises(InputError):
        parse_integer(token)


def test_parse_integer_rejects_long_tokens_even_in_range():
    with pytest.raises(InputError):
        parse_integer("+02147483647")
    with pytest.raises(InputError):
        parse_integer("000000000001")


def test_parse_integer_accepts_eleven_characters():
    assert parse_integer("00000000001") == 1


def test_parse_integer_rejects_non_numbers():
    with pytest.raises(InputError):
        parse_integer("abc")


def test_check_duplicates():
    assert check_duplicates(iter([3, 1, 2])) == [3, 1, 2]
    with pytest.raises(InputError):
        check_duplicates([1, 2, 1])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1", "1"])


def test_parse_separate_arguments():
    assert parse_arguments(["3", "-2", "1"]) == [3, -2, 1]


def test_parse_single_argument_is_split_on_spaces():
    assert parse_arguments(["  3 -2   1 "]) == [3, -2, 1]


def test_parse_no_arguments():
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [[""], ["   "], ["1 2", "3"], ["1\t2"], ["1", "x"], ["-0", "0"], ["5 5"], ["1", "2147483648"]],
)
def test_parse_errors(args):
    with pytest.raises(InputError):
        parse_arguments(args)


values_lists = st.lists(
    st.integers(min_value=-(2**31), max_value=2**31 - 1), min_size=1, max_size=30, unique=True
)


@given(values_lists)
def test_round_trip_separate(values):
    assert parse_arguments([str(v) for v in values]) == values


@given(values_lists)
def test_round_trip_joined(values):
    assert parse_arguments([" ".join(str(v) for v in values)]) == values