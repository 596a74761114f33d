import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ascii_codes = st.integers(min_value=0, max_value=127)


@given(ascii_codes)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@given(ascii_codes)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@given(st.integers(min_value=-300, max_value=600))
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@given(st.integers(min_value=-300, max_value=600))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code < 128)


@given(ascii_codes)
def test_is_print_matches_printable_without_control_whitespace(code):
    expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
    assert is_print(code) == expected


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("é")
    assert not is_ascii("é")


def test_str_and_int_forms_agree():
    for ch in string.printable:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


@given(st.sampled_from(string.ascii_lowercase))
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@given(st.sampled_from(string.ascii_uppercase))
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@given(st.integers(min_value=-50, max_value=400))
def test_case_conversion_leaves_non_letters(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_to_upper_ignores_non_ascii():
    assert to_upper("é") == "é"


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)