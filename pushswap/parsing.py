"""Reading the command-line values: argument checks, range checks and duplicates."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from pushswap.conversions import atoi, split

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_ARGUMENT_LENGTH = 11

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a list of distinct integers."""


def is_valid_token(text: str) -> bool:
    """True when ``text`` is an optional sign followed by at least one digit and nothing else."""
    return _NUMBER_PATTERN.fullmatch(text) is not None


def parse_integer(text: str) -> int:
    """Parse one argument as a 32-bit signed integer.

    Arguments longer than eleven characters are refused even when their value fits.
    """
    if not is_valid_token(text):
        raise InputError(f"not an integer: {text!r}")
    value = atoi(text)
    if len(text) > MAX_ARGUMENT_LENGTH or not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return value


def check_duplicates(values: Iterable[int]) -> List[int]:
    """Return the values as a list, raising InputError if any value repeats."""
    values = list(values)
    seen = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
    return values


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn the program arguments into the starting contents of stack ``a``, top first.

    A single argument is split on spaces; several arguments are taken one value each.
    No arguments give an empty list.
    """
    words = list(args)
    if not words:
        return []
    if len(words) == 1:
        words = split(words[0], " ")
        if not words:
            raise InputError("no values given")
    for word in words:
        if not is_valid_token(word):
            raise InputError(f"not an integer: {word!r}")
    return check_duplicates(parse_integer(word) for word in words)