"""Number parsing and formatting, trimming, splitting and character mapping."""

from __future__ import annotations

import re
from typing import Any, Callable, List, MutableSequence, Optional

from pushswap.strings import strdup

_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; return 0 when none is found."""
    match = _ATOI.match(strdup(text))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Format an integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    text = strdup(text)
    if charset is None:
        return text
    return text.strip(strdup(charset))


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    text = strdup(text)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(strdup(text)))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply ``func(index, item)`` to every item of ``buffer`` in place.

    A result other than None replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(list(buffer)):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement