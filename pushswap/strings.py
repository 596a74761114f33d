"""String helpers with C-string semantics: text ends at the first NUL character."""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterator, Optional, Tuple, Union

CharLike = Union[int, str]


def _c(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    return text.partition("\0")[0]


def _target(char: CharLike) -> str:
    """Return the character to search for, reduced to a single byte when given as an int."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a single character, got {type(char).__name__}")
    return chr(char & 0xFF)


def _codes(text: str) -> Iterator[int]:
    """Yield the character codes of ``text`` followed by an endless run of zeros."""
    return chain(map(ord, _c(text)), repeat(0))


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_c(text))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _c(src)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` so that the result holds at most ``size - 1`` characters.

    Returns the new text and the length the concatenation would have had;
    when ``size`` does not exceed the length of ``dest``, ``dest`` is left as
    it is and ``size`` plus the length of ``src`` is reported.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest, src = _c(dest), _c(src)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the offset of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at the offset equal to the length.
    """
    text, target = _c(text), _target(char)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the offset of the last ``char`` in ``text``, or None."""
    text, target = _c(text), _target(char)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters; return the difference of the first unequal pair."""
    if size < 0:
        raise ValueError("size must not be negative")
    for a, b in islice(zip(_codes(first), _codes(second)), size):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the offset of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    haystack, needle = _c(haystack), _c(needle)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its terminator."""
    return str(_c(text))


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _c(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return _c(first) + _c(second)