"""Writing characters, strings and numbers to text streams, with a small printf."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from pushswap.strings import strdup

CharLike = Union[int, str]

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: Optional[TextIO]) -> int:
    _stream(stream).write(text)
    return len(text)


def _require_int(number: Any) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return number


def _char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    return chr(_require_int(char) & 0xFF)


def _string(text: Optional[str]) -> str:
    return _NULL_STRING if text is None else strdup(text)


def _signed32(number: int) -> int:
    number = _require_int(number) & (_UINT32 - 1)
    return number - _UINT32 if number >= _UINT32 // 2 else number


def _unsigned32(number: int) -> int:
    return _require_int(number) % _UINT32


def _hexa(number: int, digits: str) -> str:
    if len(digits) != 16 or len(set(digits)) != 16:
        raise ValueError("digits must hold 16 distinct characters")
    number = _require_int(number) % _UINT64
    out = []
    while True:
        number, rest = divmod(number, 16)
        out.append(digits[rest])
        if not number:
            break
    return "".join(reversed(out))


def _pointer(value: Optional[int]) -> str:
    if value is None or value == 0:
        return _NULL_POINTER
    return "0x" + _hexa(value, LOWER_HEX)


def putchar(char: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character; return the number of characters written."""
    return _emit(_char(char), stream)


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string, or ``(null)`` for None; return the number of characters written."""
    return _emit(_string(text), stream)


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline; None writes nothing."""
    if text is None:
        return 0
    return _emit(strdup(text) + "\n", stream)


def putnbr(number: int, stream: Optional[TextIO] = None) -> int:
    """Write a signed integer in decimal; return the number of characters written."""
    return _emit(str(_require_int(number)), stream)


def putnbr_hexa(number: int, digits: str = LOWER_HEX, stream: Optional[TextIO] = None) -> int:
    """Write a 64-bit unsigned integer in hexadecimal using the given 16 digits."""
    return _emit(_hexa(number, digits), stream)


def putnbr_unsigned(number: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit unsigned integer in decimal."""
    return _emit(str(_unsigned32(number)), stream)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec in ("d", "i"):
        return str(_signed32(value))
    if spec == "u":
        return str(_unsigned32(value))
    if spec == "x":
        return _hexa(_unsigned32(value), LOWER_HEX)
    if spec == "X":
        return _hexa(_unsigned32(value), UPPER_HEX)
    return _pointer(value)


def _render(fmt: str, args: Iterator[Any]) -> str:
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        elif spec in "cspdiuxX%":
            pieces.append(_convert(spec, args))
        else:
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format ``args`` by ``fmt`` and write the result; return its length.

    Conversions: %c %s %p %d %i %u %x %X %%. A ``%`` before any other
    character writes that character alone.
    """
    if fmt is None:
        return 0
    return _emit(_render(strdup(fmt), iter(args)), stream)