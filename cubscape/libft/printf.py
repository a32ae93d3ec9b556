"""Formatted output supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
DECIMAL = "0123456789"

_UINT_MASK = (1 << 32) - 1
_UINT_RANGE = 1 << 32
_INT_MAX = (1 << 31) - 1
_POINTER_MASK = (1 << 64) - 1


def base_length(base: str) -> int:
    """Return the number of digits of ``base``, or -1 if it is not a usable base.

    A usable base holds printable characters other than space, '+' and '-',
    none of them twice.
    """
    for ch in base:
        if ch in "+- " or not (" " < ch <= "~"):
            return -1
        if base.count(ch) > 1:
            return -1
    return len(base)


def to_base(number: int, base: str) -> str:
    """Write the non-negative ``number`` with the digits of ``base``.

    A base with fewer than two valid digits gives an empty string.
    """
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    radix = base_length(base)
    if radix <= 1:
        return ""
    if number == 0:
        return base[0]
    digits = []
    while number:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _signed(value: Any) -> int:
    value = _integer(value) % _UINT_RANGE
    return value - _UINT_RANGE if value > _INT_MAX else value


def _unsigned(value: Any) -> int:
    return _integer(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + to_base(_integer(value) & _POINTER_MASK, LOWER_HEX)


def _next(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next(values))
    if spec == "s":
        return _string(_next(values))
    if spec == "p":
        return _pointer(_next(values))
    if spec in "di":
        return str(_signed(_next(values)))
    if spec == "u":
        return str(_unsigned(_next(values)))
    if spec == "x":
        return to_base(_unsigned(_next(values)), LOWER_HEX)
    if spec == "X":
        return to_base(_unsigned(_next(values)), UPPER_HEX)
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    An unknown conversion writes nothing and takes no argument; a '%' at the
    very end of ``fmt`` writes a NUL character.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    text = fmt.split("\0", 1)[0]
    values = iter(args)
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "%":
            i += 1
            if i >= len(text):
                out.append("\0")
                break
            out.append(_convert(text[i], values))
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written, or -1 when ``fmt`` is None.
    """
    if fmt is None:
        return -1
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)