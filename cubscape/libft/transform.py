"""String conversions: number parsing and formatting, slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[str, int]

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_SPACES = " \t\n\v\f\r"


def _terminated(s: str) -> str:
    """Return ``s`` up to its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    """Turn a one-character string or an int code (low 8 bits) into a character."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping around on overflow."""
    value %= _INT_RANGE
    return value - _INT_RANGE if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result is a signed 32-bit integer and wraps around on overflow.
    """
    s = _terminated(text)
    i = 0
    while i < len(s) and s[i] in _SPACES:
        i += 1
    sign = 1
    if i < len(s) and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(s) and "0" <= s[i] <= "9":
        i += 1
    digits = s[start:i]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of ``s``, or a zero length, gives "".
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(s)
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + min(len(text) - start, length)]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _terminated(first) + _terminated(second)


def strtrim(s: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``s``."""
    return _terminated(s).strip(_terminated(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces."""
    return [word for word in _terminated(s).split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(_terminated(s)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each character of ``chars``, stopping at a NUL.

    When ``func`` returns a character it replaces the one at that index in
    place; a return of None leaves it unchanged.
    """
    for index, char in enumerate(chars):
        if char == "\0":
            break
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement