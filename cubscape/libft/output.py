"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def putchar_fd(c: str, stream: Optional[TextIO]) -> None:
    """Write the single character ``c``; a missing stream writes nothing."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if stream is None:
        return
    stream.write(c)


def putstr_fd(s: str, stream: Optional[TextIO]) -> None:
    """Write ``s``; a missing stream writes nothing."""
    if stream is None:
        return
    stream.write(s)


def putendl_fd(s: str, stream: Optional[TextIO]) -> None:
    """Write ``s`` followed by a newline; a missing stream writes nothing."""
    if stream is None:
        return
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: Optional[TextIO]) -> None:
    """Write the decimal form of ``n``; a missing stream writes nothing."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if stream is None:
        return
    stream.write(str(n))