"""NUL-terminated string helpers: length, search, comparison and bounded copies."""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]


def _terminated(s: str) -> str:
    """Return ``s`` up to its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    """Turn a one-character string or an int code into a character.

    An int keeps only its low 8 bits, the way a C ``char`` conversion does.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    a = _terminated(first)
    b = _terminated(second)
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; no match gives None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters; nothing when
    ``size`` is 0) and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` leaves no room past ``dst``, ``dst`` is returned unchanged
    together with ``strlen(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    head = _terminated(dst)
    tail = _terminated(src)
    if size < len(head) + 1:
        return head, len(tail) + size
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _terminated(s)