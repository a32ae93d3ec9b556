"""Substring search and word splitting as used by the XPM reader."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, length: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    The search gives up at once when ``needle`` is longer than ``length``;
    ``text`` ends at its first NUL character.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    return _terminated(text).find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted runs."""
    _check_needle(needle)
    if len(needle) > length:
        return -1
    text = _terminated(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _SEPARATORS.split(_terminated(text)) if word]