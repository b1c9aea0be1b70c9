"""
Index and keybind sequencing for the session tree.

``IdGenerator`` hands out the dense, zero-based node indices used as
arena handles.  ``KeybindGenerator`` maps visible row positions to the
single character shown in front of each row and accepted for
quick-select.
"""

from __future__ import annotations

# Digits first, then uppercase letters
MAX_KEYBINDS = 36


class IdGenerator:
    """Monotonic integer allocator, starting at zero."""

    def __init__(self) -> None:
        self._next = 0

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value


class KeybindGenerator:
    """Yields the keybind for row 0, 1, 2, ... on successive calls."""

    def __init__(self) -> None:
        self._row = 0

    def next(self) -> str:
        keybind = to_keybind(self._row)
        self._row += 1
        return keybind


def to_keybind(row: int) -> str:
    """
    Return the quick-select character for a 0-based row position.

    >>> to_keybind(3)
    '3'
    >>> to_keybind(10)
    'A'
    >>> to_keybind(36)
    ''
    """
    if row < 0 or row >= MAX_KEYBINDS:
        return ""
    if row < 10:
        return str(row)
    return chr(ord("A") + row - 10)


def from_keybind(char: str) -> int | None:
    """
    Inverse of :func:`to_keybind`.

    Returns ``None`` for anything that is not a digit or an uppercase
    ASCII letter.
    """
    if len(char) != 1:
        return None
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return 10 + ord(char) - ord("A")
    return None
