"""
Decoding of raw terminal input into key presses.

The picker reacts to arrows, Enter, Escape, Delete, Ctrl+letter and
printable characters.  Every other sequence decodes to ``KEY_UNKNOWN``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Key:
    """
    One decoded key press.

    *name* is symbolic for special keys (``'up'``, ``'ctrl+c'``) and the
    character itself for printable ones, in which case *char* holds it too.
    """

    name: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False

    @property
    def is_printable(self) -> bool:
        return bool(self.char) and not (self.ctrl or self.alt)


KEY_ENTER = Key(name="enter", char="\r")
KEY_ESCAPE = Key(name="escape")
KEY_BACKSPACE = Key(name="backspace")
KEY_DELETE = Key(name="delete")
KEY_UP = Key(name="up")
KEY_DOWN = Key(name="down")
KEY_LEFT = Key(name="left")
KEY_RIGHT = Key(name="right")
KEY_HOME = Key(name="home")
KEY_END = Key(name="end")
KEY_UNKNOWN = Key(name="unknown")

# Final character of ``ESC [ ... X`` and ``ESC O X``
_FINAL: dict[str, Key] = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
}

# ``ESC [ n ~``; 7 and 8 are the rxvt home/end codes
_TILDE: dict[str, Key] = {
    "1": KEY_HOME,
    "3": KEY_DELETE,
    "4": KEY_END,
    "7": KEY_HOME,
    "8": KEY_END,
}

_PARAM_CHARS = frozenset("0123456789;")


def parse_key(data: bytes) -> Key:
    """
    Decode the bytes of a single read from the terminal.

    >>> parse_key(b"\\x1b[A").name
    'up'
    >>> parse_key(b"\\x03").name
    'ctrl+c'
    """
    if not data:
        return KEY_UNKNOWN
    if data[:1] == b"\x1b":
        return _parse_escape(data[1:])
    return _parse_plain(data)


def _parse_escape(rest: bytes) -> Key:
    if not rest:
        return KEY_ESCAPE

    intro, body = rest[:1], rest[1:]
    if intro == b"[":
        return _parse_csi(body.decode("ascii", "replace"))
    if intro == b"O" and body:
        return _FINAL.get(body.decode("ascii", "replace"), KEY_UNKNOWN)

    # ESC followed by one character is how terminals send Alt+char
    key = _parse_plain(rest)
    if len(rest) == 1 and key.is_printable:
        return Key(name=f"alt+{key.char}", char=key.char, alt=True)
    return KEY_UNKNOWN


def _parse_csi(text: str) -> Key:
    params, final = text[:-1], text[-1:]
    if not final or not set(params) <= _PARAM_CHARS:
        return KEY_UNKNOWN
    if final == "~":
        return _TILDE.get(params.split(";")[0], KEY_UNKNOWN)
    # xterm modifier parameters (``1;5A``) are accepted and ignored
    return _FINAL.get(final, KEY_UNKNOWN)


def _parse_plain(data: bytes) -> Key:
    first = data[0]
    if first in (0x0D, 0x0A):
        return KEY_ENTER
    if first in (0x08, 0x7F):
        return KEY_BACKSPACE
    if 0x01 <= first <= 0x1A:
        letter = chr(first + 0x60)
        return Key(name=f"ctrl+{letter}", char=letter, ctrl=True)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return KEY_UNKNOWN
    if len(text) == 1 and text.isprintable():
        return Key(name=text, char=text)
    return KEY_UNKNOWN


def split_keys(data: bytes) -> list[bytes]:
    """
    Cut one read into separate key sequences.

    Key repeat and typeahead can deliver several presses in a single
    read.  Each piece is one escape sequence or one UTF-8 character.

    >>> split_keys(b"jj")
    [b'j', b'j']
    >>> split_keys(b"\\x1b[B\\x1b[B")
    [b'\\x1b[B', b'\\x1b[B']
    """
    pieces = []
    pos = 0
    while pos < len(data):
        end = _sequence_end(data, pos)
        pieces.append(data[pos:end])
        pos = end
    return pieces


def parse_keys(data: bytes) -> list[Key]:
    """Decode every key press contained in *data*."""
    return [parse_key(piece) for piece in split_keys(data)]


def _sequence_end(data: bytes, pos: int) -> int:
    if data[pos] != 0x1B:
        return pos + _utf8_length(data[pos])
    if pos + 1 >= len(data) or data[pos + 1] == 0x1B:
        return pos + 1

    intro = data[pos + 1]
    if intro == ord("["):
        end = pos + 2
        while end < len(data) and chr(data[end]) in _PARAM_CHARS:
            end += 1
        # Final byte closes the sequence
        return min(end + 1, len(data))
    if intro == ord("O"):
        return min(pos + 3, len(data))
    # Alt+char
    return pos + 1 + _utf8_length(intro)


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1
