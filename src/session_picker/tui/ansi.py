"""
ANSI escape sequences used to paint the picker.

Text attributes are bundled into :class:`Style` values; the handful the
picker draws with are predefined at the bottom of the module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ESC = "\033"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

# Screen control
CLEAR_LINE = f"{CSI}2K"
CLEAR_SCREEN = f"{CSI}2J{CSI}H"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
ALT_SCREEN_ON = f"{CSI}?1049h"
ALT_SCREEN_OFF = f"{CSI}?1049l"


class FG:
    """Foreground colours the picker uses."""

    YELLOW = f"{CSI}33m"
    CYAN = f"{CSI}36m"


def move_to(row: int, col: int) -> str:
    """Cursor to 1-based *row*, *col*."""
    return f"{CSI}{row};{col}H"


@dataclass(frozen=True)
class Style:
    """
    A set of text attributes.

    Calling a style wraps text in its escape codes followed by ``RESET``;
    an empty style returns the text unchanged.
    """

    fg: str | None = None
    bold: bool = False
    dim: bool = False
    reverse: bool = False

    @property
    def prefix(self) -> str:
        codes = [self.fg or ""]
        if self.bold:
            codes.append(f"{CSI}1m")
        if self.dim:
            codes.append(f"{CSI}2m")
        if self.reverse:
            codes.append(f"{CSI}7m")
        return "".join(codes)

    def __call__(self, text: str) -> str:
        prefix = self.prefix
        return f"{prefix}{text}{RESET}" if prefix else text


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def truncate(text: str, width: int) -> str:
    """Cut plain *text* to *width* columns, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    return text[:width - 1] + "…"


SELECTED = Style(fg=FG.CYAN, bold=True, reverse=True)
SESSION = Style(bold=True)
PLACEHOLDER = Style(dim=True)
STATUS = Style(fg=FG.YELLOW)
