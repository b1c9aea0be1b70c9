"""
Differential frame writer.

``TUIRenderer`` keeps the last frame it wrote and, unless the terminal
was resized, only rewrites the rows that differ.  Each write is wrapped
in synchronized-output markers (DEC private mode 2026) so terminals that
support it paint the frame atomically.
"""

from __future__ import annotations

import sys
from typing import TextIO

from session_picker.tui.ansi import CLEAR_LINE, CLEAR_SCREEN, HIDE_CURSOR, move_to

_SYNC_START = "\033[?2026h"
_SYNC_END = "\033[?2026l"


class TUIRenderer:
    """
    Writes frames (one string per screen row) to *output*.

    Parameters
    ----------
    output:
        Writable text stream, defaults to ``sys.stdout``.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output: TextIO = output or sys.stdout
        self._frame: list[str] = []
        self._size: tuple[int, int] | None = None

    def render(self, lines: list[str], width: int, height: int) -> None:
        """Write *lines*, padded or clipped to *height* rows."""
        frame = lines[:height] + [""] * max(0, height - len(lines))

        if self._frame and self._size == (width, height):
            prefix = ""
            updates = diff_frames(self._frame, frame)
        else:
            prefix = HIDE_CURSOR + CLEAR_SCREEN
            updates = list(enumerate(frame, start=1))

        if updates:
            self._emit(prefix, updates)
        self._frame = frame
        self._size = (width, height)

    def _emit(self, prefix: str, updates: list[tuple[int, str]]) -> None:
        parts = [_SYNC_START, prefix]
        for row, text in updates:
            parts.extend((move_to(row, 1), CLEAR_LINE, text))
        parts.append(_SYNC_END)
        self._output.write("".join(parts))
        self._output.flush()


def diff_frames(old_lines: list[str], new_lines: list[str]) -> list[tuple[int, str]]:
    """
    ``(1-based row, text)`` for every row whose content changed.

    The shorter frame is treated as padded with empty rows.
    """
    height = max(len(old_lines), len(new_lines))
    old = old_lines + [""] * (height - len(old_lines))
    new = new_lines + [""] * (height - len(new_lines))
    return [(row, text) for row, (before, text) in enumerate(zip(old, new), start=1) if before != text]
