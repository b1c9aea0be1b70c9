"""
Raw terminal access for the interactive picker (POSIX only).

``Terminal`` is a context manager that switches stdin to cbreak mode and
the screen to the alternate buffer, and reads one key press at a time.
"""

from __future__ import annotations

import os
import select
import shutil
import sys
import termios
import tty
from collections import deque
from typing import TextIO

from session_picker.tui.ansi import ALT_SCREEN_OFF, ALT_SCREEN_ON, HIDE_CURSOR, SHOW_CURSOR
from session_picker.tui.keys import KEY_UNKNOWN, Key, parse_keys

# How long to wait for the rest of an escape sequence after a bare ESC
_ESCAPE_TIMEOUT = 0.05


class Terminal:
    """
    Keyboard input and screen lifecycle for one picker run.

    Parameters
    ----------
    stdin, stdout:
        Streams to use; default to the process's own.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self.output: TextIO = stdout or sys.stdout
        self._fd = self._stdin.fileno()
        self._saved: list | None = None
        self._pending: deque[Key] = deque()

    def __enter__(self) -> Terminal:
        self._saved = termios.tcgetattr(self._fd)
        tty.setcbreak(self._fd)
        self.output.write(ALT_SCREEN_ON + HIDE_CURSOR)
        self.output.flush()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.output.write(SHOW_CURSOR + ALT_SCREEN_OFF)
        self.output.flush()
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def size(self) -> tuple[int, int]:
        """Current ``(columns, rows)`` of the output stream."""
        try:
            columns, rows = os.get_terminal_size(self.output.fileno())
        except (OSError, ValueError):
            columns, rows = shutil.get_terminal_size()
        return columns, rows

    def read_key(self, timeout: float | None = None) -> Key | None:
        """
        Block until a key arrives (or *timeout* seconds pass).

        Returns ``None`` on timeout.  Escape sequences that arrive split
        across reads are reassembled before parsing, and a read holding
        several presses is queued so each one is returned in turn.
        """
        if self._pending:
            return self._pending.popleft()
        if not self._wait(timeout):
            return None
        data = os.read(self._fd, 32)
        if data == b"\x1b" and self._wait(_ESCAPE_TIMEOUT):
            data += os.read(self._fd, 32)
        self._pending.extend(parse_keys(data) or [KEY_UNKNOWN])
        return self._pending.popleft()

    def _wait(self, timeout: float | None) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except InterruptedError:
            return False
        return bool(ready)
