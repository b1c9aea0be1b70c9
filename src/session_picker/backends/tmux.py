"""
tmux host backend.

Enumerates sessions, windows (tabs) and panes through the ``tmux`` CLI
and implements the picker's :class:`~session_picker.actions.Actions`
with ``switch-client``, ``select-window``, ``select-pane`` and
``kill-session``.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Sequence

from session_picker.actions import Actions, SessionFeed
from session_picker.logging import get_logger
from session_picker.models import PaneInfo, SessionInfo, TabInfo

logger = get_logger("backends.tmux")

_SEP = "\t"

SESSION_FORMAT = _SEP.join(["#{session_name}", "#{session_attached}"])
WINDOW_FORMAT = _SEP.join(
    ["#{session_name}", "#{window_index}", "#{window_active}", "#{window_name}"]
)
PANE_FORMAT = _SEP.join(
    [
        "#{session_name}",
        "#{window_index}",
        "#{pane_id}",
        "#{pane_active}",
        "#{pane_index}",
        "#{pane_current_command}",
    ]
)

# stderr fragments tmux prints when no server is running
_NO_SERVER = ("no server running", "error connecting", "no sessions")


class BackendError(Exception):
    """A tmux command failed."""


class TmuxBackend(SessionFeed):
    """
    Reads the session feed from a tmux server.

    Parameters
    ----------
    binary:
        tmux executable.
    socket:
        Optional socket name passed as ``-L``.
    """

    def __init__(self, binary: str = "tmux", socket: str | None = None) -> None:
        self.binary = binary
        self.socket = socket

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------

    def command(self, args: Sequence[str]) -> list[str]:
        argv = [self.binary]
        if self.socket:
            argv += ["-L", self.socket]
        argv += list(args)
        return argv

    def run(self, args: Sequence[str]) -> str:
        """Run a tmux command and return its stdout."""
        argv = self.command(args)
        logger.debug("Running: %s", " ".join(argv))
        try:
            proc = subprocess.run(argv, capture_output=True, text=True, check=False)
        except FileNotFoundError as e:
            raise BackendError(f"tmux binary not found: {self.binary}") from e
        if proc.returncode != 0:
            raise BackendError(proc.stderr.strip() or f"tmux exited with {proc.returncode}")
        return proc.stdout

    # ------------------------------------------------------------------
    # Feed
    # ------------------------------------------------------------------

    def current_session(self) -> str | None:
        """Name of the session this client is attached to, if inside tmux."""
        if not os.environ.get("TMUX"):
            return None
        try:
            name = self.run(["display-message", "-p", "#{client_session}"]).strip()
        except BackendError as e:
            logger.debug("Could not resolve current session: %s", e)
            return None
        return name or None

    def list_sessions(self) -> list[SessionInfo]:
        """Snapshot every session with its windows and panes."""
        try:
            session_out = self.run(["list-sessions", "-F", SESSION_FORMAT])
        except BackendError as e:
            if any(marker in str(e).lower() for marker in _NO_SERVER):
                logger.info("No tmux server running")
                return []
            raise

        window_out = self.run(["list-windows", "-a", "-F", WINDOW_FORMAT])
        pane_out = self.run(["list-panes", "-a", "-F", PANE_FORMAT])
        return build_sessions(session_out, window_out, pane_out, self.current_session())


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def parse_pane_id(raw: str) -> int:
    """``'%12'`` -> ``12``."""
    return int(raw.lstrip("%"))


def build_sessions(
    session_out: str,
    window_out: str,
    pane_out: str,
    current: str | None = None,
) -> list[SessionInfo]:
    """
    Assemble :class:`SessionInfo` records from the three listing outputs.

    Sessions keep the order of ``list-sessions``; windows and panes keep
    the order tmux reports them in.  Malformed lines are skipped.
    """
    sessions: dict[str, SessionInfo] = {}
    for line in _lines(session_out):
        name = line.split(_SEP)[0]
        sessions[name] = SessionInfo(name=name, is_current_session=(name == current))

    for line in _lines(window_out):
        parts = line.split(_SEP, 3)
        if len(parts) != 4 or parts[0] not in sessions:
            logger.debug("Skipping window line: %r", line)
            continue
        session_name, index, active, name = parts
        try:
            position = int(index)
        except ValueError:
            logger.debug("Skipping window line: %r", line)
            continue
        sessions[session_name].tabs.append(
            TabInfo(name=name, position=position, active=active == "1")
        )

    for line in _lines(pane_out):
        parts = line.split(_SEP, 5)
        if len(parts) != 6 or parts[0] not in sessions:
            logger.debug("Skipping pane line: %r", line)
            continue
        session_name, window_index, pane_id, active, pane_index, command = parts
        try:
            position = int(window_index)
            pane = PaneInfo(
                id=parse_pane_id(pane_id),
                title=f"{pane_index}: {command}",
                is_focused=active == "1",
            )
        except ValueError:
            logger.debug("Skipping pane line: %r", line)
            continue
        sessions[session_name].panes.setdefault(position, []).append(pane)

    return list(sessions.values())


class TmuxActions(Actions):
    """
    Effectors backed by tmux client commands.

    Parameters
    ----------
    backend:
        Backend used to run the commands.
    on_hide:
        Called when the picker should be dismissed.
    """

    def __init__(self, backend: TmuxBackend, on_hide: Callable[[], None] | None = None) -> None:
        self._backend = backend
        self._on_hide = on_hide

    @property
    def on_hide(self) -> Callable[[], None] | None:
        return self._on_hide

    @on_hide.setter
    def on_hide(self, callback: Callable[[], None] | None) -> None:
        self._on_hide = callback

    def switch_session(self, name: str) -> None:
        self._backend.run(["switch-client", "-t", f"={name}"])

    def switch_session_with_focus(
        self,
        name: str,
        tab_position: int,
        pane_id: int | None = None,
    ) -> None:
        self._backend.run(["switch-client", "-t", f"={name}:{tab_position}"])
        if pane_id is not None:
            self._backend.run(["select-pane", "-t", f"%{pane_id}"])

    def focus_tab(self, session_name: str, tab_position: int) -> None:
        self._backend.run(["select-window", "-t", f"={session_name}:{tab_position}"])

    def focus_pane(self, pane_id: int) -> None:
        # select-pane alone leaves the client on its current window
        self._backend.run(["select-window", "-t", f"%{pane_id}"])
        self._backend.run(["select-pane", "-t", f"%{pane_id}"])

    def kill_sessions(self, names: list[str]) -> None:
        for name in names:
            self._backend.run(["kill-session", "-t", f"={name}"])

    def hide_picker(self) -> None:
        if self._on_hide is not None:
            self._on_hide()
