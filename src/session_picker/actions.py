"""
Host interfaces used by the session tree.

Nodes never talk to the multiplexer directly.  Focus and kill requests go
through an :class:`Actions` implementation supplied by the host backend
(see :mod:`session_picker.backends.tmux`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from session_picker.models import SessionInfo


class Actions(ABC):
    """Side-effecting operations the picker can request from its host."""

    @abstractmethod
    def switch_session(self, name: str) -> None:
        """Attach the client to session *name*."""
        ...

    @abstractmethod
    def switch_session_with_focus(
        self,
        name: str,
        tab_position: int,
        pane_id: int | None = None,
    ) -> None:
        """Attach to session *name* with the given tab (and pane) focused."""
        ...

    @abstractmethod
    def focus_tab(self, session_name: str, tab_position: int) -> None:
        """Select a tab of the session the picker is running in."""
        ...

    @abstractmethod
    def focus_pane(self, pane_id: int) -> None:
        """Focus a pane of the session the picker is running in."""
        ...

    @abstractmethod
    def kill_sessions(self, names: list[str]) -> None:
        """Terminate every session in *names*."""
        ...

    @abstractmethod
    def hide_picker(self) -> None:
        """Dismiss the picker surface."""
        ...


class SessionFeed(ABC):
    """Source of session snapshots the tree is rebuilt from."""

    @abstractmethod
    def list_sessions(self) -> list[SessionInfo]:
        """Return every session with its tabs and panes, in display order."""
        ...
