"""Shared pytest fixtures for session-picker tests."""

from __future__ import annotations

import logging

import pytest

from session_picker import logging as picker_logging
from session_picker.actions import Actions, SessionFeed
from session_picker.models import PaneInfo, SessionInfo, TabInfo
from session_picker.tree import SessionTree


class RecordingActions(Actions):
    """Actions fake that records every effector call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def switch_session(self, name: str) -> None:
        self.calls.append(("switch_session", name))

    def switch_session_with_focus(
        self,
        name: str,
        tab_position: int,
        pane_id: int | None = None,
    ) -> None:
        self.calls.append(("switch_session_with_focus", name, tab_position, pane_id))

    def focus_tab(self, session_name: str, tab_position: int) -> None:
        self.calls.append(("focus_tab", session_name, tab_position))

    def focus_pane(self, pane_id: int) -> None:
        self.calls.append(("focus_pane", pane_id))

    def kill_sessions(self, names: list[str]) -> None:
        self.calls.append(("kill_sessions", list(names)))

    def hide_picker(self) -> None:
        self.calls.append(("hide_picker",))


class StaticFeed(SessionFeed):
    """Feed that returns a fixed list and counts how often it was read."""

    def __init__(self, sessions: list[SessionInfo]) -> None:
        self.sessions = sessions
        self.reads = 0

    def list_sessions(self) -> list[SessionInfo]:
        self.reads += 1
        return list(self.sessions)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging setup a test (or the CLI) performed."""
    yield
    root = logging.getLogger("session_picker")
    picker_logging.enable()
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def actions() -> RecordingActions:
    return RecordingActions()


@pytest.fixture
def two_sessions() -> list[SessionInfo]:
    """SessionA with two tabs and no panes, SessionB with nothing."""
    return [
        SessionInfo(
            name="SessionA",
            tabs=[TabInfo(name="TabA1", position=0, active=True), TabInfo(name="TabA2", position=1)],
        ),
        SessionInfo(name="SessionB"),
    ]


@pytest.fixture
def nested_sessions() -> list[SessionInfo]:
    """
    Two sessions with panes.

    Arena indices (plugins hidden)::

        0 work (attached)
        1   editor (active)
        2     0: vim
        3     1: zsh
        4   logs
        5     0: tail
        6 play
        7   music
        8     0: cmus
    """
    return [
        SessionInfo(
            name="work",
            is_current_session=True,
            tabs=[TabInfo(name="editor", position=0, active=True), TabInfo(name="logs", position=1)],
            panes={
                0: [PaneInfo(id=1, title="0: vim", is_focused=True), PaneInfo(id=2, title="1: zsh")],
                1: [PaneInfo(id=3, title="0: tail")],
            },
        ),
        SessionInfo(
            name="play",
            tabs=[TabInfo(name="music", position=0)],
            panes={
                0: [
                    PaneInfo(id=4, title="0: cmus"),
                    PaneInfo(id=5, title="status-bar", is_plugin=True),
                ],
            },
        ),
    ]


@pytest.fixture
def two_session_tree(two_sessions: list[SessionInfo], actions: RecordingActions) -> SessionTree:
    return SessionTree.from_sessions(two_sessions, actions)


@pytest.fixture
def nested_tree(nested_sessions: list[SessionInfo], actions: RecordingActions) -> SessionTree:
    return SessionTree.from_sessions(nested_sessions, actions)


def row_texts(tree: SessionTree, viewport: int = 100) -> list[str]:
    """Texts of the rows a render pass produces."""
    return [row.text for row in tree.render(viewport)]


def shown_indices(tree: SessionTree) -> list[int]:
    return [node.index for node in tree.visible_nodes()]
