"""
Session Picker - an interactive tree browser for tmux sessions.

Sessions, their windows (tabs) and panes are shown as a collapsible
tree.  Arrow keys (or hjkl) move and expand, Enter switches, a single
digit or capital letter jumps straight to a visible row, and Delete
kills the session under the cursor.

Example:
    from session_picker import PickerApp, PickerConfig, TmuxActions, TmuxBackend
    from session_picker.tui.terminal import Terminal

    backend = TmuxBackend()
    actions = TmuxActions(backend)
    app = PickerApp(backend, actions, PickerConfig.load())
    actions.on_hide = app.hide

    with Terminal() as terminal:
        app.run(terminal)
"""

from session_picker.actions import Actions, SessionFeed
from session_picker.app import PickerApp
from session_picker.backends import BackendError, TmuxActions, TmuxBackend
from session_picker.config import PickerConfig
from session_picker.models import PaneInfo, SessionInfo, TabInfo
from session_picker.tree import (
    ActionRejectedError,
    EmptyTreeError,
    LookupFailure,
    MissingParentError,
    QuickSelectMiss,
    Row,
    SessionTree,
    SessionTreeError,
)

__version__ = "0.1.0"

__all__ = [
    # Application
    "PickerApp",
    "PickerConfig",
    # Tree
    "SessionTree",
    "Row",
    # Feed
    "SessionInfo",
    "TabInfo",
    "PaneInfo",
    # Host
    "Actions",
    "SessionFeed",
    "TmuxBackend",
    "TmuxActions",
    "BackendError",
    # Errors
    "SessionTreeError",
    "LookupFailure",
    "EmptyTreeError",
    "MissingParentError",
    "QuickSelectMiss",
    "ActionRejectedError",
]
