"""
Terminal UI for the session picker.

Key parsing, keybindings, the tree view component and a differential
renderer.  The raw :class:`~session_picker.tui.terminal.Terminal` is
imported from its own module since it needs POSIX ``termios``.
"""
from __future__ import annotations

from session_picker.tui.component import Component
from session_picker.tui.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from session_picker.tui.keys import Key, parse_key
from session_picker.tui.renderer import TUIRenderer
from session_picker.tui.tree_view import StatusLine, TreeView

__all__ = [
    # Core
    "Component",
    "TUIRenderer",
    # Keys
    "Key",
    "parse_key",
    # Widgets
    "TreeView",
    "StatusLine",
    # Keybindings
    "KeybindingsManager",
    "DEFAULT_KEYBINDINGS",
]
