"""
Session tree core.

Builds a collapsible session -> tab -> pane tree from the host feed and
provides cursor movement, expand/collapse, focus/kill dispatch and
windowed rendering with quick-select keybinds.
"""
from __future__ import annotations

from session_picker.tree.errors import (
    ActionRejectedError,
    EmptyTreeError,
    LookupFailure,
    MissingParentError,
    QuickSelectMiss,
    SessionTreeError,
)
from session_picker.tree.nodes import Node, NodeArena, PaneNode, Row, SessionNode, TabNode
from session_picker.tree.sequence import (
    MAX_KEYBINDS,
    IdGenerator,
    KeybindGenerator,
    from_keybind,
    to_keybind,
)
from session_picker.tree.session_tree import SessionTree, scroll_offset

__all__ = [
    # Tree
    "SessionTree",
    "scroll_offset",
    # Nodes
    "Node",
    "NodeArena",
    "SessionNode",
    "TabNode",
    "PaneNode",
    "Row",
    # Sequencing
    "IdGenerator",
    "KeybindGenerator",
    "MAX_KEYBINDS",
    "to_keybind",
    "from_keybind",
    # Errors
    "SessionTreeError",
    "LookupFailure",
    "EmptyTreeError",
    "MissingParentError",
    "QuickSelectMiss",
    "ActionRejectedError",
]
