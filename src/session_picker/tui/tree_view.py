"""
Tree view and status line components.

``TreeView`` paints the rows a :class:`SessionTree` render pass produces,
indenting by depth and highlighting the cursor row.
"""

from __future__ import annotations

from session_picker.tree import Row, SessionTree
from session_picker.tui.ansi import PLACEHOLDER, SELECTED, SESSION, STATUS, truncate
from session_picker.tui.component import Component

INDENT = "  "


class TreeView(Component):
    """
    Draws a session tree into a fixed-height viewport.

    Parameters
    ----------
    tree:
        Tree to render; may be swapped with :attr:`tree` on refresh.
    """

    def __init__(self, tree: SessionTree | None = None) -> None:
        super().__init__()
        self._tree = tree

    @property
    def tree(self) -> SessionTree | None:
        return self._tree

    @tree.setter
    def tree(self, value: SessionTree | None) -> None:
        self._tree = value
        self.invalidate()

    def render(self, width: int, height: int) -> list[str]:
        # The tree's render pass also rebuilds its quick-select table
        if self._tree is None:
            return [PLACEHOLDER(truncate("  loading sessions…", width))]
        if not len(self._tree):
            return [PLACEHOLDER(truncate("  (no sessions)", width))]
        return [format_row(row, width) for row in self._tree.render(height)]


def format_row(row: Row, width: int) -> str:
    """Indent and style a single :class:`Row`."""
    content = truncate(f"{INDENT * row.indent}{row.text}", width)
    if row.selected:
        return SELECTED(content)
    if row.indent == 0:
        return SESSION(content)
    return content


class StatusLine(Component):
    """Single line of transient text shown above the tree."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value != self._text:
            self._text = value
            self.invalidate()

    def render(self, width: int, height: int) -> list[str]:
        return [STATUS(truncate(self._text, width)) if self._text else ""]
