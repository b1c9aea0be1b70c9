"""
Session tree: cursor, traversal and rendering.

The tree flattens the host's session/tab/pane hierarchy into a
:class:`NodeArena` in depth-first order and keeps a single cursor into
it.  Vertical movement wraps around the ends; horizontal movement
collapses/expands branches and saturates at the ends.

Example:
    tree = SessionTree.from_sessions(backend.list_sessions(), actions)
    tree.move_right()          # expand the first session
    rows = tree.render(20)     # rebuilds the quick-select table
    tree.switch_by_index(2)    # focus whatever row "2" showed
"""

from __future__ import annotations

from collections.abc import Iterable

from session_picker.actions import Actions
from session_picker.logging import get_logger
from session_picker.models import SessionInfo
from session_picker.tree.errors import EmptyTreeError, LookupFailure, QuickSelectMiss
from session_picker.tree.nodes import (
    Node,
    NodeArena,
    PaneNode,
    Row,
    SessionNode,
    TabNode,
)
from session_picker.tree.sequence import IdGenerator, KeybindGenerator

logger = get_logger("tree")


class SessionTree:
    """
    Cursor-driven view over one snapshot of the session feed.

    Parameters
    ----------
    arena:
        Nodes in depth-first construction order.
    actions:
        Effectors invoked by focus and kill.
    """

    def __init__(self, arena: NodeArena, actions: Actions) -> None:
        self._arena = arena
        self._actions = actions
        self._cursor: int | None = 0 if len(arena) else None
        self._quick_select: list[int] = []

    @classmethod
    def from_sessions(
        cls,
        sessions: Iterable[SessionInfo],
        actions: Actions,
        show_plugins: bool = False,
    ) -> SessionTree:
        """Build a fully collapsed tree from the feed."""
        arena = NodeArena()
        ids = IdGenerator()

        for session in sessions:
            session_node = arena.add(
                SessionNode(ids.next(), session.name, session.is_current_session)
            )
            for tab in session.tabs:
                tab_node = arena.add(
                    TabNode(ids.next(), session_node.index, tab.name, tab.position, tab.active)
                )
                for pane in session.panes_for(tab.position):
                    if pane.is_plugin and not show_plugins:
                        continue
                    arena.add(
                        PaneNode(
                            ids.next(),
                            tab_node.index,
                            pane.id,
                            pane.title,
                            is_plugin=pane.is_plugin,
                            is_focused=pane.is_focused,
                        )
                    )

        logger.debug("Built session tree with %d nodes", len(arena))
        return cls(arena, actions)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> int | None:
        """Arena index under the cursor, ``None`` for an empty tree."""
        return self._cursor

    @property
    def quick_select(self) -> list[int]:
        """Node indices of the rows produced by the last render."""
        return list(self._quick_select)

    @property
    def nodes(self) -> NodeArena:
        """Every node, shown or not, in depth-first order."""
        return self._arena

    def __len__(self) -> int:
        return len(self._arena)

    def current_node(self) -> Node:
        return self._arena.get(self._require_cursor())

    def session_of(self, index: int) -> Node:
        """Walk parent links from *index* up to its session."""
        node = self._arena.get(index)
        while node.parent is not None:
            node = self._arena.parent_of(node)
        return node

    def visible_nodes(self) -> list[Node]:
        return [node for node in self._arena if node.is_shown()]

    def node_for_row(self, row: int) -> Node:
        """Resolve a quick-select row from the most recent render."""
        if not 0 <= row < len(self._quick_select):
            raise QuickSelectMiss(f"no row {row} in last render ({len(self._quick_select)} rows)")
        return self._arena.get(self._quick_select[row])

    def _require_cursor(self) -> int:
        if self._cursor is None:
            raise EmptyTreeError()
        return self._cursor

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def move_down(self) -> None:
        """Next shown node, wrapping to the top."""
        self._step(1, wrap=True)

    def move_up(self) -> None:
        """Previous shown node, wrapping to the bottom."""
        self._step(-1, wrap=True)

    def move_left(self) -> None:
        """
        Collapse the cursor's session, or step back if it is collapsed.

        Collapsing re-anchors the cursor on the session row.  Stepping
        back stops at the first node instead of wrapping.
        """
        session = self.session_of(self._require_cursor())
        if session.is_expanded():
            session.collapse(self._arena)
            self._cursor = session.index
            return
        self._step(-1, wrap=False)

    def move_right(self) -> None:
        """Expand the node under the cursor, or step forward if already open."""
        node = self.current_node()
        if not node.is_expanded():
            node.expand(self._arena)
            return
        self._step(1, wrap=False)

    def _step(self, delta: int, wrap: bool) -> None:
        # Bounded by count + 1 so a tree with nothing shown cannot spin
        position = self._require_cursor()
        count = len(self._arena)
        for _ in range(count + 1):
            position += delta
            if wrap:
                position %= count
            elif not 0 <= position < count:
                return
            if self._arena.get(position).is_shown():
                self._cursor = position
                return

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------

    def expand(self, index: int) -> None:
        """Expand the node at *index*; its row must currently be shown."""
        node = self._arena.get(index)
        if not node.is_shown():
            raise LookupFailure(f"node {index} is not shown")
        node.expand(self._arena)

    def collapse(self, index: int) -> None:
        self._arena.get(index).collapse(self._arena)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def switch_by_index(self, row: int) -> None:
        """Focus the node shown at *row*; rows outside the last render are ignored."""
        try:
            node = self.node_for_row(row)
        except QuickSelectMiss as e:
            logger.debug("Quick-select ignored: %s", e)
            return
        self._cursor = node.index
        node.focus(self._arena, self._actions)

    def switch_to_selected(self) -> None:
        self.current_node().focus(self._arena, self._actions)

    def kill_selected(self) -> None:
        node = self.current_node()
        logger.info("Killing %s %s", node.kind, node.identifier)
        node.kill(self._arena, self._actions)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, viewport_rows: int) -> list[Row]:
        """
        Produce the rows to paint and rebuild the quick-select table.

        Only shown nodes produce rows.  The returned window holds at most
        *viewport_rows* rows and keeps the cursor centred where possible.
        """
        rows: list[Row] = []
        table: list[int] = []
        keybinds = KeybindGenerator()
        selected_row = 0

        for node in self._arena:
            if not node.is_shown():
                continue
            is_selected = node.index == self._cursor
            if is_selected:
                selected_row = len(rows)
            table.append(node.index)
            rows.append(node.render(keybinds.next(), is_selected))

        self._quick_select = table

        if viewport_rows <= 0:
            return []
        start = scroll_offset(selected_row, viewport_rows, len(rows))
        return rows[start:start + viewport_rows]


def scroll_offset(selected_row: int, viewport_rows: int, total_rows: int) -> int:
    """
    First row of a window of *viewport_rows* that centres *selected_row*.

    >>> scroll_offset(0, 5, 20)
    0
    >>> scroll_offset(10, 5, 20)
    8
    >>> scroll_offset(19, 5, 20)
    15
    """
    centred = selected_row - max(0, viewport_rows - 1) // 2
    return max(0, min(centred, max(0, total_rows - viewport_rows)))
