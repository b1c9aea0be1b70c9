"""
Node variants of the session tree.

All nodes live in a flat :class:`NodeArena` and refer to each other by
integer index.  Sessions own tabs, tabs own panes.  The three variants
share the :class:`Node` capability set and differ only in how they focus,
kill, and label themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from session_picker.actions import Actions
from session_picker.tree.errors import ActionRejectedError, LookupFailure, MissingParentError


@dataclass(frozen=True)
class Row:
    """One display line produced by a render pass."""

    text: str
    indent: int
    selected: bool = False


class NodeArena:
    """Ordered, index-addressed storage for every node of one tree."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def add(self, node: Node) -> Node:
        if node.index != len(self._nodes):
            raise ValueError(f"node index {node.index} out of sequence")
        self._nodes.append(node)
        if node.parent is not None:
            self.get(node.parent).children.append(node.index)
        return node

    def get(self, index: int) -> Node:
        if not 0 <= index < len(self._nodes):
            raise LookupFailure(f"no node at index {index}")
        return self._nodes[index]

    def parent_of(self, node: Node) -> Node:
        if node.parent is None:
            raise MissingParentError(f"{node.kind} {node.identifier} has no parent")
        return self.get(node.parent)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)


class Node(ABC):
    """
    Capability set shared by sessions, tabs and panes.

    Parameters
    ----------
    index:
        Arena handle, assigned once at construction.
    parent:
        Index of the owning node, ``None`` for sessions.
    """

    kind: ClassVar[str] = "node"
    depth: ClassVar[int] = 0

    def __init__(self, index: int, parent: int | None = None) -> None:
        self.index = index
        self.parent = parent
        self.children: list[int] = []
        self._shown = False
        self._expanded = False

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Name the host uses to address this node."""
        ...

    @property
    @abstractmethod
    def is_focused(self) -> bool:
        """Whether this is the current session / active tab / focused pane."""
        ...

    @abstractmethod
    def label(self) -> str:
        """Row text after the keybind prefix."""
        ...

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @abstractmethod
    def focus(self, arena: NodeArena, actions: Actions) -> None:
        """Navigate the host to this node."""
        ...

    def kill(self, arena: NodeArena, actions: Actions) -> None:
        raise ActionRejectedError(f"cannot kill {self.kind}")

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def is_shown(self) -> bool:
        return self._shown

    def show(self) -> None:
        self._shown = True

    def hide(self) -> None:
        self._shown = False

    def is_expanded(self) -> bool:
        return self._expanded

    def expand(self, arena: NodeArena) -> None:
        if self._expanded:
            return
        self._expanded = True
        for child in self.children:
            arena.get(child).show()

    def collapse(self, arena: NodeArena) -> None:
        if not self._expanded:
            return
        self._expanded = False
        for child_index in self.children:
            child = arena.get(child_index)
            child.hide()
            # Hidden children must not keep their own subtree open
            child.collapse(arena)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, keybind: str, is_selected: bool) -> Row:
        return Row(text=f"({keybind}) {self.label()}", indent=self.depth, selected=is_selected)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index}, identifier={self.identifier!r})"


class SessionNode(Node):
    """Top-level session.  Always shown, collapsed on construction."""

    kind = "session"
    depth = 0

    def __init__(self, index: int, name: str, is_current_session: bool = False) -> None:
        super().__init__(index, parent=None)
        self.name = name
        self.is_current_session = is_current_session

    @property
    def identifier(self) -> str:
        return self.name

    @property
    def is_focused(self) -> bool:
        return self.is_current_session

    def label(self) -> str:
        if self.is_current_session:
            return f"{self.name} (attached)"
        return self.name

    def focus(self, arena: NodeArena, actions: Actions) -> None:
        if self.is_current_session:
            raise ActionRejectedError("cannot goto current session")
        actions.switch_session(self.name)
        actions.hide_picker()

    def kill(self, arena: NodeArena, actions: Actions) -> None:
        actions.kill_sessions([self.name])

    def is_shown(self) -> bool:
        return True

    def show(self) -> None:
        pass

    def hide(self) -> None:
        pass


class TabNode(Node):
    """A tab of a session."""

    kind = "tab"
    depth = 1

    def __init__(
        self,
        index: int,
        parent: int,
        name: str,
        position: int,
        active: bool = False,
    ) -> None:
        super().__init__(index, parent=parent)
        self.name = name
        self.position = position
        self.active = active

    @property
    def identifier(self) -> str:
        return str(self.position)

    @property
    def is_focused(self) -> bool:
        return self.active

    def label(self) -> str:
        if self.active:
            return f"{self.name} (active)"
        return self.name

    def focus(self, arena: NodeArena, actions: Actions) -> None:
        session = arena.parent_of(self)
        if session.is_focused:
            actions.focus_tab(session.identifier, self.position)
        else:
            actions.switch_session_with_focus(session.identifier, self.position)
        actions.hide_picker()


class PaneNode(Node):
    """A leaf pane.  Has no children, so it always reports expanded."""

    kind = "pane"
    depth = 2

    def __init__(
        self,
        index: int,
        parent: int,
        pane_id: int,
        title: str,
        is_plugin: bool = False,
        is_focused: bool = False,
    ) -> None:
        super().__init__(index, parent=parent)
        self.pane_id = pane_id
        self.title = title
        self.is_plugin = is_plugin
        self._is_focused = is_focused

    @property
    def identifier(self) -> str:
        return str(self.pane_id)

    @property
    def is_focused(self) -> bool:
        return self._is_focused

    def label(self) -> str:
        return self.title

    def focus(self, arena: NodeArena, actions: Actions) -> None:
        tab = arena.parent_of(self)
        session = arena.parent_of(tab)
        if session.is_focused:
            actions.focus_pane(self.pane_id)
        else:
            actions.switch_session_with_focus(
                session.identifier, int(tab.identifier), self.pane_id
            )
        actions.hide_picker()

    def is_expanded(self) -> bool:
        return True

    def expand(self, arena: NodeArena) -> None:
        pass

    def collapse(self, arena: NodeArena) -> None:
        pass
