"""
Interactive picker application.

``PickerApp`` owns the current :class:`SessionTree`, turns key presses
into tree operations and absorbs every recoverable error so a stale
quick-select or an invalid action never reaches the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from session_picker.actions import Actions, SessionFeed
from session_picker.backends.tmux import BackendError
from session_picker.config import PickerConfig
from session_picker.logging import get_logger
from session_picker.tree import (
    ActionRejectedError,
    EmptyTreeError,
    SessionTree,
    SessionTreeError,
    from_keybind,
)
from session_picker.tui.keybindings import KeybindingsManager
from session_picker.tui.keys import Key
from session_picker.tui.renderer import TUIRenderer
from session_picker.tui.tree_view import StatusLine, TreeView

if TYPE_CHECKING:
    from session_picker.tui.terminal import Terminal

logger = get_logger("app")

# Seconds between terminal resize checks while idle
_POLL_INTERVAL = 0.5


class PickerApp:
    """
    Event dispatcher around a session tree.

    Parameters
    ----------
    feed:
        Supplies session snapshots.
    actions:
        Effectors for focus/kill.  Its ``hide_picker`` should end the
        loop, usually by calling :meth:`hide`.
    config:
        Picker configuration.
    pick_only:
        When ``True``, confirming records the owning session's name in
        :attr:`result` and stops instead of switching to it.
    """

    def __init__(
        self,
        feed: SessionFeed,
        actions: Actions,
        config: PickerConfig | None = None,
        pick_only: bool = False,
    ) -> None:
        self.config = config or PickerConfig()
        self.keybindings = KeybindingsManager(self.config.keybindings)
        self.pick_only = pick_only
        self.result: str | None = None
        self.running = True
        self.initialised = False
        self.tree: SessionTree | None = None

        self.status = StatusLine("Pick a session" if pick_only else "")
        self.view = TreeView()

        self._feed = feed
        self._actions = actions

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def hide(self) -> None:
        self.running = False

    def refresh(self, force: bool = False) -> bool:
        """
        Rebuild the tree from the feed if not yet initialised or *force*.

        Returns ``True`` when a rebuild happened.
        """
        if self.initialised and not force:
            return False
        sessions = self._feed.list_sessions()
        self.tree = SessionTree.from_sessions(
            sessions, self._actions, show_plugins=self.config.show_plugins
        )
        self.view.tree = self.tree
        self.initialised = True
        logger.debug("Tree rebuilt from %d sessions", len(sessions))
        return True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_key(self, key: Key) -> bool:
        """Apply *key* to the tree.  Returns whether a re-render is needed."""
        action = self.keybindings.find_action(key)
        try:
            return self._dispatch(action, key)
        except ActionRejectedError as e:
            logger.debug("Action %s rejected: %s", action or key.name, e.reason)
            if action == "confirm" or action is None:
                # Focus path: dismiss even when there was nothing to switch to
                self._actions.hide_picker()
            return False
        except SessionTreeError as e:
            logger.debug("Ignoring %s: %s", action or key.name, e)
            return False
        except BackendError as e:
            logger.warning("tmux command failed: %s", e)
            return False

    def _dispatch(self, action: str | None, key: Key) -> bool:
        if action == "escape":
            self._actions.hide_picker()
            return False

        tree = self._require_tree()

        if action == "confirm":
            if self.pick_only:
                self._respond(tree)
            else:
                tree.switch_to_selected()
            return False
        if action == "up":
            tree.move_up()
            return True
        if action == "down":
            tree.move_down()
            return True
        if action == "left":
            tree.move_left()
            return True
        if action == "right":
            tree.move_right()
            return True
        if action == "delete":
            try:
                tree.kill_selected()
            finally:
                self.initialised = False
            return True

        if key.is_printable:
            row = from_keybind(key.char)
            if row is not None:
                tree.switch_by_index(row)
                return True
        return False

    def _require_tree(self) -> SessionTree:
        if self.tree is None:
            raise EmptyTreeError()
        return self.tree

    def _respond(self, tree: SessionTree) -> None:
        node = tree.current_node()
        self.result = tree.session_of(node.index).identifier
        logger.info("Picked session %s", self.result)
        self.hide()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, rows: int, cols: int) -> list[str]:
        """Full frame: padding, status line, gap, then the tree viewport."""
        lines = [""]
        lines.extend(self.status.draw(cols, 1))
        lines.append("")
        lines.extend(self.view.draw(cols, rows - self.config.reserved_rows))
        return lines[:rows]

    def run(self, terminal: Terminal, renderer: TUIRenderer | None = None) -> str | None:
        """
        Drive the picker until it is hidden.

        Returns :attr:`result` (only set in pick-only mode).
        """
        renderer = renderer or TUIRenderer(terminal.output)
        needs_render = True
        last_size: tuple[int, int] | None = None

        while self.running:
            self.refresh()
            size = terminal.size()
            stale = self.view.dirty or self.status.dirty
            if needs_render or stale or size != last_size:
                cols, rows = size
                renderer.render(self.render(rows, cols), cols, rows)
                last_size = size
                needs_render = False

            key = terminal.read_key(timeout=_POLL_INTERVAL)
            if key is not None:
                needs_render = self.handle_key(key)

        return self.result
