"""Errors raised by the session tree.

None of these are fatal.  The event dispatcher absorbs them and simply
skips the visible update.
"""

from __future__ import annotations


class SessionTreeError(Exception):
    """Base class for all session tree errors."""


class LookupFailure(SessionTreeError):
    """A cursor, index or parent lookup did not resolve."""


class EmptyTreeError(LookupFailure):
    """The tree has no nodes, so there is no cursor."""

    def __init__(self) -> None:
        super().__init__("session tree is empty")


class MissingParentError(LookupFailure):
    """A tab or pane has no parent in the arena."""


class QuickSelectMiss(LookupFailure):
    """No row at the requested quick-select position in the last render."""


class ActionRejectedError(SessionTreeError):
    """The requested action is not valid for this node."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
