"""Host backends that supply the session feed and perform actions."""
from __future__ import annotations

from session_picker.backends.tmux import BackendError, TmuxActions, TmuxBackend, build_sessions

__all__ = [
    "BackendError",
    "TmuxActions",
    "TmuxBackend",
    "build_sessions",
]
