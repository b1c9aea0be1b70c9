"""
Logging utilities for the session picker.

The picker owns the terminal while it runs, so log output normally goes
to a file rather than stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Package root logger
_root_logger = logging.getLogger("session_picker")
_level_before_disable = logging.NOTSET


def setup_logging(
    level: str | int = "WARNING",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for the session picker.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr, ignored when *file* is set)
        file: Optional file path to write logs

    Example:
        from session_picker.logging import setup_logging

        # Keep the terminal clean while the picker is drawn
        setup_logging("DEBUG", file="/tmp/session-picker.log")
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    if format is None:
        format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    formatter = logging.Formatter(format)

    if file:
        handler: logging.Handler = logging.FileHandler(file)
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "tree", "backends.tmux")

    Returns:
        Logger instance
    """
    if name.startswith("session_picker."):
        return logging.getLogger(name)
    return logging.getLogger(f"session_picker.{name}")


def disable() -> None:
    """Disable all logging for the session picker."""
    global _level_before_disable
    if _root_logger.disabled:
        return
    _root_logger.disabled = True
    # ``disabled`` is not inherited, so child loggers are silenced by level
    _level_before_disable = _root_logger.level
    _root_logger.setLevel(logging.CRITICAL + 1)


def enable() -> None:
    """Re-enable logging for the session picker."""
    global _level_before_disable
    if not _root_logger.disabled:
        return
    _root_logger.disabled = False
    _root_logger.setLevel(_level_before_disable)
    _level_before_disable = logging.NOTSET
