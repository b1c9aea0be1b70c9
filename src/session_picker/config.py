"""
Configuration for the session picker.

Loaded from a YAML file, with a couple of environment variable
overrides, or constructed programmatically.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


def config_search_paths() -> list[Path]:
    """Candidate config files, highest priority first."""
    return [
        Path.cwd() / "session-picker.yaml",
        Path.home() / ".config" / "session-picker" / "config.yaml",
    ]


def _env_flag(name: str) -> bool | None:
    val = os.environ.get(name)
    if val is None:
        return None
    return val.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class PickerConfig:
    """
    Picker configuration.

    Example YAML:
        show_plugins: false
        reserved_rows: 3
        tmux_socket: work
        keybindings:
          delete: ["x", "ctrl+k"]
        log_level: DEBUG
        log_file: /tmp/session-picker.log
    """

    # Tree construction
    show_plugins: bool = False  # Include plugin panes in the tree

    # Layout
    reserved_rows: int = 3  # Rows above the tree (padding + status line)

    # Host
    tmux_binary: str = "tmux"
    tmux_socket: str | None = None  # tmux -L socket name

    # Input
    keybindings: dict[str, list[str]] = field(default_factory=dict)

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PickerConfig:
        """Create config from a dictionary."""
        keybindings = {
            action: [str(k) for k in keys]
            for action, keys in (data.get("keybindings") or {}).items()
        }
        return cls(
            show_plugins=bool(data.get("show_plugins", False)),
            reserved_rows=int(data.get("reserved_rows", 3)),
            tmux_binary=data.get("tmux_binary", "tmux"),
            tmux_socket=data.get("tmux_socket"),
            keybindings=keybindings,
            log_level=data.get("log_level", "WARNING"),
            log_file=data.get("log_file"),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> PickerConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> PickerConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    @classmethod
    def load(cls, path: Path | None = None) -> PickerConfig:
        """
        Load config from *path*, or the first existing search path.

        Falls back to defaults when no file exists.  Environment overrides
        (``SESSION_PICKER_SHOW_PLUGINS``, ``SESSION_PICKER_TMUX_SOCKET``)
        are applied last.
        """
        config = cls()
        candidates = [path] if path is not None else config_search_paths()
        for candidate in candidates:
            if candidate.is_file():
                config = cls.from_yaml(candidate)
                break
        config.apply_env()
        return config

    def apply_env(self) -> None:
        show_plugins = _env_flag("SESSION_PICKER_SHOW_PLUGINS")
        if show_plugins is not None:
            self.show_plugins = show_plugins
        socket = os.environ.get("SESSION_PICKER_TMUX_SOCKET")
        if socket:
            self.tmux_socket = socket

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "show_plugins": self.show_plugins,
            "reserved_rows": self.reserved_rows,
            "tmux_binary": self.tmux_binary,
            "tmux_socket": self.tmux_socket,
            "keybindings": {action: list(keys) for action, keys in self.keybindings.items()},
            "log_level": self.log_level,
            "log_file": self.log_file,
        }
