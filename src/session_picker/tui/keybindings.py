"""
Keybinding management.

Maps decoded keys to the picker's actions.  Defaults cover both arrow
keys and vi-style letters; the ``keybindings`` section of the config
file replaces the keys of individual actions.  Keys that match no action
fall through to quick-select.
"""

from __future__ import annotations

from session_picker.logging import get_logger
from session_picker.tui.keys import Key

logger = get_logger("tui.keybindings")

DEFAULT_KEYBINDINGS: dict[str, list[str]] = {
    "confirm": ["enter"],
    "up": ["up", "k"],
    "down": ["down", "j"],
    "left": ["left", "h"],
    "right": ["right", "l"],
    "delete": ["delete", "x"],
    "escape": ["escape", "ctrl+c"],
}


def descriptor(key: Key | str) -> str:
    """
    Canonical form of a key or a human-written key descriptor.

    Modifiers are sorted and everything is lowercased except a bare
    single character, which keeps its case (``K`` selects row 20, ``k`` is up).

    >>> descriptor("Ctrl+C")
    'ctrl+c'
    >>> descriptor(Key(name="ctrl+c", char="c", ctrl=True))
    'ctrl+c'
    >>> descriptor("Enter")
    'enter'
    """
    if isinstance(key, Key):
        modifiers = [m for m, held in (("ctrl", key.ctrl), ("alt", key.alt)) if held]
        base = key.name.rsplit("+", 1)[-1] if len(key.name) > 1 else key.name
    else:
        text = key.strip()
        if text == "+":
            return text
        *modifiers, base = (part.strip() for part in text.split("+"))

    if len(base) != 1 or modifiers:
        base = base.lower()
    return "+".join(sorted({m.lower() for m in modifiers}) + [base])


class KeybindingsManager:
    """
    Resolves keys to picker actions.

    Parameters
    ----------
    user_overrides:
        Action name to key descriptors; replaces the defaults of that
        action.  Unknown action names are ignored with a warning.
    """

    def __init__(self, user_overrides: dict[str, list[str]] | None = None) -> None:
        self._bindings = {action: list(keys) for action, keys in DEFAULT_KEYBINDINGS.items()}
        for action, keys in (user_overrides or {}).items():
            if action not in self._bindings:
                logger.warning("Ignoring keybinding for unknown action %r", action)
                continue
            self._bindings[action] = list(keys)

        # First action listed wins when two actions share a key
        self._lookup: dict[str, str] = {}
        for action, keys in self._bindings.items():
            for k in keys:
                self._lookup.setdefault(descriptor(k), action)

    def find_action(self, key: Key | str) -> str | None:
        return self._lookup.get(descriptor(key))

    def get_keys(self, action: str) -> list[str]:
        """Descriptors bound to *action*, as written in the config."""
        return list(self._bindings.get(action, []))

    def actions(self) -> list[str]:
        return list(self._bindings)
