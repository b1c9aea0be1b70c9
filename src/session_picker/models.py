"""
Feed records for the session picker.

These models describe what the host multiplexer reports about its
sessions, tabs and panes.  The session tree is rebuilt from a list of
:class:`SessionInfo` every time the feed is refreshed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PaneInfo:
    """A single pane inside a tab."""

    id: int
    title: str = ""
    is_plugin: bool = False  # Plugin surfaces are hidden unless show_plugins is set
    is_focused: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaneInfo:
        return cls(
            id=int(data["id"]),
            title=data.get("title", ""),
            is_plugin=data.get("is_plugin", False),
            is_focused=data.get("is_focused", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "is_plugin": self.is_plugin,
            "is_focused": self.is_focused,
        }


@dataclass
class TabInfo:
    """A tab (window) owned by a session."""

    name: str
    position: int
    active: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TabInfo:
        return cls(
            name=data["name"],
            position=int(data["position"]),
            active=data.get("active", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "position": self.position, "active": self.active}


@dataclass
class SessionInfo:
    """
    A top-level session as reported by the host.

    Attributes
    ----------
    name:
        Session name, used to switch to or kill the session.
    is_current_session:
        ``True`` for the session the picker is attached to.
    tabs:
        Tabs in display order.
    panes:
        Mapping from tab position to the ordered panes of that tab.
    """

    name: str
    is_current_session: bool = False
    tabs: list[TabInfo] = field(default_factory=list)
    panes: dict[int, list[PaneInfo]] = field(default_factory=dict)

    def panes_for(self, position: int) -> list[PaneInfo]:
        """Return the panes of the tab at *position* (empty if unknown)."""
        return self.panes.get(position, [])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionInfo:
        panes: dict[int, list[PaneInfo]] = {}
        for position, entries in data.get("panes", {}).items():
            panes[int(position)] = [PaneInfo.from_dict(p) for p in entries]

        return cls(
            name=data["name"],
            is_current_session=data.get("is_current_session", False),
            tabs=[TabInfo.from_dict(t) for t in data.get("tabs", [])],
            panes=panes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "is_current_session": self.is_current_session,
            "tabs": [t.to_dict() for t in self.tabs],
            "panes": {
                str(position): [p.to_dict() for p in entries]
                for position, entries in self.panes.items()
            },
        }
