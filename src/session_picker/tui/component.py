"""
Base class for the picker's drawable parts.

The status line and the tree view are both ``Component`` subclasses.
Callers use :meth:`Component.draw`, which clips the output to the given
height and clears the dirty flag; subclasses only implement
:meth:`Component.render`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Something that paints itself into a block of text lines."""

    def __init__(self) -> None:
        self._dirty = True
        self._visible = True

    @abstractmethod
    def render(self, width: int, height: int) -> list[str]:
        """Produce the lines for a *width* x *height* block (``height > 0``)."""
        ...

    def draw(self, width: int, height: int) -> list[str]:
        """Render, clip to *height* and mark clean.  Hidden components draw nothing."""
        self._dirty = False
        if not self._visible or height <= 0:
            return []
        return self.render(width, height)[:height]

    def invalidate(self) -> None:
        self._dirty = True

    @property
    def dirty(self) -> bool:
        """Whether the component changed since it was last drawn."""
        return self._dirty

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        if value != self._visible:
            self._visible = value
            self.invalidate()
