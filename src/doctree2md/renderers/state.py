#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/state.py
"""Render state threaded through the Markdown dispatcher.

The state is a small immutable value: the current rendering mode and a
nesting depth. Handlers never mutate it; a handler that needs a different
context for its children builds a new value and passes that down, so no
change can leak back to siblings by accident.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Mode(Enum):
    """Semantic rendering context that selects a handler's formatting."""

    TOP = 1
    HEADER = 2
    BODY = 3
    BULLET_LIST = 4
    BULLET_LIST_ITEM = 5
    SECTION = 6
    NOTE = 7
    FOOTNOTE = 8


@dataclass(frozen=True)
class RenderState:
    """Current mode plus nesting depth.

    ``depth`` counts enclosing sections while in section-related modes and
    nested lists while in list-related modes. It never goes below zero.

    Parameters
    ----------
    mode : Mode, default Mode.TOP
        Current rendering mode
    depth : int, default 0
        Nesting depth

    """

    mode: Mode = Mode.TOP
    depth: int = 0

    def __post_init__(self) -> None:
        """Reject negative depths."""
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    def with_mode(self, mode: Mode) -> RenderState:
        """Return a copy switched to another mode."""
        return replace(self, mode=mode)

    def with_depth(self, depth: int) -> RenderState:
        """Return a copy with an explicit depth."""
        return replace(self, depth=depth)

    def right(self) -> RenderState:
        """Return a copy one level deeper."""
        return replace(self, depth=self.depth + 1)

    def left(self) -> RenderState:
        """Return a copy one level shallower, floored at zero."""
        return replace(self, depth=max(0, self.depth - 1))


INITIAL_STATE = RenderState()
