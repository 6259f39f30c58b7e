#!/usr/bin/env python3
# jterm/view.py
"""
Active-view state machine.

Exactly one ViewMode is active; each mode has one trigger key that selects
it directly. Selecting the active mode again changes nothing.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from jterm.rendering.context import RenderContext, ViewFrame
from jterm.rendering.renderer import Renderer

log = logging.getLogger(__name__)

__all__ = ["ViewMode", "VIEW_TRIGGERS", "ViewController"]


class ViewMode(Enum):
    LIST = "list"
    REGIONAL_MAP = "regional"
    STATISTICS = "stats"
    ENHANCED_MAP = "enhanced"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @classmethod
    def from_name(cls, name: str, default: "ViewMode") -> "ViewMode":
        try:
            return cls(name)
        except ValueError:
            return default


_TITLES = {
    ViewMode.LIST: "Japanese Prefectures",
    ViewMode.REGIONAL_MAP: "Japan Map - Organized by Region",
    ViewMode.STATISTICS: "Statistics",
    ViewMode.ENHANCED_MAP: "Overview Map",
}

VIEW_TRIGGERS: Dict[str, ViewMode] = {
    "l": ViewMode.LIST,
    "m": ViewMode.REGIONAL_MAP,
    "s": ViewMode.STATISTICS,
    "w": ViewMode.ENHANCED_MAP,
}


class ViewController:
    def __init__(self, initial: ViewMode = ViewMode.LIST):
        self._mode = initial

    @property
    def mode(self) -> ViewMode:
        return self._mode

    def switch(self, mode: ViewMode) -> bool:
        """Make ``mode`` active. Returns False when it already was."""
        if mode is self._mode:
            return False
        log.debug("View %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        return True

    def trigger(self, key: str) -> Optional[bool]:
        """Apply a trigger key; None when the key is not a view trigger."""
        mode = VIEW_TRIGGERS.get(key)
        if mode is None:
            return None
        return self.switch(mode)

    def render(self, renderer: Renderer, ctx: RenderContext, width: int, height: int) -> ViewFrame:
        return renderer.render(self._mode.value, ctx, width, height)
