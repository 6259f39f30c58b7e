#!/usr/bin/env python3
# jterm/rendering/renderer.py
"""
Rendering dispatcher.

- Common API: Renderer.render(view_name, ctx, term_w, term_h) -> ViewFrame
- Backends may register via Renderer.register(view_name, backend); a backend
  is any object with render(ctx, width, height) -> ViewFrame.
- Style format: see jterm.rendering.context.

The four built-in views (list, regional, stats, enhanced) are registered on
construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from jterm.rendering.context import FrameFrag, LineFrag, RenderContext, StyleRun, ViewFrame
from jterm.rendering.enhanced_map import EnhancedMapView
from jterm.rendering.image_backdrop import ImageBackdrop
from jterm.rendering.list_view import ListView
from jterm.rendering.regional_view import RegionalView
from jterm.rendering.stats_view import StatsView

__all__ = [
    "Renderer",
    "ViewBackend",
    "StyleRun",
    "LineFrag",
    "FrameFrag",
    "ViewFrame",
]


class ViewBackend(Protocol):
    name: str

    def render(self, ctx: RenderContext, width: int, height: int) -> ViewFrame:
        ...


@dataclass
class Renderer:
    """
    Rendering strategy holder, one backend per view name.
    """
    backdrop: ImageBackdrop = field(default_factory=ImageBackdrop)
    fallback: str = "list"

    def __post_init__(self):
        self._backends: Dict[str, ViewBackend] = {}
        self.register("list", ListView())
        self.register("regional", RegionalView())
        self.register("stats", StatsView())
        self.register("enhanced", EnhancedMapView(self.backdrop))

    def register(self, view_name: str, backend: ViewBackend) -> None:
        self._backends[view_name] = backend

    def backend(self, view_name: Optional[str]) -> ViewBackend:
        backend = self._backends.get(view_name or "")
        if backend is None:
            # Unknown view: fall back to the list
            backend = self._backends[self.fallback]
        return backend

    def render(self, view_name: str, ctx: RenderContext, term_w: int, term_h: int) -> ViewFrame:
        if term_w < 1 or term_h < 1:
            return ViewFrame([[("", "")]], ctx.scroll)
        return self.backend(view_name).render(ctx, term_w, term_h)
