#!/usr/bin/env python3
# jterm/rendering/list_view.py
"""Flat prefecture list, scrolled to keep the selection on screen."""

from __future__ import annotations

from jterm.glyphs import glyph_for
from jterm.rendering.context import FrameFrag, RenderContext, ViewFrame, window_top


class ListView:
    name = "list"

    def render(self, ctx: RenderContext, width: int, height: int) -> ViewFrame:
        total = len(ctx.regions)
        top = window_top(ctx.scroll, total, height, keep=ctx.selected)
        frame: FrameFrag = []
        for i in range(top, min(total, top + height)):
            region = ctx.regions[i]
            level = ctx.progress.get_level(region.id)
            glyph = glyph_for(level, ctx.glyph_set)
            selected = i == ctx.selected
            style = f"{glyph.style} class:selected" if selected else glyph.style
            marker = "►" if selected else " "
            frame.append([(style, f"{marker} {glyph.symbol} {region.name} ({region.name_jp}) - Level {level}")])
        return ViewFrame(frame, top)
