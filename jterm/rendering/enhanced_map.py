#!/usr/bin/env python3
# jterm/rendering/enhanced_map.py
"""
Overview map view: the composed grid (or the reference image, when one is
configured and readable) with a scrollable prefecture sidebar on the right.
"""

from __future__ import annotations

from typing import Optional

from prompt_toolkit.utils import get_cwidth

from jterm.glyphs import glyph_for
from jterm.rendering.context import FrameFrag, LineFrag, RenderContext, ViewFrame, window_top
from jterm.rendering.grid import compose, grid_to_fragments
from jterm.rendering.image_backdrop import ImageBackdrop
from jterm.taxonomy import GRID_COLS

SIDEBAR_WIDTH = 14
GAP = "  "


def _line_width(line: LineFrag) -> int:
    return sum(get_cwidth(text) for _style, text in line)


def _pad(line: LineFrag, width: int) -> LineFrag:
    missing = width - _line_width(line)
    return line + [("", " " * missing)] if missing > 0 else line


class EnhancedMapView:
    name = "enhanced"

    def __init__(self, backdrop: Optional[ImageBackdrop] = None):
        self.backdrop = backdrop or ImageBackdrop()

    def map_lines(self, ctx: RenderContext, width: int, height: int) -> FrameFrag:
        img = self.backdrop.load(ctx.reference_image) if ctx.reference_image else None
        if img is not None:
            return self.backdrop.render(img, width, height, ctx.image_palette)

        selected = ctx.selected_region
        grid = compose(
            ctx.regions,
            ctx.progress,
            glyph_set=ctx.glyph_set,
            background=ctx.background,
            legend=ctx.legend,
            highlight=selected.id if selected else None,
        )
        return grid_to_fragments(grid)

    def sidebar_line(self, ctx: RenderContext, index: int) -> LineFrag:
        region = ctx.regions[index]
        level = ctx.progress.get_level(region.id)
        glyph = glyph_for(level, "text")
        style = f"{glyph.style} class:selected" if index == ctx.selected else glyph.style
        return [(style, f"{glyph.symbol} {region.name_jp}")]

    def render(self, ctx: RenderContext, width: int, height: int) -> ViewFrame:
        body_height = max(1, height - 1)
        has_image = bool(ctx.reference_image) and self.backdrop.load(ctx.reference_image) is not None
        title = " Japan Reference Map" if has_image else " Japan Overview Map"
        frame: FrameFrag = [[("class:header", title)]]

        map_width = max(GRID_COLS, width - SIDEBAR_WIDTH - len(GAP)) if has_image else GRID_COLS
        left = self.map_lines(ctx, map_width, body_height)
        left_width = max((_line_width(line) for line in left), default=0)

        total = len(ctx.regions)
        keep = ctx.selected if ctx.follow_selection else None
        top = window_top(ctx.scroll, total, body_height, keep=keep)
        for row in range(body_height):
            line: LineFrag = list(left[row]) if row < len(left) else []
            idx = top + row
            if idx < total:
                line = _pad(line, left_width) + [("", GAP)] + self.sidebar_line(ctx, idx)
            frame.append(line or [("", "")])
        return ViewFrame(frame[:height], top)
