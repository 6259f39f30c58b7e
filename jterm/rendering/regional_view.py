#!/usr/bin/env python3
# jterm/rendering/regional_view.py
"""
Prefectures grouped by region, one bordered block per group.
Up/down scroll the text; the selected prefecture is always kept visible.
"""

from __future__ import annotations

from typing import Dict, Tuple

from jterm.glyphs import glyph_for
from jterm.rendering.context import FrameFrag, RenderContext, ViewFrame, window_top
from jterm.taxonomy import GROUP_ORDER

BOX_WIDTH = 52


def _header(title: str) -> str:
    label = f" {title.upper()} REGION "
    left = (BOX_WIDTH - 2 - len(label)) // 2
    right = BOX_WIDTH - 2 - len(label) - left
    return "╭" + "─" * left + label + "─" * right + "╮"


_FOOTER = "╰" + "─" * (BOX_WIDTH - 2) + "╯"


def build_lines(ctx: RenderContext) -> Tuple[FrameFrag, Dict[int, int]]:
    """Return all rows plus a map of region index -> row number."""
    index_of = {region.id: i for i, region in enumerate(ctx.regions)}
    lines: FrameFrag = []
    rows: Dict[int, int] = {}
    for group in GROUP_ORDER:
        members = [r for r in ctx.regions if r.group == group]
        if not members:
            continue
        lines.append([("class:border", _header(group.value))])
        for region in members:
            i = index_of[region.id]
            level = ctx.progress.get_level(region.id)
            glyph = glyph_for(level, ctx.glyph_set)
            selected = i == ctx.selected
            marker = "►" if selected else " "
            style = f"{glyph.style} class:selected" if selected else glyph.style
            rows[i] = len(lines)
            lines.append([
                ("", f" {marker} "),
                (style, f"{glyph.symbol} {region.name:<10} ({region.name_jp}) - Level {level}"),
            ])
        lines.append([("class:border", _FOOTER)])
        lines.append([("", "")])
    return lines, rows


class RegionalView:
    name = "regional"

    def render(self, ctx: RenderContext, width: int, height: int) -> ViewFrame:
        lines, rows = build_lines(ctx)
        keep = rows.get(ctx.selected) if ctx.follow_selection else None
        top = window_top(ctx.scroll, len(lines), height, keep=keep)
        return ViewFrame(lines[top:top + height], top)
