#!/usr/bin/env python3
# jterm/rendering/stats_view.py
"""Statistics page: overall progress, level breakdown and per-region bars."""

from __future__ import annotations

from jterm.glyphs import glyph_for, level_text
from jterm.progress import LEVELS
from jterm.rendering.context import FrameFrag, RenderContext, ViewFrame, window_top
from jterm.stats import TravelStats, calculate_stats
from jterm.taxonomy import GROUP_ORDER

BAR_WIDTH = 20
GROUP_BAR_WIDTH = 12


def _bar_style(pct: int) -> str:
    if pct < 20:
        return "class:bar.low"
    if pct < 50:
        return "class:bar.mid"
    if pct < 75:
        return "class:bar.high"
    return "class:bar.done"


def build_lines(stats: TravelStats, glyph_set: str = "emoji") -> FrameFrag:
    pct = stats.completion_percentage
    filled = min(BAR_WIDTH, pct // 5)
    lines: FrameFrag = [
        [("class:header", "TRAVEL STATISTICS")],
        [("", "")],
        [("", f"Total Prefectures: {stats.total_regions}")],
        [("", f"Visited: {stats.visited_count} / {stats.total_regions} ({pct}%)")],
        [("", f"Total Score: {stats.total_score}")],
        [("", f"Max Possible: {stats.max_score}")],
        [("", "")],
        [(_bar_style(pct), "█" * filled), ("class:legend", "░" * (BAR_WIDTH - filled)), ("", f"  {pct}%")],
        [("", "")],
        [("class:header", "EXPERIENCE BREAKDOWN")],
        [("", "")],
    ]
    for level in reversed(LEVELS):
        glyph = glyph_for(level, glyph_set)
        lines.append([(glyph.style, f"{glyph.symbol} {level_text(level)} ({level}): {stats.level_counts[level]}")])
    lines.append([("", "")])
    lines.append([("", f"Most Common: Level {stats.most_common_level}")])
    lines.append([("", "")])
    lines.append([("class:header", "REGIONAL PROGRESS")])
    lines.append([("", "")])
    for group in GROUP_ORDER:
        if group.value not in stats.group_stats:
            continue
        visited, total = stats.group_stats[group.value]
        gpct = stats.group_percentage(group.value)
        gfilled = min(GROUP_BAR_WIDTH, gpct // 8)
        lines.append([("", f"{group.value}: {visited}/{total} ({gpct}%)")])
        lines.append([
            (_bar_style(gpct), "█" * gfilled),
            ("class:legend", "░" * (GROUP_BAR_WIDTH - gfilled)),
        ])
    return lines


class StatsView:
    name = "stats"

    def render(self, ctx: RenderContext, width: int, height: int) -> ViewFrame:
        lines = build_lines(calculate_stats(ctx.regions, ctx.progress), ctx.glyph_set)
        top = window_top(ctx.scroll, len(lines), height)
        return ViewFrame(lines[top:top + height], top)
