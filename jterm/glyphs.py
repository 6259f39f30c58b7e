#!/usr/bin/env python3
# jterm/glyphs.py
"""
Level -> display glyph lookup.

Styles are prompt_toolkit class tags ("class:level-3"); the active theme in
jterm.styles decides the actual colours.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

__all__ = ["Glyph", "GLYPH_SETS", "glyph_for", "level_style", "level_text", "LEVEL_TEXT"]


class Glyph(NamedTuple):
    symbol: str
    style: str


LEVEL_TEXT: Tuple[str, ...] = (
    "Never been there",
    "Passed there",
    "Alighted there",
    "Visited there",
    "Stayed there",
    "Lived there",
)

# "kanji" uses each region's own map character; its level glyphs only serve
# places without a region (legend, sidebar).
GLYPH_SETS: Dict[str, Tuple[str, ...]] = {
    "emoji": ("⬜", "🟥", "🟨", "🟩", "🟪", "🟦"),
    "text": ("○", "1", "2", "3", "4", "5"),
    "kanji": ("⬜", "🟥", "🟨", "🟩", "🟪", "🟦"),
}


def _normalize(level) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        return 0
    return level if 0 <= level < len(LEVEL_TEXT) else 0


def level_style(level) -> str:
    return f"class:level-{_normalize(level)}"


def level_text(level) -> str:
    return LEVEL_TEXT[_normalize(level)]


def glyph_for(level, glyph_set: str = "emoji") -> Glyph:
    """Resolve a level to (symbol, style). Out-of-range levels render as level 0."""
    lvl = _normalize(level)
    symbols = GLYPH_SETS.get(glyph_set, GLYPH_SETS["emoji"])
    return Glyph(symbols[lvl], level_style(lvl))
