#!/usr/bin/env python3
# jterm/ui/detail.py
"""Centered popup with the full record of the selected prefecture."""

from __future__ import annotations

from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.layout import ConditionalContainer, Float, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import Frame

from jterm.glyphs import level_style, level_text
from jterm.ui.state import AppSession

POPUP_WIDTH = 60
POPUP_HEIGHT = 18


def detail_fragments(session: AppSession) -> StyleAndTextTuples:
    region = session.selected_region
    if region is None:
        return [("", "No prefecture selected")]
    level = session.store.get_level(region.id)
    style = level_style(level)
    return [
        ("class:header", "PREFECTURE DETAILS\n\n"),
        ("", f"Name: {region.name} ({region.name_jp})\n"),
        ("", f"Region: {region.group.value}\n"),
        ("", f"Capital: {region.capital}\n"),
        ("", f"Population: {region.population:,}\n"),
        ("", f"Area: {region.area_km2:,} km²\n"),
        ("", f"Population Density: {region.density:.1f} people/km²\n\n"),
        ("", "Travel Experience:\n"),
        (style, f"Level {level}: {level_text(level)}\n\n"),
        ("class:legend", "Press ESC to close\nPress 0-5 to change level"),
    ]


class DetailPopup:
    def __init__(self, session: AppSession):
        self.session = session
        body = Frame(
            Window(FormattedTextControl(lambda: detail_fragments(self.session)), wrap_lines=True),
            title="Prefecture Information",
            style="class:detail",
            width=POPUP_WIDTH,
            height=POPUP_HEIGHT,
        )
        self.float = Float(
            ConditionalContainer(body, filter=Condition(lambda: self.session.state.show_detail)),
        )
