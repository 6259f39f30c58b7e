#!/usr/bin/env python3
# jterm/ui/infopane.py

from __future__ import annotations

from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.layout import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import Frame

from jterm.glyphs import level_style, level_text
from jterm.ui.state import AppSession


class InfoPane:
    """Summary of the selected prefecture."""

    def __init__(self, session: AppSession):
        self.session = session
        self.window = Window(
            content=FormattedTextControl(self.fragments),
            wrap_lines=True,
            style="class:info",
        )
        self.frame = Frame(self.window, title="Prefecture Info")

    def __pt_container__(self):
        return self.frame

    def fragments(self) -> StyleAndTextTuples:
        region = self.session.selected_region
        if region is None:
            return [("", "No prefecture selected")]
        level = self.session.store.get_level(region.id)
        return [
            ("", f"Prefecture: {region.name}\n"),
            ("", f"Japanese: {region.name_jp}\n"),
            ("", f"Region: {region.group.value}\n\n"),
            (level_style(level), f"Current Level: {level} - {level_text(level)}\n\n"),
            ("class:legend", "Press 0-5 to set experience level"),
        ]
