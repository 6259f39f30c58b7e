#!/usr/bin/env python3
# jterm/ui/statusbar.py

from __future__ import annotations

from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.layout import Window
from prompt_toolkit.layout.controls import FormattedTextControl

from jterm.stats import calculate_stats
from jterm.ui.state import AppSession


class StatusBar:
    def __init__(self, session: AppSession):
        self.session = session
        self.window = Window(
            content=FormattedTextControl(self.fragments),
            height=1,
            style="class:status",
        )

    def __pt_container__(self):
        return self.window

    def fragments(self) -> StyleAndTextTuples:
        state = self.session.state
        stats = calculate_stats(self.session.regions, self.session.store)
        region = self.session.selected_region
        dirty = "*" if self.session.store.dirty else ""
        msg = (
            f" {state.view.title} | {region.name if region else '-'} | "
            f"visited {stats.visited_count}/{stats.total_regions}{dirty} | "
            f"render={state.last_render_ms:.1f}ms  "
        )
        out: StyleAndTextTuples = [("", msg)]
        if state.info_msg:
            style = "class:status.error" if state.info_is_error else ""
            out.append((style, f" {state.info_msg} "))
        return out
