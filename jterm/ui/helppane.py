#!/usr/bin/env python3
# jterm/ui/helppane.py

from __future__ import annotations

from prompt_toolkit.filters import Condition
from prompt_toolkit.layout import ConditionalContainer
from prompt_toolkit.widgets import Frame, TextArea

from jterm.ui.state import AppState

_HELP_TEXT = (
    "Key Bindings:\n"
    "  ↑/↓ j/k   Navigate / scroll\n"
    "  ←/→       Select prefecture\n"
    "  0-5       Set experience level\n"
    "  + / -     Raise / lower level\n"
    "  Enter     Prefecture details\n"
    "  l m s w   List, regions, stats, overview\n"
    "  S         Save now\n"
    "  e / x     Export JSON / CSV\n"
    "  h / F1    Toggle this help\n"
    "  q         Quit\n"
    "\n"
    "Levels:\n"
    "  0 Never been  ⬜   3 Visited  🟩\n"
    "  1 Passed      🟥   4 Stayed   🟪\n"
    "  2 Alighted    🟨   5 Lived    🟦\n"
)


class HelpPane:
    def __init__(self, state: AppState):
        self.state = state
        self.text_area = TextArea(
            text=_HELP_TEXT,
            style="class:help",
            read_only=True,
            focusable=False,
        )
        self.frame = Frame(self.text_area, title="Help", style="class:help")
        self.container = ConditionalContainer(
            self.frame, filter=Condition(lambda: self.state.show_help)
        )

    def __pt_container__(self):
        return self.container

    def toggle(self) -> None:
        self.state.show_help = not self.state.show_help
