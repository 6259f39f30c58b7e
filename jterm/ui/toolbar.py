#!/usr/bin/env python3
# jterm/ui/toolbar.py

from __future__ import annotations

from typing import Callable

from prompt_toolkit.application.current import get_app
from prompt_toolkit.filters import Condition
from prompt_toolkit.layout import ConditionalContainer, VSplit, Window
from prompt_toolkit.widgets import Box, Label

from jterm import actions
from jterm.ui.buttons import make_button
from jterm.ui.state import AppSession
from jterm.ui.view_control import ViewControl
from jterm.view import ViewMode


class Toolbar:
    """Clickable controls for switching views, changing levels and saving."""

    def __init__(self, session: AppSession, view_control: ViewControl):
        self.session = session
        self.view_control = view_control

        row = VSplit(
            [
                Label("View:", dont_extend_width=True),
                make_button("List", self._wrap(lambda: actions.switch_view(session, ViewMode.LIST)), "l"),
                make_button("Regions", self._wrap(lambda: actions.switch_view(session, ViewMode.REGIONAL_MAP)), "m"),
                make_button("Stats", self._wrap(lambda: actions.switch_view(session, ViewMode.STATISTICS)), "s"),
                make_button("Overview", self._wrap(lambda: actions.switch_view(session, ViewMode.ENHANCED_MAP)), "w"),
                Window(width=1, char="|"),
                Label("Level:", dont_extend_width=True),
                make_button("-", self._wrap(lambda: actions.adjust_level(session, -1))),
                make_button("+", self._wrap(lambda: actions.adjust_level(session, +1))),
                Window(width=1, char="|"),
                make_button("Save", self._wrap(lambda: actions.save_now(session)), "S"),
                make_button("Help", self._wrap(lambda: actions.toggle_help(session)), "h"),
                make_button("Quit", self._quit, "q"),
            ],
            padding=1,
        )
        show = Condition(lambda: bool(self.session.cfg["ui"].get("show_toolbar", True)))
        self._container = ConditionalContainer(
            Box(body=row, style="class:toolbar", padding_left=1, padding_right=1, height=1),
            filter=show,
        )

    def __pt_container__(self):
        return self._container

    def _wrap(self, action: Callable[[], object]) -> Callable[[], None]:
        def handler() -> None:
            action()
            get_app().invalidate()
            self.view_control.focus()
        return handler

    def _quit(self) -> None:
        get_app().exit()
