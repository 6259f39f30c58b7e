#!/usr/bin/env python3
# jterm/ui/app.py
"""Compose the prompt_toolkit application for the JTerm progress tracker."""

from __future__ import annotations

import logging

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import ConditionalContainer, FloatContainer, HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.dimension import Dimension as D
from prompt_toolkit.shortcuts import set_title
from prompt_toolkit.widgets import Frame

from jterm import actions
from jterm.rendering.renderer import Renderer
from jterm.styles import make_style
from jterm.ui.detail import DetailPopup
from jterm.ui.helppane import HelpPane
from jterm.ui.infopane import InfoPane
from jterm.ui.state import AppSession
from jterm.ui.statusbar import StatusBar
from jterm.ui.toolbar import Toolbar
from jterm.ui.view_control import ViewControl
from jterm.view import VIEW_TRIGGERS, ViewMode

log = logging.getLogger(__name__)

# View and side column share the width 3:1; the side column never grows past SIDE_MAX
SIDE_MIN = 24
SIDE_MAX = 40


class JTermApp:
    def __init__(self, session: AppSession, renderer: Renderer = None):
        self.session = session
        self.cfg = session.cfg
        self.state = session.state
        self.renderer = renderer or Renderer()

        self.view_control = ViewControl(session, self.renderer)
        self.view_window = Window(
            content=self.view_control,
            dont_extend_width=False,
            wrap_lines=False,
        )
        self.view_control.bind_window(self.view_window)

        self.info = InfoPane(session)
        self.help_pane = HelpPane(self.state)
        self.detail = DetailPopup(session)
        self.toolbar = Toolbar(session, self.view_control)
        self.status = StatusBar(session)

        # The overview map needs its full width; the info column only returns there with help
        self.side_filter = Condition(
            lambda: self.state.view is not ViewMode.ENHANCED_MAP or self.state.show_help
        )
        side = ConditionalContainer(
            HSplit([self.info, self.help_pane], width=D(min=SIDE_MIN, max=SIDE_MAX, weight=1)),
            filter=self.side_filter,
        )

        # Layout: active view stretches, side column stays narrow, bars below.
        body = HSplit([
            VSplit([
                Frame(self.view_window, title=self.view_title, width=D(weight=3)),
                side,
            ]),
            self.toolbar,
            self.status,
        ])
        self.root = FloatContainer(content=body, floats=[self.detail.float])

        self.kb = self._build_key_bindings()
        self.app = Application(
            layout=Layout(self.root, focused_element=self.view_window),
            key_bindings=self.kb,
            full_screen=True,
            style=make_style(self.cfg),
            mouse_support=bool(self.cfg["ui"].get("mouse", True)),
        )

    def view_title(self) -> str:
        return f"{self.cfg['app']['title']} | {self.state.view.title}"

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        s = self.session

        @kb.add("q")
        def _(event):
            actions.quit_app(event.app)

        @kb.add("h")
        @kb.add("f1")
        def _(event):
            actions.toggle_help(s)

        for key in VIEW_TRIGGERS:
            @kb.add(key)
            def _(event, key=key):
                actions.trigger_view(s, key)

        for digit in "012345":
            @kb.add(digit)
            def _(event, level=int(digit)):
                actions.set_level(s, level)

        # "=" is unshifted "+" on most layouts
        @kb.add("+")
        @kb.add("=")
        def _(event):
            actions.adjust_level(s, +1)

        @kb.add("-")
        def _(event):
            actions.adjust_level(s, -1)

        @kb.add("up")
        @kb.add("k")
        def _(event):
            actions.navigate(s, -1)

        @kb.add("down")
        @kb.add("j")
        def _(event):
            actions.navigate(s, +1)

        @kb.add("left")
        def _(event):
            actions.select(s, -1)

        @kb.add("right")
        def _(event):
            actions.select(s, +1)

        @kb.add("enter")
        def _(event):
            actions.toggle_detail(s)

        @kb.add("escape", eager=True)
        def _(event):
            actions.close_detail(s)

        @kb.add("S")
        @kb.add("c-s")
        def _(event):
            actions.save_now(s)

        @kb.add("e")
        def _(event):
            actions.export(s, "json")

        @kb.add("x")
        def _(event):
            actions.export(s, "csv")

        return kb

    def run(self) -> None:
        log.info("Starting UI in %s view", self.state.view.value)
        set_title(self.cfg["app"]["title"])
        self.app.run()
