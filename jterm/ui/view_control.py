#!/usr/bin/env python3
# jterm/ui/view_control.py
"""prompt_toolkit UIControl that renders whichever view is active."""

from __future__ import annotations

import time
from typing import List

from prompt_toolkit.application import get_app_or_none
from prompt_toolkit.layout.controls import UIContent, UIControl

from jterm.rendering.context import FrameFrag, LineFrag
from jterm.rendering.renderer import Renderer
from jterm.ui.state import AppSession


class ViewControl(UIControl):
    """Render the active view synchronously on every redraw."""

    def __init__(self, session: AppSession, renderer: Renderer):
        self.session = session
        self.renderer = renderer
        self._window = None

    # -------- UIControl interface --------

    def is_focusable(self) -> bool:
        return True

    def preferred_width(self, max_available_width: int) -> int:
        return max_available_width

    def preferred_height(
        self,
        width: int,
        max_available_height: int,
        wrap_lines: bool,
        get_line_prefix,
    ) -> int:
        return max_available_height

    def create_content(self, width: int, height: int) -> UIContent:
        width = max(1, int(width))
        height = max(1, int(height))
        state = self.session.state

        t0 = time.perf_counter()
        frame = state.views.render(self.renderer, self.session.render_context(), width, height)
        # Remember the clamped offset so the next scroll starts from what is shown
        state.set_scroll(state.view, frame.scroll)
        lines = self._normalize_lines(frame.lines, height)
        state.last_render_ms = (time.perf_counter() - t0) * 1000.0

        return UIContent(
            get_line=lambda i: lines[i] if 0 <= i < height else [("", "")],
            line_count=height,
        )

    def bind_window(self, window) -> None:
        """Remember the Window that hosts this control for focus management."""

        self._window = window

    def focus(self) -> None:
        app = get_app_or_none()
        if app and self._window is not None:
            app.layout.focus(self._window)

    # -------- helpers --------

    @staticmethod
    def _normalize_lines(source: FrameFrag, height: int) -> List[LineFrag]:
        lines: List[LineFrag] = []
        for y in range(height):
            if y < len(source) and source[y]:
                lines.append(list(source[y]))
            else:
                lines.append([("", "")])
        return lines
