#!/usr/bin/env python3
# jterm/ui/state.py
"""Runtime state for the JTerm TUI: view flags, selection and the session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from jterm.config import Config
from jterm.persistence import ProgressRepository
from jterm.progress import ProgressStore
from jterm.rendering.context import RenderContext
from jterm.taxonomy import Region
from jterm.view import ViewController, ViewMode


@dataclass
class AppState:
    cfg: Config

    views: ViewController = field(init=False)
    selected: int = 0
    follow_selection: bool = True
    scroll: Dict[ViewMode, int] = field(default_factory=lambda: {m: 0 for m in ViewMode})

    # overlays
    show_help: bool = False
    show_detail: bool = False

    # status line
    info_msg: str = ""
    info_is_error: bool = False
    last_render_ms: float = 0.0

    def __post_init__(self):
        start = ViewMode.from_name(self.cfg["ui"].get("start_view", "list"), ViewMode.LIST)
        self.views = ViewController(start)

    @property
    def view(self) -> ViewMode:
        return self.views.mode

    # ------------- selection / scrolling -------------

    def move_selection(self, delta: int, count: int) -> int:
        self.follow_selection = True
        if count <= 0:
            self.selected = 0
        else:
            self.selected = max(0, min(count - 1, self.selected + int(delta)))
        return self.selected

    def scroll_by(self, delta: int) -> None:
        self.follow_selection = False
        self.scroll[self.view] = max(0, self.scroll[self.view] + int(delta))

    def set_scroll(self, mode: ViewMode, value: int) -> None:
        self.scroll[mode] = max(0, int(value))

    # ------------- info -------------

    def set_info(self, msg: str) -> None:
        self.info_msg = msg
        self.info_is_error = False

    def set_error(self, msg: str) -> None:
        self.info_msg = msg
        self.info_is_error = True

    def clear_info(self) -> None:
        self.info_msg = ""
        self.info_is_error = False


@dataclass
class AppSession:
    """Everything one run of the app owns: table, store, file and UI state."""
    cfg: Config
    regions: Sequence[Region]
    store: ProgressStore
    repository: ProgressRepository
    state: AppState = field(init=False)

    def __post_init__(self):
        self.state = AppState(self.cfg)

    @property
    def selected_region(self) -> Optional[Region]:
        i = self.state.selected
        return self.regions[i] if 0 <= i < len(self.regions) else None

    def render_context(self) -> RenderContext:
        m = self.cfg["map"]
        return RenderContext(
            regions=self.regions,
            progress=self.store,
            selected=self.state.selected,
            scroll=self.state.scroll[self.state.view],
            glyph_set=m.get("glyphs", "emoji"),
            background=m.get("background_char", " "),
            legend=bool(m.get("legend", True)),
            reference_image=m.get("reference_image"),
            image_palette=m.get("image_palette", " .:-=+*#%@"),
            follow_selection=self.state.follow_selection,
        )
