#!/usr/bin/env python3
# jterm/rendering/context.py
"""
Shared types for the view backends.

- Style format: list[list[tuple[str, str]]] suitable for prompt_toolkit
  FormattedText, one inner list per terminal row.
- RenderContext carries everything a backend may read; backends never
  mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from jterm.progress import ProgressStore
from jterm.taxonomy import Region

StyleRun = Tuple[str, str]                # (style, text)
LineFrag = List[StyleRun]                 # one terminal row as runs
FrameFrag = List[LineFrag]                # full terminal frame as rows

__all__ = ["StyleRun", "LineFrag", "FrameFrag", "RenderContext", "ViewFrame", "window_top"]


@dataclass(frozen=True)
class RenderContext:
    regions: Sequence[Region]
    progress: ProgressStore
    selected: int = 0
    scroll: int = 0
    glyph_set: str = "emoji"
    background: str = " "
    legend: bool = True
    reference_image: Optional[str] = None
    image_palette: str = " .:-=+*#%@"
    # False while the user scrolls freely; views then leave the offset alone
    follow_selection: bool = True

    @property
    def selected_region(self) -> Optional[Region]:
        if 0 <= self.selected < len(self.regions):
            return self.regions[self.selected]
        return None


@dataclass
class ViewFrame:
    """Rendered rows plus the scroll offset the backend actually used."""
    lines: FrameFrag
    scroll: int = 0


def window_top(scroll: int, total: int, height: int, keep: Optional[int] = None) -> int:
    """
    Clamp a scroll offset so the window [top, top+height) stays inside
    [0, total) and, when ``keep`` is given, contains that line.
    """
    height = max(1, height)
    top = max(0, min(scroll, max(0, total - height)))
    if keep is not None and 0 <= keep < total:
        if keep < top:
            top = keep
        elif keep >= top + height:
            top = keep + 1 - height
    return top
