#!/usr/bin/env python3
# jterm/rendering/grid.py
"""
Overview map compositor.

Builds a fixed 20x60 buffer of (glyph, style) cells from the prefecture
table and the progress store:

1. every cell starts as the background glyph;
2. the legend decoration is drawn right of the geography columns;
3. each region, in table order, writes its level glyph at its placement
   (coordinate + offset). A later region overwrites an earlier one that
   landed on the same cell.

The buffer is rebuilt on every render and handed out read-only.
grid_to_fragments() turns it into prompt_toolkit rows, letting a
double-width glyph absorb the blank cell to its right so rows keep their
width on screen.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np
from prompt_toolkit.utils import get_cwidth

from jterm.glyphs import glyph_for
from jterm.progress import LEVELS
from jterm.rendering.context import FrameFrag, LineFrag
from jterm.taxonomy import GRID_COLS, GRID_ROWS, MAP_COLS, Region

log = logging.getLogger(__name__)

__all__ = ["GridBuffer", "compose", "grid_to_fragments", "LEGEND_LABELS"]

LEGEND_LABELS = ("Never", "Passed", "Alighted", "Visited", "Stayed", "Lived")
LEGEND_WIDTH = 12       # separator, gap, glyph, gap, 8-char label


class GridBuffer:
    """Fixed-size matrix of display cells: one glyph and one style per cell."""

    __slots__ = ("glyphs", "styles", "background")

    def __init__(self, glyphs: np.ndarray, styles: np.ndarray, background: str = " "):
        if glyphs.shape != styles.shape:
            raise ValueError("glyph and style planes differ in shape")
        self.glyphs = glyphs
        self.styles = styles
        self.background = background

    @classmethod
    def blank(cls, rows: int, cols: int, background: str = " ") -> "GridBuffer":
        return cls(
            np.full((rows, cols), background, dtype=object),
            np.full((rows, cols), "", dtype=object),
            background,
        )

    # ------------- shape / access -------------

    @property
    def shape(self) -> Tuple[int, int]:
        return self.glyphs.shape

    @property
    def rows(self) -> int:
        return self.glyphs.shape[0]

    @property
    def cols(self) -> int:
        return self.glyphs.shape[1]

    def cell(self, row: int, col: int) -> Tuple[str, str]:
        return self.glyphs[row, col], self.styles[row, col]

    def put(self, row: int, col: int, glyph: str, style: str = "") -> None:
        self.glyphs[row, col] = glyph
        self.styles[row, col] = style

    def freeze(self) -> "GridBuffer":
        self.glyphs.setflags(write=False)
        self.styles.setflags(write=False)
        return self

    # ------------- export -------------

    def lines(self) -> List[str]:
        return ["".join(row) for row in self.glyphs.tolist()]

    def tobytes(self) -> bytes:
        text = "\n".join(self.lines())
        styles = "\n".join("\t".join(row) for row in self.styles.tolist())
        return text.encode("utf-8") + b"\x00" + styles.encode("utf-8")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridBuffer):
            return NotImplemented
        return (
            self.shape == other.shape
            and bool(np.array_equal(self.glyphs, other.glyphs))
            and bool(np.array_equal(self.styles, other.styles))
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"GridBuffer({self.rows}x{self.cols})"


def _put_text(grid: GridBuffer, row: int, col: int, text: str, style: str) -> None:
    for i, ch in enumerate(text):
        if col + i >= grid.cols:
            break
        grid.put(row, col + i, ch, style)


def _draw_legend(grid: GridBuffer, map_cols: int, glyph_set: str) -> None:
    start = map_cols + 1
    if start + LEGEND_WIDTH - 1 > grid.cols:
        return
    for row in range(grid.rows):
        grid.put(row, start, "│", "class:border")
    _put_text(grid, 0, start + 1, "Levels", "class:legend")
    for level in LEVELS:
        row = level + 1
        if row >= grid.rows:
            break
        glyph = glyph_for(level, glyph_set)
        grid.put(row, start + 1, glyph.symbol, glyph.style)
        _put_text(grid, row, start + 3, LEGEND_LABELS[level], "class:legend")


def compose(
    regions: Iterable[Region],
    progress,
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    map_cols: int = MAP_COLS,
    glyph_set: str = "emoji",
    background: str = " ",
    legend: bool = True,
    highlight: Optional[str] = None,
) -> GridBuffer:
    """
    Compose the overview map.

    ``progress`` only needs get_level(id). Neither argument is modified and
    the same inputs always give an equal buffer. Placements outside the
    geography area are skipped here; validate_regions() reports them at
    startup.
    """
    grid = GridBuffer.blank(rows, cols, background)
    if legend:
        _draw_legend(grid, map_cols, glyph_set)

    limit = min(cols, map_cols)
    for region in regions:
        row, col = region.placement
        if not (0 <= row < rows and 0 <= col < limit):
            log.debug("Skipping %s: placement %s outside map area", region.id, (row, col))
            continue
        glyph = glyph_for(progress.get_level(region.id), glyph_set)
        symbol = region.map_char if glyph_set == "kanji" and region.map_char else glyph.symbol
        style = glyph.style
        if highlight is not None and region.id == highlight:
            style = f"{style} class:selected"
        grid.put(row, col, symbol, style)

    return grid.freeze()


def grid_to_fragments(grid: GridBuffer) -> FrameFrag:
    """Convert a buffer to styled rows, merging runs of equal style."""
    frame: FrameFrag = []
    for r in range(grid.rows):
        line: LineFrag = []
        run_style: Optional[str] = None
        run_text: List[str] = []
        skip = False
        for c in range(grid.cols):
            if skip:
                skip = False
                continue
            ch, style = grid.cell(r, c)
            if (
                get_cwidth(ch) > 1
                and c + 1 < grid.cols
                and grid.cell(r, c + 1) == (grid.background, "")
            ):
                skip = True
            if style != run_style and run_text:
                line.append((run_style, "".join(run_text)))
                run_text = []
            run_style = style
            run_text.append(ch)
        if run_text:
            line.append((run_style, "".join(run_text)))
        frame.append(line if line else [("", "")])
    return frame
