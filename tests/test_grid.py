import numpy as np
import pytest
from prompt_toolkit.utils import get_cwidth

from jterm.glyphs import glyph_for
from jterm.rendering.grid import LEGEND_LABELS, GridBuffer, compose, grid_to_fragments
from jterm.taxonomy import GRID_COLS, GRID_ROWS, MAP_COLS, region_by_id

from conftest import make_region


def test_shape_and_purity(regions, store):
    store.set_level("Kyoto", 3)
    a = compose(regions, store)
    b = compose(regions, store)
    assert a.shape == (GRID_ROWS, GRID_COLS)
    assert a == b
    assert a.tobytes() == b.tobytes()
    assert store.as_dict() == {"Kyoto": 3}


def test_buffer_is_read_only(regions, store):
    grid = compose(regions, store)
    with pytest.raises(ValueError):
        grid.glyphs[0, 0] = "X"
    with pytest.raises(ValueError):
        grid.put(0, 0, "X")


def test_fresh_store_shows_neutral_marker_for_tokyo(regions, store):
    assert store.get_level("Tokyo") == 0
    neutral = glyph_for(0)
    grid = compose(regions, store)
    assert grid.cell(*region_by_id("Tokyo").placement) == (neutral.symbol, neutral.style)


def test_setting_hokkaido_changes_only_its_cell(regions, store):
    before = compose(regions, store)
    store.set_level("Hokkaido", 5)
    after = compose(regions, store)

    lived = glyph_for(5)
    row, col = region_by_id("Hokkaido").placement
    assert after.cell(row, col) == (lived.symbol, lived.style)

    changed = np.argwhere((before.glyphs != after.glyphs) | (before.styles != after.styles))
    assert [tuple(c) for c in changed] == [(row, col)]


def test_collision_later_region_wins():
    first = make_region("First", (4, 4))
    second = make_region("Second", (3, 4), offset=(1, 0))
    progress = {"First": 1, "Second": 4}

    class Levels:
        def get_level(self, region_id):
            return progress.get(region_id, 0)

    for _ in range(3):
        grid = compose([first, second], Levels())
        assert grid.cell(4, 4) == tuple(glyph_for(4))


def test_regions_never_overwrite_legend(store):
    intruder = make_region("Intruder", (1, MAP_COLS + 2))
    grid = compose([intruder], store)
    assert grid.cell(1, MAP_COLS + 2) == (glyph_for(0).symbol, glyph_for(0).style)
    assert grid.cell(0, MAP_COLS + 1)[0] == "│"


def test_legend_layout(store):
    grid = compose([], store)
    assert "".join(grid.glyphs[0, MAP_COLS + 2:MAP_COLS + 8]) == "Levels"
    for level, label in enumerate(LEGEND_LABELS):
        row = level + 1
        assert grid.cell(row, MAP_COLS + 2)[0] == glyph_for(level).symbol
        assert "".join(grid.glyphs[row, MAP_COLS + 4:MAP_COLS + 4 + len(label)]) == label


def test_legend_can_be_disabled(store):
    grid = compose([], store, legend=False, background=".")
    assert set(grid.glyphs.ravel().tolist()) == {"."}


def test_all_regions_written_within_bounds(regions, store):
    for r in regions:
        store.set_level(r.id, 3)
    grid = compose(regions, store, legend=False)
    written = np.argwhere(grid.styles == "class:level-3")
    assert len(written) == 47
    for row, col in written:
        assert 0 <= row < GRID_ROWS and 0 <= col < GRID_COLS


def test_highlight_marks_selected(regions, store):
    grid = compose(regions, store, highlight="Osaka")
    _, style = grid.cell(*region_by_id("Osaka").placement)
    assert style.endswith("class:selected")


def test_kanji_row_keeps_display_width(regions, store):
    grid = compose(regions, store, glyph_set="kanji")
    row, col = region_by_id("Shizuoka").placement
    assert grid.cell(row, col)[0] == "静"
    frame = grid_to_fragments(grid)
    assert len(frame) == GRID_ROWS
    assert sum(get_cwidth(text) for _style, text in frame[row]) == GRID_COLS


def test_fragments_merge_equal_styles():
    grid = GridBuffer.blank(1, 5).freeze()
    assert grid_to_fragments(grid) == [[("", "     ")]]
    assert grid.lines() == ["     "]
