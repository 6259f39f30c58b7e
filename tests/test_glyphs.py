from jterm.glyphs import GLYPH_SETS, LEVEL_TEXT, glyph_for, level_style, level_text
from jterm.progress import LEVELS


def test_every_level_resolves_deterministically():
    for glyph_set in GLYPH_SETS:
        for level in LEVELS:
            assert glyph_for(level, glyph_set) == glyph_for(level, glyph_set)
            assert glyph_for(level, glyph_set).style == f"class:level-{level}"


def test_levels_have_distinct_symbols():
    for glyph_set in ("emoji", "text"):
        symbols = [glyph_for(level, glyph_set).symbol for level in LEVELS]
        assert len(set(symbols)) == len(symbols)


def test_neutral_marker_for_zero():
    assert glyph_for(0).symbol == "⬜"
    assert glyph_for(0, "text").symbol == "○"


def test_out_of_range_levels_fall_back_to_zero():
    assert glyph_for(9) == glyph_for(0)
    assert glyph_for(-1, "text") == glyph_for(0, "text")
    assert level_style(None) == "class:level-0"
    assert level_text(7) == LEVEL_TEXT[0]


def test_unknown_glyph_set_uses_emoji():
    assert glyph_for(5, "nope") == glyph_for(5, "emoji")
    assert level_text(5) == "Lived there"
