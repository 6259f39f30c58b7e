from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from jterm import actions
from jterm.rendering.renderer import Renderer
from jterm.ui.detail import detail_fragments
from jterm.ui.view_control import ViewControl
from jterm.view import ViewMode


def test_view_control_writes_back_scroll(session):
    control = ViewControl(session, Renderer())
    actions.switch_view(session, ViewMode.STATISTICS)
    session.state.scroll_by(500)
    content = control.create_content(80, 6)
    assert content.line_count == 6
    assert 0 < session.state.scroll[ViewMode.STATISTICS] < 500
    assert session.state.last_render_ms >= 0.0


def test_view_control_pads_short_views(session):
    control = ViewControl(session, Renderer())
    content = control.create_content(80, 60)
    assert content.get_line(59) == [("", "")]
    assert "Hokkaido" in "".join(t for _s, t in content.get_line(0))


def test_detail_fragments(session):
    session.store.set_level("Hokkaido", 4)
    text = "".join(t for _s, t in detail_fragments(session))
    assert "Capital: Sapporo" in text
    assert "Population: 5,224,614" in text
    assert "Level 4: Stayed there" in text


def test_app_builds(session):
    from jterm.ui.app import JTermApp

    with create_pipe_input() as inp, create_app_session(input=inp, output=DummyOutput()):
        app = JTermApp(session)
        keys = {b.keys for b in app.kb.bindings}
        assert ("q",) in keys
        assert ("w",) in keys
        assert ("5",) in keys
        assert app.app.layout.has_focus(app.view_window)


def test_down_keys_scroll_the_map_sidebar_and_regional_view(session):
    control = ViewControl(session, Renderer())
    for mode in (ViewMode.ENHANCED_MAP, ViewMode.REGIONAL_MAP):
        actions.switch_view(session, mode)
        control.create_content(120, 12)
        start = session.state.scroll[mode]
        for _ in range(10):
            actions.navigate(session, +1)
            control.create_content(120, 12)
        assert session.state.scroll[mode] == start + 10
        assert session.state.selected == 0


def test_selection_move_brings_sidebar_back(session):
    control = ViewControl(session, Renderer())
    actions.switch_view(session, ViewMode.ENHANCED_MAP)
    for _ in range(20):
        actions.navigate(session, +1)
    control.create_content(120, 12)
    assert session.state.scroll[ViewMode.ENHANCED_MAP] == 20
    actions.select(session, +1)
    control.create_content(120, 12)
    assert session.state.scroll[ViewMode.ENHANCED_MAP] == 1


def test_side_column_hidden_on_overview_map(session):
    from jterm.ui.app import JTermApp

    with create_pipe_input() as inp, create_app_session(input=inp, output=DummyOutput()):
        app = JTermApp(session)
        assert app.side_filter()
        actions.switch_view(session, ViewMode.ENHANCED_MAP)
        assert not app.side_filter()
        actions.toggle_help(session)
        assert app.side_filter()


def test_frame_title_uses_configured_app_title(session):
    from jterm.ui.app import JTermApp

    session.cfg["app"]["title"] = "My Japan"
    with create_pipe_input() as inp, create_app_session(input=inp, output=DummyOutput()):
        app = JTermApp(session)
        assert app.view_title() == "My Japan | Japanese Prefectures"
        actions.switch_view(session, ViewMode.STATISTICS)
        assert app.view_title() == "My Japan | Statistics"
