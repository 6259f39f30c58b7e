#!/usr/bin/env python3
# jterm/actions.py
"""
Shared action functions used by both keybindings and toolbar buttons.
Each action mutates the session and leaves a message for the status bar;
the view is redrawn by prompt_toolkit afterwards.
"""

from __future__ import annotations

import logging

from jterm.export import export_csv, export_json
from jterm.glyphs import level_text
from jterm.persistence import WriteError
from jterm.progress import InvalidLevel
from jterm.ui.state import AppSession
from jterm.view import VIEW_TRIGGERS, ViewMode

log = logging.getLogger(__name__)

# Views where up/down move the text instead of the selection
_SCROLLING_VIEWS = (ViewMode.REGIONAL_MAP, ViewMode.STATISTICS, ViewMode.ENHANCED_MAP)


def switch_view(session: AppSession, mode: ViewMode) -> bool:
    state = session.state
    state.clear_info()
    changed = state.views.switch(mode)
    if changed:
        state.follow_selection = True
        state.show_detail = False
    return changed


def trigger_view(session: AppSession, key: str) -> bool:
    mode = VIEW_TRIGGERS.get(key)
    return switch_view(session, mode) if mode is not None else False


def navigate(session: AppSession, delta: int) -> None:
    """Up/down: move the selection in the list, scroll elsewhere."""
    state = session.state
    state.clear_info()
    if state.view in _SCROLLING_VIEWS:
        state.scroll_by(delta)
    else:
        state.move_selection(delta, len(session.regions))


def select(session: AppSession, delta: int) -> None:
    """Left/right: step the selected prefecture in any view."""
    session.state.clear_info()
    session.state.move_selection(delta, len(session.regions))


def save(session: AppSession) -> bool:
    try:
        session.repository.save(session.store)
    except WriteError as exc:
        session.state.set_error(f"Save failed: {exc}")
        return False
    return True


def _after_change(session: AppSession, region_name: str, level: int) -> None:
    state = session.state
    state.set_info(f"{region_name}: Level {level} - {level_text(level)}")
    if session.cfg["app"].get("autosave", True) and save(session):
        state.set_info(f"{region_name}: Level {level} - {level_text(level)} (saved)")


def set_level(session: AppSession, level: int) -> bool:
    region = session.selected_region
    if region is None:
        return False
    try:
        session.store.set_level(region.id, level)
    except InvalidLevel as exc:
        session.state.set_error(str(exc))
        return False
    _after_change(session, region.name, level)
    return True


def adjust_level(session: AppSession, delta: int) -> bool:
    region = session.selected_region
    if region is None:
        return False
    level = session.store.adjust_level(region.id, delta)
    _after_change(session, region.name, level)
    return True


def save_now(session: AppSession) -> bool:
    if save(session):
        session.state.set_info(f"Progress saved to {session.repository.path}")
        return True
    return False


def export(session: AppSession, fmt: str) -> bool:
    directory = session.cfg.export_dir
    writer = export_json if fmt == "json" else export_csv
    try:
        path = writer(directory, session.regions, session.store)
    except OSError as exc:
        log.error("Export to %s failed: %s", directory, exc)
        session.state.set_error(f"Export failed: {exc}")
        return False
    session.state.set_info(f"Exported to {path}")
    return True


def toggle_help(session: AppSession) -> None:
    session.state.show_help = not session.state.show_help


def toggle_detail(session: AppSession) -> None:
    session.state.show_detail = not session.state.show_detail


def close_detail(session: AppSession) -> None:
    session.state.show_detail = False


def quit_app(app) -> None:
    app.exit()
