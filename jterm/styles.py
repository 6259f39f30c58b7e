#!/usr/bin/env python3
# jterm/styles.py
"""
Style definitions for JTerm.
Flexoki light and dark themes for prompt_toolkit, including the per-level
colour classes used by every view.
"""

import os
from typing import Dict

from prompt_toolkit.styles import Style
from jterm.config import Config

FLEXOKI_LIGHT: Dict[str, str] = {
    "bg": "#fcf9f3",
    "tx": "#100f0d",
    "tx2": "#57524a",
    "ui": "#d7ccb7",
    "re": "#af4b4a",
    "or": "#bc5c33",
    "ye": "#ad871d",
    "gr": "#42823e",
    "cy": "#248b8e",
    "bl": "#486ca6",
    "pu": "#8959a8",
}

FLEXOKI_DARK: Dict[str, str] = {
    "bg": "#100f0f",
    "tx": "#cecdc3",
    "tx2": "#878580",
    "ui": "#282726",
    "re": "#d14d41",
    "or": "#da702c",
    "ye": "#d0a215",
    "gr": "#879a39",
    "cy": "#3aa99f",
    "bl": "#4385be",
    "pu": "#8b7ec8",
}

# level -> palette key
LEVEL_COLORS = ("tx", "re", "ye", "gr", "pu", "bl")


def theme_rules(palette: Dict[str, str]) -> Dict[str, str]:
    rules = {
        "toolbar": f"bg:{palette['ui']} {palette['tx']}",
        "status": f"bg:{palette['ui']} {palette['tx2']}",
        "status.error": f"bg:{palette['re']} {palette['bg']} bold",
        "help": f"bg:{palette['bg']} {palette['tx']}",
        "button": f"bg:{palette['ui']} {palette['tx']}",
        "info": palette["tx"],
        "detail": f"bg:{palette['bg']} {palette['tx']}",
        "header": f"{palette['cy']} bold",
        "border": palette["tx2"],
        "legend": palette["tx2"],
        "selected": "reverse",
        "bar.low": palette["re"],
        "bar.mid": palette["ye"],
        "bar.high": palette["bl"],
        "bar.done": palette["gr"],
    }
    for level, key in enumerate(LEVEL_COLORS):
        rules[f"level-{level}"] = palette[key]
    return rules


def make_style(cfg: Config) -> Style:
    theme = cfg["ui"].get("theme", "light")

    if theme == "light":
        return Style.from_dict(theme_rules(FLEXOKI_LIGHT))
    if theme == "dark":
        return Style.from_dict(theme_rules(FLEXOKI_DARK))

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "dark":
        return Style.from_dict(theme_rules(FLEXOKI_DARK))
    return Style.from_dict(theme_rules(FLEXOKI_LIGHT))
