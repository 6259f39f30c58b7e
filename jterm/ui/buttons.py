#!/usr/bin/env python3
# jterm/ui/buttons.py
"""
Flat toolbar buttons. The label carries the keyboard shortcut so the
toolbar doubles as a key reference.
"""

from typing import Callable, Optional

from prompt_toolkit.widgets import Button


def button_label(label: str, key: Optional[str] = None) -> str:
    return f"{label} ({key})" if key else label


def make_button(label: str, handler: Callable[[], None], key: Optional[str] = None,
                style: str = "class:button") -> Button:
    text = button_label(label, key)
    # Button draws "<" and ">" around the text; size it to fit exactly
    btn = Button(text=text, handler=handler, width=len(text) + 2)
    btn.window.style = style
    return btn
