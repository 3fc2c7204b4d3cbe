"""Terminal UI layer for docwidgets."""

from .console import menu_trail_text, render_menu_trail, render_shortcut, shortcut_text
from .widgets import MenuTrailView, ShortcutView

__all__ = [
    "MenuTrailView",
    "ShortcutView",
    "menu_trail_text",
    "render_menu_trail",
    "render_shortcut",
    "shortcut_text",
]
