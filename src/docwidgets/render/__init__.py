"""Markup renderers for resolved widgets."""

from .html import render_menu_trail_html, render_shortcut_html

__all__ = ["render_menu_trail_html", "render_shortcut_html"]
