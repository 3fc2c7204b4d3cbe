"""Rich renderables for resolved widgets."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from ..shortcut import ShortcutModel
from ..trail import TrailModel

ICON_GLYPH = "☰"
SEPARATOR_STYLE = "dim"
KEY_STYLE = "bold reverse"
EMPHASIS_STYLES = {"bold": "bold", "pill": "reverse", "none": ""}


def menu_trail_text(model: TrailModel | None) -> Text:
    """Render a trail as a single line of styled text."""
    text = Text()
    if model is None:
        return text

    separator = f" {model.joiner} "
    if model.has_icon:
        text.append(ICON_GLYPH, style="bold")
        if model.segments:
            text.append(separator, style=SEPARATOR_STYLE)

    for index, label in enumerate(model.segments):
        if index == model.last_index:
            text.append(label, style=EMPHASIS_STYLES[model.emphasis])
            continue
        text.append(label)
        text.append(separator, style=SEPARATOR_STYLE)
    return text


def shortcut_text(model: ShortcutModel | None) -> Text:
    """Render shortcut keys, joining keys and steps with the model joiners."""
    text = Text()
    if model is None:
        return text

    for step_index, keys in enumerate(model.display_steps):
        if step_index:
            text.append(model.step_joiner, style=SEPARATOR_STYLE)
        for key_index, label in enumerate(keys):
            if key_index:
                text.append(model.joiner, style=SEPARATOR_STYLE)
            text.append(f" {label} ", style=KEY_STYLE)
    return text


def _wrap(body: Text, *, mode: str, title: str | None) -> RenderableType:
    if mode == "inline":
        return body
    return Panel(body, title=title, title_align="left", padding=(0, 1))


def render_menu_trail(model: TrailModel | None) -> RenderableType:
    body = menu_trail_text(model)
    if model is None:
        return body
    return _wrap(body, mode=model.mode, title=model.title if model.has_title else None)


def render_shortcut(model: ShortcutModel | None) -> RenderableType:
    body = shortcut_text(model)
    if model is None:
        return body
    return _wrap(body, mode=model.mode, title=model.title if model.has_title else None)
