"""Textual widgets hosting MenuTrail and Shortcut renderables."""

from __future__ import annotations

from rich.console import RenderableType
from textual.widgets import Static

from ..shortcut import ShortcutModel
from ..trail import TrailModel
from .console import render_menu_trail, render_shortcut


class MenuTrailView(Static):
    """Static widget showing a resolved MenuTrail; hidden when there is none."""

    def __init__(self, model: TrailModel | None = None, **kwargs: object) -> None:
        renderable = render_menu_trail(model)
        super().__init__(renderable, **kwargs)  # type: ignore[arg-type]
        self.resolved_model = model
        self.resolved_renderable: RenderableType = renderable
        self.display = model is not None

    def show(self, model: TrailModel | None) -> None:
        self.resolved_model = model
        self.resolved_renderable = render_menu_trail(model)
        self.display = model is not None
        self.update(self.resolved_renderable)


class ShortcutView(Static):
    """Static widget showing a resolved Shortcut; hidden when there is none."""

    def __init__(self, model: ShortcutModel | None = None, **kwargs: object) -> None:
        renderable = render_shortcut(model)
        super().__init__(renderable, **kwargs)  # type: ignore[arg-type]
        self.resolved_model = model
        self.resolved_renderable: RenderableType = renderable
        self.display = model is not None

    def show(self, model: ShortcutModel | None) -> None:
        self.resolved_model = model
        self.resolved_renderable = render_shortcut(model)
        self.display = model is not None
        self.update(self.resolved_renderable)
