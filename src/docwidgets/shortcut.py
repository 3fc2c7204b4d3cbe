"""Shortcut normalization: combo steps, platform and display resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .coerce import optional_text
from .config import DEFAULT_KEY_JOINER, DEFAULT_STEP_JOINER
from .keys import Combo, ComboInput, parse_combo
from .platforms import (
    DisplayMode,
    Platform,
    PlatformHintProvider,
    display_token,
    resolve_display,
    resolve_platform,
)
from .styles import SHORTCUT_SIZE, SHORTCUT_TOKENS, Mode, ShortcutTokens, Size, resolve_mode

logger = logging.getLogger(__name__)

_PROP_NAMES = {
    "combo": "combo",
    "mode": "mode",
    "title": "title",
    "platform": "platform",
    "display": "display",
    "joiner": "joiner",
    "stepJoiner": "step_joiner",
    "step_joiner": "step_joiner",
    "size": "size",
    "copy": "copy",
    "copySymbols": "copy_symbols",
    "copy_symbols": "copy_symbols",
}


@dataclass(frozen=True)
class ShortcutModel:
    """Resolved Shortcut ready for rendering."""

    steps: Combo
    platform: Platform
    display: DisplayMode
    mode: Mode
    size: Size
    joiner: str = DEFAULT_KEY_JOINER
    step_joiner: str = DEFAULT_STEP_JOINER
    title: str | None = None

    @property
    def display_steps(self) -> tuple[tuple[str, ...], ...]:
        return tuple(
            tuple(display_token(key, self.platform, self.display) for key in step)
            for step in self.steps
        )

    @property
    def has_title(self) -> bool:
        return self.mode == "block" and self.title is not None

    @property
    def tokens(self) -> ShortcutTokens:
        return SHORTCUT_TOKENS[self.size]


def build_shortcut(
    combo: ComboInput = None,
    *,
    mode: object = None,
    title: object = None,
    platform: object = "auto",
    display: object = "auto",
    joiner: object = None,
    step_joiner: object = None,
    size: object = None,
    copy: object = None,
    copy_symbols: object = None,
    hint_provider: PlatformHintProvider | None = None,
) -> ShortcutModel | None:
    """Resolve Shortcut props. Returns None when the combo has no keys."""
    if copy is not None or copy_symbols is not None:
        logger.debug("copy/copySymbols are no longer supported and are ignored")

    steps = parse_combo(combo)
    if not steps:
        return None

    resolved_mode = resolve_mode(mode)
    return ShortcutModel(
        steps=steps,
        platform=resolve_platform(platform, hint_provider),
        display=resolve_display(display),
        mode=resolved_mode,
        size=SHORTCUT_SIZE.resolve(size, resolved_mode),
        joiner=DEFAULT_KEY_JOINER if joiner is None else str(joiner),
        step_joiner=DEFAULT_STEP_JOINER if step_joiner is None else str(step_joiner),
        title=optional_text(title),
    )


def shortcut_from_props(
    props: Mapping[str, object],
    *,
    hint_provider: PlatformHintProvider | None = None,
) -> ShortcutModel | None:
    """Build a Shortcut from documentation-style (camelCase) props."""
    kwargs: dict[str, object] = {}
    for key, value in props.items():
        name = _PROP_NAMES.get(key)
        if name is None:
            logger.debug("ignoring unknown Shortcut prop %r", key)
            continue
        kwargs[name] = value
    return build_shortcut(hint_provider=hint_provider, **kwargs)  # type: ignore[arg-type]
