"""MenuTrail normalization: segments, icon and style cascade."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .coerce import clean_text, optional_text, sequence_items
from .config import DEFAULT_ICON_LABEL, DEFAULT_TRAIL_JOINER
from .icons import IconSpec, resolve_icon
from .styles import (
    TRAIL_EMPHASIS,
    TRAIL_SIZE,
    TRAIL_TOKENS,
    Emphasis,
    Mode,
    Size,
    TrailTokens,
    resolve_mode,
)

logger = logging.getLogger(__name__)

SegmentsInput = str | Sequence[object] | None

_PROP_NAMES = {
    "segments": "segments",
    "joiner": "joiner",
    "size": "size",
    "mode": "mode",
    "title": "title",
    "icon": "icon",
    "iconStyle": "icon_style",
    "icon_style": "icon_style",
    "iconLabel": "icon_label",
    "icon_label": "icon_label",
    "emphasise": "emphasise",
}


@dataclass(frozen=True)
class TrailModel:
    """Resolved MenuTrail ready for rendering."""

    segments: tuple[str, ...]
    joiner: str
    mode: Mode
    size: Size
    emphasis: Emphasis
    icon: IconSpec | None = None
    icon_label: str = DEFAULT_ICON_LABEL
    title: str | None = None

    @property
    def has_icon(self) -> bool:
        return self.icon is not None

    @property
    def has_title(self) -> bool:
        return self.mode == "block" and self.title is not None

    @property
    def last_index(self) -> int:
        return len(self.segments) - 1

    @property
    def tokens(self) -> TrailTokens:
        return TRAIL_TOKENS[self.size]


def normalize_segments(segments: SegmentsInput) -> tuple[str, ...]:
    """Turn a comma-separated string or a sequence into trimmed, non-empty labels."""
    parts: Iterable[object]
    if segments is None:
        return ()
    items = sequence_items(segments)
    if isinstance(segments, str):
        parts = segments.split(",")
    elif items is not None:
        parts = items
    else:
        parts = str(segments).split(",")

    labels = (clean_text(part) for part in parts)
    return tuple(label for label in labels if label)


def build_menu_trail(
    segments: SegmentsInput = None,
    *,
    joiner: object = None,
    size: object = None,
    mode: object = None,
    title: object = None,
    icon: object = None,
    icon_style: object = None,
    icon_label: object = DEFAULT_ICON_LABEL,
    emphasise: object = None,
) -> TrailModel | None:
    """Resolve MenuTrail props. Returns None when there is nothing to show."""
    resolved_mode = resolve_mode(mode)
    labels = normalize_segments(segments)
    icon_spec = resolve_icon(icon, icon_style, resolved_mode)

    if not labels and icon_spec is None:
        return None

    return TrailModel(
        segments=labels,
        joiner=DEFAULT_TRAIL_JOINER if joiner is None else str(joiner),
        mode=resolved_mode,
        size=TRAIL_SIZE.resolve(size, resolved_mode),
        emphasis=TRAIL_EMPHASIS.resolve(emphasise, resolved_mode),
        icon=icon_spec,
        icon_label=_icon_label(icon_label),
        title=optional_text(title),
    )


def _icon_label(value: object) -> str:
    if value is None:
        return DEFAULT_ICON_LABEL
    if not value:
        return ""
    return str(value)


def menu_trail_from_props(props: Mapping[str, object]) -> TrailModel | None:
    """Build a MenuTrail from documentation-style (camelCase) props."""
    kwargs: dict[str, object] = {}
    for key, value in props.items():
        name = _PROP_NAMES.get(key)
        if name is None:
            logger.debug("ignoring unknown MenuTrail prop %r", key)
            continue
        kwargs[name] = value
    return build_menu_trail(**kwargs)  # type: ignore[arg-type]
