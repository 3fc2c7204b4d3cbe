"""Icon name and icon style resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal
from urllib.parse import quote

from .coerce import as_bool
from .config import DEFAULT_ICON_NAME, ICON_CDN_BASE
from .styles import Mode

IconStyle = Literal["regular", "solid", "light", "thin", "sharp-solid", "duotone", "brands"]

logger = logging.getLogger(__name__)

STYLE_ALIASES: Mapping[str, IconStyle] = MappingProxyType(
    {
        "regular": "regular",
        "solid": "solid",
        "light": "light",
        "thin": "thin",
        "sharp-solid": "sharp-solid",
        "sharpsolid": "sharp-solid",
        "duotone": "duotone",
        "brands": "brands",
        "brand": "brands",
        "br": "brands",
    }
)

_SEPARATORS = re.compile(r"[_\s]+")
_NON_STYLE_CHARS = re.compile(r"[^a-z-]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class IconSpec:
    """Resolved icon reference."""

    name: str
    style: IconStyle

    @property
    def slug(self) -> str:
        return _WHITESPACE.sub("-", self.name.strip().lower())

    @property
    def url(self) -> str:
        return icon_asset_url(self.style, self.slug)


def default_icon_style(mode: Mode) -> IconStyle:
    return "light" if mode == "inline" else "solid"


def normalize_icon_style(value: object, mode: Mode = "inline") -> IconStyle:
    """Map a free-form style token onto a known icon style."""
    fallback = default_icon_style(mode)
    if not value:
        return fallback

    key = _SEPARATORS.sub("-", str(value).strip().lower())
    key = _NON_STYLE_CHARS.sub("", key)
    style = STYLE_ALIASES.get(key)
    if style is None:
        logger.debug("unknown icon style %r; using %s", value, fallback)
        return fallback
    return style


def resolve_icon_name(icon: object) -> str | None:
    if isinstance(icon, str):
        return icon.strip() or None
    if icon is None:
        return DEFAULT_ICON_NAME
    if as_bool(icon, True):
        return DEFAULT_ICON_NAME
    return None


def resolve_icon(icon: object, icon_style: object = None, mode: Mode = "inline") -> IconSpec | None:
    """Resolve the icon props into an IconSpec, or None when the icon is hidden."""
    name = resolve_icon_name(icon)
    if name is None:
        return None
    return IconSpec(name=name, style=normalize_icon_style(icon_style, mode))


def icon_asset_url(style: str, name: str, *, base_url: str = ICON_CDN_BASE) -> str:
    """Build the asset URL; STYLE and NAME are percent-encoded as path segments."""
    return f"{base_url.rstrip('/')}/{quote(style, safe='-')}/{quote(name, safe='-')}.svg"
