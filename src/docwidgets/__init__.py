"""docwidgets package."""

__all__ = [
    "IconSpec",
    "ShortcutModel",
    "TrailModel",
    "as_bool",
    "build_menu_trail",
    "build_shortcut",
    "detect_platform",
    "display_token",
    "menu_trail_from_props",
    "normalize_icon_style",
    "normalize_key",
    "parse_combo",
    "resolve_icon",
    "shortcut_from_props",
]
__version__ = "0.1.0"

from .coerce import as_bool
from .icons import IconSpec, normalize_icon_style, resolve_icon
from .keys import normalize_key, parse_combo
from .platforms import detect_platform, display_token
from .shortcut import ShortcutModel, build_shortcut, shortcut_from_props
from .trail import TrailModel, build_menu_trail, menu_trail_from_props
