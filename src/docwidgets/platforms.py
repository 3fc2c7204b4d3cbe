"""Platform detection and per-platform key display."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Literal

from .keys import KeyToken

Platform = Literal["mac", "win", "linux"]
DisplayMode = Literal["auto", "symbols", "names"]
PlatformHintProvider = Callable[[], str | None]

logger = logging.getLogger(__name__)

FALLBACK_PLATFORM: Platform = "win"

PLATFORM_ALIASES: Mapping[str, Platform] = MappingProxyType(
    {
        "mac": "mac",
        "macos": "mac",
        "osx": "mac",
        "darwin": "mac",
        "win": "win",
        "windows": "win",
        "linux": "linux",
    }
)

MAC_SYMBOLS: Mapping[KeyToken, str] = MappingProxyType(
    {
        "Command": "⌘",
        "Option": "⌥",
        "Control": "⌃",
        "Shift": "⇧",
        "Return": "↩",
        "Esc": "⎋",
        "Tab": "⇥",
        "Backspace": "⌫",
        "Delete": "⌦",
        "Up": "↑",
        "Down": "↓",
        "Left": "←",
        "Right": "→",
        "Page Up": "⇞",
        "Page Down": "⇟",
        "Home": "↖",
        "End": "↘",
    }
)

_MAC_HINT = re.compile(r"Macintosh|Mac OS X|Mac_PowerPC", re.IGNORECASE)
_WINDOWS_HINT = re.compile(r"Windows", re.IGNORECASE)


def environ_user_agent() -> str | None:
    """Default hint provider: the CGI/WSGI user agent of the current request."""
    return os.environ.get("HTTP_USER_AGENT")


def platform_from_hint(hint: str) -> Platform:
    if _MAC_HINT.search(hint):
        return "mac"
    if _WINDOWS_HINT.search(hint):
        return "win"
    return "linux"


def detect_platform(hint_provider: PlatformHintProvider | None = None) -> Platform:
    """Detect the platform from a user-agent-like hint, defaulting to win."""
    provider = hint_provider or environ_user_agent
    try:
        hint = provider()
    except Exception:
        logger.debug("platform hint provider failed; using %s", FALLBACK_PLATFORM, exc_info=True)
        return FALLBACK_PLATFORM

    if hint is None:
        logger.debug("no platform hint available; using %s", FALLBACK_PLATFORM)
        return FALLBACK_PLATFORM
    return platform_from_hint(str(hint))


def resolve_platform(
    value: object = "auto",
    hint_provider: PlatformHintProvider | None = None,
) -> Platform:
    """Use an explicit platform when recognized, otherwise detect it."""
    if value is not None:
        platform = PLATFORM_ALIASES.get(str(value).strip().lower())
        if platform is not None:
            return platform
    return detect_platform(hint_provider)


def resolve_display(value: object) -> DisplayMode:
    text = "" if value is None else str(value).strip().lower()
    if text == "symbols":
        return "symbols"
    if text == "names":
        return "names"
    return "auto"


def _plain(token: KeyToken) -> str:
    return token.upper() if len(token) == 1 else token


def _name_for(token: KeyToken, platform: Platform) -> str:
    is_mac = platform == "mac"
    if token in ("Command", "Meta"):
        return "Cmd" if is_mac else "Win"
    if token == "Option":
        return "Option" if is_mac else "Alt"
    if token == "Control":
        return "Ctrl"
    return _plain(token)


def _symbol_for(token: KeyToken) -> str:
    symbol = MAC_SYMBOLS.get(token)
    if symbol is not None:
        return symbol
    if token in ("Meta", "Win"):
        return MAC_SYMBOLS["Command"]
    return _plain(token)


def display_token(token: KeyToken, platform: Platform, display: DisplayMode) -> str:
    """Return the label or glyph shown for TOKEN on PLATFORM in DISPLAY mode."""
    if display == "names":
        return _name_for(token, platform)
    if display == "symbols":
        return _symbol_for(token)
    if platform == "mac":
        return _symbol_for(token)
    return _name_for(token, platform)
