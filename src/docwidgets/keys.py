"""Key combo parsing helpers for the Shortcut widget."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from .coerce import sequence_items

KeyToken = str
Step = tuple[KeyToken, ...]
Combo = tuple[Step, ...]
ComboInput = str | Sequence[object] | None

KEY_ALIASES: Mapping[str, KeyToken] = MappingProxyType(
    {
        "cmd": "Command",
        "command": "Command",
        "⌘": "Command",
        "meta": "Meta",
        "win": "Win",
        "windows": "Win",
        "super": "Win",
        "ctrl": "Control",
        "control": "Control",
        "⌃": "Control",
        "alt": "Alt",
        "option": "Option",
        "⌥": "Option",
        "shift": "Shift",
        "⇧": "Shift",
        "enter": "Enter",
        "return": "Return",
        "↩": "Return",
        "esc": "Esc",
        "escape": "Esc",
        "⎋": "Esc",
        "tab": "Tab",
        "⇥": "Tab",
        "backspace": "Backspace",
        "⌫": "Backspace",
        "delete": "Delete",
        "del": "Delete",
        "⌦": "Delete",
        "space": "Space",
        "spacebar": "Space",
        "up": "Up",
        "↑": "Up",
        "down": "Down",
        "↓": "Down",
        "left": "Left",
        "←": "Left",
        "right": "Right",
        "→": "Right",
        "pgup": "Page Up",
        "page up": "Page Up",
        "pageup": "Page Up",
        "pgdn": "Page Down",
        "page down": "Page Down",
        "pagedown": "Page Down",
        "home": "Home",
        "end": "End",
    }
)

_STEP_SPLIT = re.compile(r"\s*,\s*")
_KEY_SPLIT = re.compile(r"\s*\+\s*")
_FUNCTION_KEY = re.compile(r"F\d{1,2}")
_WHITESPACE = re.compile(r"\s+")
_FIRST_WORD_CHAR = re.compile(r"^\w")


def normalize_key(raw: object) -> KeyToken:
    """Map a raw key token onto its canonical name. Never fails."""
    text = str(raw or "").strip().lower()

    alias = KEY_ALIASES.get(text)
    if alias is not None:
        return alias

    upper = text.upper()
    if _FUNCTION_KEY.fullmatch(upper):
        return upper

    if len(text) == 1:
        return upper

    collapsed = _WHITESPACE.sub(" ", text)
    return _FIRST_WORD_CHAR.sub(lambda match: match.group().upper(), collapsed)


def parse_step(step: object) -> Step:
    """Split one chord on '+' into canonical keys, dropping empty keys."""
    raw_keys = _KEY_SPLIT.split(str(step).strip())
    return tuple(normalize_key(key) for key in raw_keys if key.strip())


def parse_combo(combo: ComboInput) -> Combo:
    """Parse a combo string or a sequence of step strings into canonical steps."""
    raw_steps: Iterable[object]
    if combo is None:
        return ()
    items = sequence_items(combo)
    if isinstance(combo, str):
        raw_steps = _STEP_SPLIT.split(combo)
    elif items is not None:
        raw_steps = items
    else:
        raw_steps = _STEP_SPLIT.split(str(combo))

    steps: list[Step] = []
    for raw_step in raw_steps:
        if raw_step is None:
            continue
        step = parse_step(raw_step)
        if step:
            steps.append(step)
    return tuple(steps)
