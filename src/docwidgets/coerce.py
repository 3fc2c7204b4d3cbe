"""Loose prop value coercion."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set

FALSE_STRINGS = frozenset({"false", "0", "no", "off", "n", ""})
TRUE_STRINGS = frozenset({"true", "1", "yes", "on", "y"})


def as_bool(value: object, default: bool) -> bool:
    """Decode a boolean-ish prop value, falling back to DEFAULT when undecidable."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in FALSE_STRINGS:
            return False
        if text in TRUE_STRINGS:
            return True
        return True
    return default


def sequence_items(value: object) -> tuple[object, ...] | None:
    """Return the elements of a list-like prop in a stable order, or None for scalars.

    Sets have no order of their own, so their elements are sorted by text.
    """
    if isinstance(value, (str, bytes, Mapping)):
        return None
    if isinstance(value, Set):
        return tuple(sorted(value, key=str))
    if isinstance(value, Sequence):
        return tuple(value)
    return None


def clean_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: object) -> str | None:
    text = clean_text(value)
    return text or None
