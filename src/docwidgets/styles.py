"""Mode, size and emphasis resolution plus per-size rendering tokens."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

Mode = Literal["inline", "block"]
Size = Literal["sm", "md", "lg"]
Emphasis = Literal["bold", "pill", "none"]

MODES: tuple[Mode, ...] = ("inline", "block")
SIZES: tuple[Size, ...] = ("sm", "md", "lg")
EMPHASES: tuple[Emphasis, ...] = ("bold", "pill", "none")


def resolve_mode(value: object) -> Mode:
    """Resolve the layout mode; anything that is not inline renders as a block."""
    if value is None:
        return "inline"
    text = str(value).strip().lower()
    if not text or text == "inline":
        return "inline"
    return "block"


@dataclass(frozen=True)
class OptionTable:
    """Enum validation with a per-mode default cascade."""

    choices: tuple[str, ...]
    defaults: Mapping[str, str]
    fallback: str

    def resolve(self, value: object, mode: Mode) -> str:
        if value is not None:
            text = str(value).strip().lower()
            if text in self.choices:
                return text
        return self.defaults.get(mode, self.fallback)


TRAIL_SIZE = OptionTable(
    choices=SIZES,
    defaults=MappingProxyType({"inline": "sm", "block": "md"}),
    fallback="md",
)
TRAIL_EMPHASIS = OptionTable(
    choices=EMPHASES,
    defaults=MappingProxyType({"inline": "bold", "block": "pill"}),
    fallback="bold",
)
SHORTCUT_SIZE = OptionTable(
    choices=SIZES,
    defaults=MappingProxyType({"inline": "md", "block": "md"}),
    fallback="md",
)


@dataclass(frozen=True)
class TrailTokens:
    """Utility classes for one trail size."""

    text: str
    sep: str
    pad_inline: str
    pad_block: str
    icon_px: int
    icon_gap: str


@dataclass(frozen=True)
class ShortcutTokens:
    """Utility classes for one shortcut size."""

    kbd: str
    plus: str
    then: str


TRAIL_TOKENS: Mapping[str, TrailTokens] = MappingProxyType(
    {
        "sm": TrailTokens(
            text="text-xs",
            sep="mx-1",
            pad_inline="px-2 py-0.5",
            pad_block="py-2.5 px-3.5",
            icon_px=14,
            icon_gap="mr-1.5",
        ),
        "md": TrailTokens(
            text="text-sm",
            sep="mx-1.5",
            pad_inline="px-2.5 py-1",
            pad_block="py-3.5 px-4",
            icon_px=16,
            icon_gap="mr-2",
        ),
        "lg": TrailTokens(
            text="text-base",
            sep="mx-2.5",
            pad_inline="px-2.5 py-1.5",
            pad_block="py-3.5 px-5",
            icon_px=18,
            icon_gap="mr-2.5",
        ),
    }
)

SHORTCUT_TOKENS: Mapping[str, ShortcutTokens] = MappingProxyType(
    {
        "sm": ShortcutTokens(
            kbd="h-6 min-w-[1.5rem] px-2 text-[11px]",
            plus="mx-1",
            then="ml-1.5 mr-1 text-[11px]",
        ),
        "md": ShortcutTokens(
            kbd="h-7 min-w-[1.7rem] px-2.5 text-xs",
            plus="mx-1.5",
            then="ml-2 mr-1 text-xs",
        ),
        "lg": ShortcutTokens(
            kbd="h-9 min-w-[2.1rem] px-3 text-sm",
            plus="mx-2.5",
            then="ml-2.5 mr-1 text-sm",
        ),
    }
)
