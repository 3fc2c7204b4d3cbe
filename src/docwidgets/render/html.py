"""HTML markup for resolved widgets (utility-class code-block look)."""

from __future__ import annotations

from html import escape

from ..shortcut import ShortcutModel
from ..trail import TrailModel

BLOCK_WITH_TITLE = (
    "code-block mt-5 mb-8 not-prose rounded-2xl relative group text-gray-950 bg-gray-50 "
    "dark:bg-white/5 dark:text-gray-50 codeblock-light border border-gray-950/10 "
    "dark:border-white/10 p-0.5"
)
BLOCK_WITHOUT_TITLE = (
    "code-block mt-5 mb-8 not-prose rounded-2xl relative group text-gray-950 "
    "dark:text-gray-50 codeblock-light border border-gray-950/10 dark:border-white/10 "
    "bg-transparent dark:bg-transparent"
)
BLOCK_HEADER = "flex text-gray-400 text-xs rounded-t-[14px] leading-6 font-medium pl-4 pr-2.5 py-1"
BLOCK_HEADER_TITLE = "flex-none flex items-center gap-1.5 text-gray-700 dark:text-gray-300"
BLOCK_BODY_TAIL = (
    " children:!my-0 children:!shadow-none children:!bg-transparent "
    "transition-[height] duration-300 ease-in-out"
)
HEADER_ICON = "h-3.5 w-3.5 text-gray-500 dark:text-gray-400"

LAST_BOLD = "font-semibold text-gray-950 dark:text-gray-50"
LAST_PILL_INLINE = (
    "font-medium text-gray-950 dark:text-gray-50 bg-gray-950/5 dark:bg-white/10 "
    "rounded px-1.5 py-0.5"
)
LAST_PILL_BLOCK = (
    "font-medium text-gray-950 dark:text-gray-50 bg-gray-950/5 dark:bg-white/10 "
    "rounded-md px-2 py-1"
)
TRAIL_INLINE = (
    "inline-flex items-center gap-1 align-middle font-mono rounded-md border "
    "border-gray-950/10 dark:border-white/10 bg-white/60 dark:bg-white/10"
)
KBD = (
    "rounded-md border border-gray-950/10 dark:border-white/10 "
    "bg-white dark:bg-white/10 shadow-[inset_0_-1px_0_rgba(0,0,0,0.05)] "
    "text-gray-700 dark:text-gray-200"
)

MENU_HEADER_SVG = (
    f'<svg class="{HEADER_ICON}" viewBox="0 0 24 24" aria-hidden="true">'
    '<rect x="3" y="6" width="18" height="2" rx="1" />'
    '<rect x="3" y="11" width="14" height="2" rx="1" />'
    '<rect x="3" y="16" width="10" height="2" rx="1" />'
    "</svg>"
)
KEYBOARD_HEADER_SVG = (
    f'<svg class="{HEADER_ICON}" viewBox="0 0 24 24" aria-hidden="true">'
    '<rect x="3" y="7" width="18" height="10" rx="2" />'
    + "".join(f'<rect x="{x}" y="9" width="2" height="2" rx="0.5" />' for x in (5, 8, 11, 14, 17))
    + "</svg>"
)


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _block(
    body: str,
    *,
    title: str | None,
    header_svg: str,
    pad: str,
    extra: str = "",
    style: str = "",
    part_attrs: bool = False,
) -> str:
    def part(name: str) -> str:
        return f' data-component-part="{name}"' if part_attrs else ""

    if title is not None:
        outer = BLOCK_WITH_TITLE
        rounding = "rounded-[14px]"
        header = (
            f'<div class="{BLOCK_HEADER}"{part("code-block-header")}>'
            f'<div class="{BLOCK_HEADER_TITLE}"{part("code-block-header-filename")}>'
            f"{header_svg}{escape(title)}</div></div>"
        )
    else:
        outer = BLOCK_WITHOUT_TITLE
        rounding = "rounded-2xl"
        header = ""

    inner = (
        f"w-0 min-w-full max-w-full {pad} h-full relative {extra}leading-6 {rounding} "
        "bg-white dark:bg-codeblock overflow-x-auto"
    )
    style_attr = f' style="{style}"' if style else ""
    return (
        f'<div class="{outer}">{header}'
        f'<div class="{inner}{BLOCK_BODY_TAIL}"{style_attr}{part("code-block-root")}>'
        f"{body}</div></div>"
    )


def _icon_html(model: TrailModel) -> str:
    icon = model.icon
    if icon is None:
        return ""
    url = _attr(icon.url)
    px = model.tokens.icon_px
    style = (
        f"background-color: currentColor; mask-image: url(&quot;{url}&quot;); "
        f"-webkit-mask-image: url(&quot;{url}&quot;); mask-repeat: no-repeat; "
        "-webkit-mask-repeat: no-repeat; mask-position: center; "
        f"-webkit-mask-position: center; width: {px}px; height: {px}px; "
        "display: inline-block; vertical-align: middle"
    )
    label = f'<span class="sr-only">{escape(model.icon_label)}</span>' if model.icon_label else ""
    return (
        f'<span class="inline-flex items-center {model.tokens.icon_gap}">'
        '<span class="inline-flex items-center">'
        f'<svg class="icon inline align-middle" style="{style}" aria-hidden="true"></svg>'
        f"{label}</span></span>"
    )


def _emphasis_class(model: TrailModel) -> str:
    if model.emphasis == "bold":
        return LAST_BOLD
    if model.emphasis == "pill":
        return LAST_PILL_INLINE if model.mode == "inline" else LAST_PILL_BLOCK
    return ""


def _trail_html(model: TrailModel) -> str:
    tokens = model.tokens
    separator = (
        f'<span class="{tokens.sep} opacity-60 select-none" aria-hidden="true">'
        f"{escape(model.joiner)}</span>"
    )
    parts: list[str] = []

    if model.has_icon:
        parts.append(_icon_html(model))
        if model.segments:
            parts.append(separator)

    for index, label in enumerate(model.segments):
        is_last = index == model.last_index
        css = _emphasis_class(model) if is_last else ""
        current = ' aria-current="page"' if is_last and model.emphasis != "none" else ""
        tail = "" if is_last else separator
        parts.append(
            '<span class="inline-flex items-center">'
            f'<span class="{css}"{current}>{escape(label)}</span>{tail}</span>'
        )

    return f'<span class="inline-flex items-center {tokens.text}">{"".join(parts)}</span>'


def render_menu_trail_html(model: TrailModel | None) -> str:
    """Render a MenuTrail model as HTML; None renders nothing."""
    if model is None:
        return ""

    trail = _trail_html(model)
    if model.mode == "inline":
        return (
            f'<span class="{TRAIL_INLINE} {model.tokens.pad_inline}" '
            'style="-webkit-font-smoothing: antialiased">'
            f"{trail}</span>"
        )

    return _block(
        trail,
        title=model.title if model.has_title else None,
        header_svg=MENU_HEADER_SVG,
        pad=model.tokens.pad_block,
        extra="font-mono ",
        style="font-variant-ligatures: none",
        part_attrs=True,
    )


def _keys_html(model: ShortcutModel) -> str:
    tokens = model.tokens
    kbd_class = f"inline-flex items-center justify-center font-mono select-none {tokens.kbd} {KBD}"
    rendered = model.display_steps
    items: list[str] = []

    for step_index, keys in enumerate(rendered):
        key_parts: list[str] = []
        for key_index, label in enumerate(keys):
            plus = (
                f'<span class="{tokens.plus} opacity-60" aria-hidden="true">+</span>'
                if key_index < len(keys) - 1
                else ""
            )
            key_parts.append(
                '<span class="inline-flex items-center">'
                f'<kbd class="{kbd_class}" style="line-height: 1" aria-label="Key {_attr(label)}">'
                f"{escape(label)}</kbd>{plus}</span>"
            )
        then = (
            f'<span class="{tokens.then} text-gray-500 dark:text-gray-400">then</span>'
            if step_index < len(rendered) - 1
            else ""
        )
        items.append(
            f'<span class="inline-flex items-center" role="listitem">{"".join(key_parts)}{then}</span>'
        )

    return f'<span class="inline-flex items-center gap-1" role="list">{"".join(items)}</span>'


def render_shortcut_html(model: ShortcutModel | None) -> str:
    """Render a Shortcut model as HTML; None renders nothing."""
    if model is None:
        return ""

    keys = _keys_html(model)
    if model.mode == "inline":
        return f'<span class="inline-flex items-center gap-1 align-middle">{keys}</span>'

    return _block(
        keys,
        title=model.title if model.has_title else None,
        header_svg=KEYBOARD_HEADER_SVG,
        pad="py-3.5 px-4",
        extra="text-sm ",
    )
