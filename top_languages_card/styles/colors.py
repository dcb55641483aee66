"""Card themes and color resolution."""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

THEMES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "default": {
            "title_color": "2f80ed",
            "icon_color": "4c71f2",
            "text_color": "434d58",
            "bg_color": "fffefe",
            "border_color": "e4e2e2",
        },
        "dark": {
            "title_color": "fff",
            "icon_color": "79ff97",
            "text_color": "9f9f9f",
            "bg_color": "151515",
        },
        "radical": {
            "title_color": "fe428e",
            "icon_color": "f8d847",
            "text_color": "a9fef7",
            "bg_color": "141321",
        },
        "merko": {
            "title_color": "abd200",
            "icon_color": "b7d364",
            "text_color": "68b587",
            "bg_color": "0a0f0b",
        },
        "gruvbox": {
            "title_color": "fabd2f",
            "icon_color": "fe8019",
            "text_color": "8ec07c",
            "bg_color": "282828",
        },
        "gruvbox_light": {
            "title_color": "b57614",
            "icon_color": "af3a03",
            "text_color": "427b58",
            "bg_color": "fbf1c7",
        },
        "tokyonight": {
            "title_color": "70a5fd",
            "icon_color": "bf91f3",
            "text_color": "38bdae",
            "bg_color": "1a1b27",
        },
        "onedark": {
            "title_color": "e4bf7a",
            "icon_color": "8eb573",
            "text_color": "df6d74",
            "bg_color": "282c34",
        },
        "cobalt": {
            "title_color": "e683d9",
            "icon_color": "0480ef",
            "text_color": "75eeb2",
            "bg_color": "193549",
        },
        "synthwave": {
            "title_color": "e2e9ec",
            "icon_color": "ef8539",
            "text_color": "e5289e",
            "bg_color": "2b213a",
        },
        "highcontrast": {
            "title_color": "e7f216",
            "icon_color": "00ffff",
            "text_color": "fff",
            "bg_color": "000",
        },
        "dracula": {
            "title_color": "ff6e96",
            "icon_color": "79dafa",
            "text_color": "f8f8f2",
            "bg_color": "282a36",
        },
    }
)

FALLBACK_BORDER_COLOR = "e4e2e2"
FALLBACK_RING_COLOR = "2f80ed"

_HEX_COLOR = re.compile(r"^([A-Fa-f0-9]{8}|[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3}|[A-Fa-f0-9]{4})$")

Color = Union[str, List[str]]


@dataclass(frozen=True)
class CardColors:
    """Resolved card colors. ``bg_color`` may be a gradient list."""

    title_color: str
    icon_color: str
    text_color: str
    bg_color: Color
    border_color: str
    ring_color: str


def is_valid_hex_color(value: Optional[str]) -> bool:
    return value is not None and bool(_HEX_COLOR.match(value))


def _is_valid_gradient(colors: List[str]) -> bool:
    return len(colors) > 2 and all(is_valid_hex_color(c) for c in colors[1:])


def fallback_color(value: Optional[str], fallback: Color) -> Color:
    """Use ``value`` if it is a hex color (without ``#``) or a gradient.

    A gradient is ``"angle,hex1,hex2[,...]"`` and is returned as a list.
    """
    if value:
        value = value.lstrip("#")
        parts = value.split(",")
        if len(parts) > 1 and _is_valid_gradient(parts):
            return parts
        if is_valid_hex_color(value):
            return f"#{value}"
    return fallback


def get_card_colors(
    theme: Optional[str] = "default",
    title_color: Optional[str] = None,
    text_color: Optional[str] = None,
    icon_color: Optional[str] = None,
    bg_color: Optional[str] = None,
    border_color: Optional[str] = None,
    ring_color: Optional[str] = None,
) -> CardColors:
    """Resolve card colors from a theme plus explicit overrides."""
    default_theme = THEMES["default"]
    if theme and theme not in THEMES:
        logger.debug("Unknown theme %r, using default", theme)
    selected = THEMES.get(theme or "default", default_theme)

    def pick(override: Optional[str], key: str, fallback: str) -> Color:
        return fallback_color(override, f"#{selected.get(key, fallback)}")

    border_fallback = selected.get(
        "border_color", default_theme.get("border_color", FALLBACK_BORDER_COLOR)
    )
    title = pick(title_color, "title_color", default_theme["title_color"])
    return CardColors(
        title_color=_first(title),
        icon_color=_first(pick(icon_color, "icon_color", default_theme["icon_color"])),
        text_color=_first(pick(text_color, "text_color", default_theme["text_color"])),
        bg_color=pick(bg_color, "bg_color", default_theme["bg_color"]),
        border_color=_first(fallback_color(border_color, f"#{border_fallback}")),
        ring_color=_first(
            fallback_color(ring_color, f"#{selected.get('ring_color', FALLBACK_RING_COLOR)}")
        ),
    )


def _first(color: Color) -> str:
    # Only the background may be a gradient.
    if isinstance(color, list):
        return f"#{color[1]}"
    return color
