"""Outer SVG frame of a card: background, border, title and CSS."""

from dataclasses import dataclass
from typing import Optional

from top_languages_card.core.formatting import encode_html, format_number
from top_languages_card.styles.colors import CardColors, get_card_colors

PADDING_X = 25
PADDING_Y = 35
TITLE_HEIGHT = 30

FADE_IN_KEYFRAMES = """
    @keyframes fadeInAnimation {
      from {
        opacity: 0;
      }
      to {
        opacity: 1;
      }
    }
"""

NO_ANIMATIONS_CSS = "* { animation-duration: 0s !important; animation-delay: 0s !important; }"


@dataclass
class Card:
    """Card frame that wraps a rendered body into a standalone SVG document.

    Parameters
    ----------
    width : int
        Canvas width.
    height : int
        Canvas height including the title area.
    title : str
        Title text; escaped on render.
    colors : CardColors, optional
        Resolved colors; the default theme when omitted.
    css : str
        Extra CSS injected after the header rules.
    description : str
        Accessible description; defaults to the title.
    """

    width: int
    height: int
    title: str = ""
    colors: Optional[CardColors] = None
    border_radius: float = 4.5
    css: str = ""
    hide_border: bool = False
    hide_title: bool = False
    animations: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = get_card_colors()

    @property
    def rendered_height(self) -> int:
        """Canvas height; hiding the title removes its band."""
        return self.height - TITLE_HEIGHT if self.hide_title else self.height

    def disable_animations(self) -> None:
        self.animations = False

    def _style(self) -> str:
        animation_css = FADE_IN_KEYFRAMES if self.animations else NO_ANIMATIONS_CSS
        return (
            "<style>\n"
            f"    .header {{ font: 600 18px 'Segoe UI', Ubuntu, Sans-Serif; "
            f"fill: {self.colors.title_color}; "
            f"animation: fadeInAnimation 0.8s ease-in-out forwards; }}\n"
            "    @supports(-moz-appearance: auto) { .header { font-size: 15.5px; } }\n"
            f"{self.css}\n"
            f"{animation_css}\n"
            "</style>"
        )

    def _gradient(self) -> str:
        bg = self.colors.bg_color
        if not isinstance(bg, list):
            return ""
        angle, stops = bg[0], bg[1:]
        step = 100 / (len(stops) - 1)
        stop_tags = "".join(
            f'<stop offset="{format_number(i * step)}%" stop-color="#{color}" />'
            for i, color in enumerate(stops)
        )
        return (
            f'<defs><linearGradient id="gradient" gradientTransform="rotate({angle})" '
            f'gradientUnits="userSpaceOnUse">{stop_tags}</linearGradient></defs>'
        )

    def _title(self) -> str:
        if self.hide_title:
            return ""
        return (
            f'<g data-testid="card-title" transform="translate({PADDING_X}, {PADDING_Y})">'
            f'<text x="0" y="0" class="header" data-testid="header">'
            f"{encode_html(self.title)}</text></g>"
        )

    def render(self, body: str) -> str:
        """Return the full SVG document with ``body`` placed under the title."""
        width, height = self.width, self.rendered_height
        bg = self.colors.bg_color
        fill = "url(#gradient)" if isinstance(bg, list) else bg
        body_y = PADDING_X if self.hide_title else PADDING_Y + 20
        title = encode_html(self.title)

        return "\n".join(
            [
                f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
                f'fill="none" xmlns="http://www.w3.org/2000/svg" role="img" '
                f'aria-labelledby="descId">',
                f'<title id="titleId">{title}</title>',
                f'<desc id="descId">{encode_html(self.description or self.title)}</desc>',
                self._style(),
                self._gradient(),
                f'<rect data-testid="card-bg" x="0.5" y="0.5" '
                f'rx="{format_number(self.border_radius)}" height="99%" '
                f'stroke="{self.colors.border_color}" width="{width - 1}" fill="{fill}" '
                f'stroke-opacity="{0 if self.hide_border else 1}" />',
                self._title(),
                f'<g data-testid="main-card-body" transform="translate(0, {body_y})">{body}</g>',
                "</svg>",
            ]
        )
