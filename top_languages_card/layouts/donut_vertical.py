"""Donut-vertical layout: dashed-stroke ring above a two-column legend."""

from typing import Sequence

from top_languages_card.core.constants import CARD_PADDING, LAYOUT_SETTINGS, stagger_delay
from top_languages_card.core.formatting import ByteFormatter, format_bytes, format_number
from top_languages_card.core.geometry import circle_length
from top_languages_card.core.language import LanguageUsage, percentage
from top_languages_card.core.options import Layout, StatsFormat
from top_languages_card.layouts.compact import create_language_text_node

RADIUS = 80
CENTER_X = 150
CENTER_Y = 100
STROKE_WIDTH = 25
LEGEND_OFFSET_Y = 220


def calculate_donut_vertical_layout_height(total_langs: int) -> int:
    return 300 + round(total_langs / 2) * 25


def render_donut_vertical_layout(
    langs: Sequence[LanguageUsage],
    width: int,
    total_size: int,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    hide_progress: bool = False,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    """Every language is the same circle; dash offsets place its segment.

    The dash array is the full circumference and each offset accumulates the
    dash lengths of the preceding languages.
    """
    settings = LAYOUT_SETTINGS[Layout.DONUT_VERTICAL]
    circumference = circle_length(RADIUS)

    circles = []
    indent = 0.0
    for index, lang in enumerate(langs):
        share = percentage(lang.size, total_size)
        delay = stagger_delay(index, settings.stagger_offset, settings.stagger_step)
        circles.append(
            f'<g class="stagger" style="animation-delay: {delay}ms">'
            f'<circle cx="{CENTER_X}" cy="{CENTER_Y}" r="{RADIUS}" fill="transparent" '
            f'stroke="{lang.resolved_color}" stroke-width="{STROKE_WIDTH}" '
            f'stroke-dasharray="{format_number(circumference)}" '
            f'stroke-dashoffset="{format_number(indent)}" size="{format_number(share)}" '
            f'data-testid="lang-donut" /></g>'
        )
        indent += circumference * share / 100

    legend = create_language_text_node(
        langs, total_size, stats_format=stats_format, byte_formatter=byte_formatter
    )
    return "\n".join(
        [
            '<svg data-testid="lang-items">',
            '<g transform="translate(0, 0)">',
            f'<svg data-testid="donut">{"".join(circles)}</svg>',
            "</g>",
            f'<g transform="translate(0, {LEGEND_OFFSET_Y})">',
            f'<svg data-testid="lang-names" x="{CARD_PADDING}">{legend}</svg>',
            "</g>",
            "</svg>",
        ]
    )
