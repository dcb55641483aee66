"""Pie layout: filled wedges above a two-column legend."""

from typing import Sequence

from top_languages_card.core.constants import CARD_PADDING, LAYOUT_SETTINGS, stagger_delay
from top_languages_card.core.formatting import ByteFormatter, format_bytes, format_number
from top_languages_card.core.geometry import pie_wedge_path
from top_languages_card.core.language import LanguageUsage, percentage
from top_languages_card.core.options import Layout, StatsFormat
from top_languages_card.layouts.compact import create_language_text_node

RADIUS = 90
CENTER_X = 150
CENTER_Y = 100
LEGEND_OFFSET_Y = 220


def calculate_pie_layout_height(total_langs: int) -> int:
    return 300 + round(total_langs / 2) * 25


def _create_pie_paths(langs: Sequence[LanguageUsage], total_size: int) -> str:
    if len(langs) == 1:
        return (
            f'<circle cx="{CENTER_X}" cy="{CENTER_Y}" r="{RADIUS}" stroke="none" '
            f'fill="{langs[0].resolved_color}" data-testid="lang-pie" size="100" />'
        )

    settings = LAYOUT_SETTINGS[Layout.PIE]
    paths = []
    start_angle = 0.0
    for index, lang in enumerate(langs):
        share = percentage(lang.size, total_size)
        end_angle = start_angle + share * 3.6
        delay = stagger_delay(index, settings.stagger_offset, settings.stagger_step)
        d = pie_wedge_path(CENTER_X, CENTER_Y, RADIUS, start_angle, end_angle)
        paths.append(
            f'<g class="stagger" style="animation-delay: {delay}ms">'
            f'<path data-testid="lang-pie" size="{format_number(share)}" d="{d}" '
            f'fill="{lang.resolved_color}" /></g>'
        )
        start_angle = end_angle
    return "\n".join(paths)


def render_pie_layout(
    langs: Sequence[LanguageUsage],
    width: int,
    total_size: int,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    hide_progress: bool = False,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    legend = create_language_text_node(
        langs, total_size, stats_format=stats_format, byte_formatter=byte_formatter
    )
    return "\n".join(
        [
            '<svg data-testid="lang-items">',
            '<g transform="translate(0, 0)">',
            f'<svg data-testid="pie">{_create_pie_paths(langs, total_size)}</svg>',
            "</g>",
            f'<g transform="translate(0, {LEGEND_OFFSET_Y})">',
            f'<svg data-testid="lang-names" x="{CARD_PADDING}">{legend}</svg>',
            "</g>",
            "</svg>",
        ]
    )
