"""Donut layout: legend column beside a ring of arc segments."""

from typing import Sequence

from top_languages_card.core.constants import (
    DONUT_SEGMENT_EXTRA_DELAY,
    DONUT_SEGMENT_STAGGER_STEP,
    LAYOUT_SETTINGS,
    stagger_delay,
)
from top_languages_card.core.formatting import (
    ByteFormatter,
    format_bytes,
    format_number,
    round_half_up,
)
from top_languages_card.core.geometry import donut_arc_path, donut_segments
from top_languages_card.core.language import LanguageUsage, percentage
from top_languages_card.core.options import Layout, StatsFormat
from top_languages_card.layouts.common import flex_layout
from top_languages_card.layouts.compact import create_compact_lang_node

STROKE_WIDTH = 12
LEGEND_GAP = 32
LEGEND_WIDTH = 125


def calculate_donut_layout_height(total_langs: int) -> int:
    return 215 + max(total_langs - 5, 0) * 32


def donut_center_translation(total_langs: int) -> int:
    """Vertical shift keeping the ring centred as the legend grows."""
    return -45 + max(total_langs - 5, 0) * 16


def _create_donut_paths(
    langs: Sequence[LanguageUsage], cx: float, cy: float, radius: float, total_size: int
) -> str:
    if len(langs) == 1:
        return (
            f'<circle cx="{format_number(cx)}" cy="{format_number(cy)}" '
            f'r="{format_number(radius)}" stroke="{langs[0].resolved_color}" fill="none" '
            f'stroke-width="{STROKE_WIDTH}" data-testid="lang-donut" size="100"/>'
        )

    offset = LAYOUT_SETTINGS[Layout.DONUT].stagger_offset
    percents = [round_half_up(percentage(lang.size, total_size), 2) for lang in langs]
    paths = []
    for index, (lang, segment) in enumerate(zip(langs, donut_segments(percents))):
        delay = (
            stagger_delay(index, offset, DONUT_SEGMENT_STAGGER_STEP) + DONUT_SEGMENT_EXTRA_DELAY
        )
        d = donut_arc_path(cx, cy, radius, segment.start_angle, segment.end_angle)
        paths.append(
            f'<g class="stagger" style="animation-delay: {delay}ms">'
            f'<path data-testid="lang-donut" size="{format_number(segment.percent)}" d="{d}" '
            f'stroke="{lang.resolved_color}" fill="none" stroke-width="{STROKE_WIDTH}"></path>'
            f"</g>"
        )
    return "\n".join(paths)


def render_donut_layout(
    langs: Sequence[LanguageUsage],
    width: int,
    total_size: int,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    hide_progress: bool = False,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    center = width / 3
    radius = center - 60

    legend = flex_layout(
        [
            create_compact_lang_node(
                lang, total_size, index, stats_format=stats_format, byte_formatter=byte_formatter
            )
            for index, lang in enumerate(langs)
        ],
        gap=LEGEND_GAP,
        direction="column",
    )
    donut = (
        f'<svg width="{width}" height="{width}">'
        f"{_create_donut_paths(langs, center, center, radius, total_size)}</svg>"
    )

    return "\n".join(
        [
            '<g transform="translate(0, 0)">',
            f'<g transform="translate(0, 0)">{"".join(legend)}</g>',
            f'<g transform="translate({LEGEND_WIDTH}, {donut_center_translation(len(langs))})">'
            f"{donut}</g>",
            "</g>",
        ]
    )
