"""Compact layout: a shared stacked bar above a two-column legend."""

from typing import List, Sequence

from top_languages_card.core.constants import (
    COMPACT_LAYOUT_BASE_HEIGHT,
    LAYOUT_SETTINGS,
    stagger_delay,
)
from top_languages_card.core.formatting import (
    ByteFormatter,
    display_value,
    encode_html,
    format_bytes,
    format_number,
    measure_text,
    round_half_up,
)
from top_languages_card.core.geometry import get_longest_lang
from top_languages_card.core.language import LanguageUsage, percentage
from top_languages_card.core.options import Layout, StatsFormat
from top_languages_card.layouts.common import flex_layout, split_columns

PADDING_RIGHT = 50
MIN_SEGMENT_WIDTH = 10
ROW_GAP = 25
MIN_COLUMN_GAP = 150


def calculate_compact_layout_height(total_langs: int) -> int:
    # Python's round(): halves go to the even neighbour, so round(5 / 2) == 2.
    return COMPACT_LAYOUT_BASE_HEIGHT + round(total_langs / 2) * 25


def create_compact_lang_node(
    lang: LanguageUsage,
    total_size: int,
    index: int,
    hide_progress: bool = False,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    """Colored dot followed by the language name and its display value."""
    settings = LAYOUT_SETTINGS[Layout.COMPACT]
    delay = stagger_delay(index, settings.stagger_offset, settings.stagger_step)
    label = encode_html(lang.name)
    if not hide_progress:
        value = display_value(
            lang.size, percentage(lang.size, total_size), stats_format, byte_formatter
        )
        label = f"{label} {encode_html(value)}"

    return "\n".join(
        [
            f'<g class="stagger" style="animation-delay: {delay}ms">',
            f'<circle cx="5" cy="6" r="5" fill="{lang.resolved_color}" />',
            f'<text data-testid="lang-name" x="15" y="10" class="lang-name">{label}</text>',
            "</g>",
        ]
    )


def create_language_text_node(
    langs: Sequence[LanguageUsage],
    total_size: int,
    hide_progress: bool = False,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    """Two-column legend; the column gap fits the longest label."""
    columns = []
    for column in split_columns(langs):
        items = [
            create_compact_lang_node(
                lang, total_size, index, hide_progress, stats_format, byte_formatter
            )
            for index, lang in enumerate(column)
        ]
        columns.append("".join(flex_layout(items, gap=ROW_GAP, direction="column")))

    longest = get_longest_lang(langs)
    percent = f"{round_half_up(percentage(longest.size, total_size), 2):.2f}"
    column_gap = 20 + measure_text(f"{longest.name} {percent}%", 11)
    return "".join(flex_layout(columns, gap=max(column_gap, MIN_COLUMN_GAP)))


def _create_progress_segments(
    langs: Sequence[LanguageUsage], total_size: int, bar_width: int
) -> List[str]:
    # Thin slices are widened by MIN_SEGMENT_WIDTH while the running offset
    # keeps the true width, so segments may overlap their neighbours.
    segments = []
    offset = 0.0
    for lang in langs:
        share = round_half_up(percentage(lang.size, total_size) / 100 * bar_width, 2)
        segment_width = share + MIN_SEGMENT_WIDTH if share < MIN_SEGMENT_WIDTH else share
        segments.append(
            f'<rect mask="url(#rect-mask)" data-testid="lang-progress" '
            f'x="{format_number(offset)}" y="0" width="{format_number(segment_width)}" '
            f'height="8" fill="{lang.resolved_color}" />'
        )
        offset += share
    return segments


def render_compact_layout(
    langs: Sequence[LanguageUsage],
    width: int,
    total_size: int,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    hide_progress: bool = False,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    bar_width = width - PADDING_RIGHT
    parts = []
    if not hide_progress:
        parts.append(
            f'<mask id="rect-mask"><rect x="0" y="0" width="{bar_width}" height="8" '
            f'fill="white" rx="5"/></mask>'
        )
        parts.extend(_create_progress_segments(langs, total_size, bar_width))

    legend = create_language_text_node(
        langs, total_size, hide_progress, stats_format, byte_formatter
    )
    parts.append(f'<g transform="translate(0, {0 if hide_progress else 25})">{legend}</g>')
    return "\n".join(parts)
