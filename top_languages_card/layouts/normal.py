"""Normal layout: one labelled progress bar per language."""

from typing import Sequence

from top_languages_card.core.constants import LAYOUT_SETTINGS, stagger_delay
from top_languages_card.core.formatting import (
    ByteFormatter,
    display_value,
    encode_html,
    format_bytes,
)
from top_languages_card.core.language import LanguageUsage, percentage
from top_languages_card.core.options import Layout, StatsFormat
from top_languages_card.layouts.common import create_progress_node, flex_layout

PADDING_RIGHT = 95
ITEM_GAP = 40


def calculate_normal_layout_height(total_langs: int) -> int:
    return 45 + (total_langs + 1) * 40


def _create_progress_text_node(
    lang: LanguageUsage,
    width: int,
    total_size: int,
    stats_format: StatsFormat,
    index: int,
    byte_formatter: ByteFormatter,
) -> str:
    settings = LAYOUT_SETTINGS[Layout.NORMAL]
    delay = stagger_delay(index, settings.stagger_offset, settings.stagger_step)
    progress_width = width - PADDING_RIGHT
    progress_text_x = progress_width + 10

    progress = percentage(lang.size, total_size)
    value = display_value(lang.size, progress, stats_format, byte_formatter)

    return "\n".join(
        [
            f'<g class="stagger" style="animation-delay: {delay}ms">',
            f'<text data-testid="lang-name" x="2" y="15" class="lang-name">'
            f"{encode_html(lang.name)}</text>",
            f'<text x="{progress_text_x}" y="34" class="lang-name">{encode_html(value)}</text>',
            create_progress_node(
                x=0,
                y=25,
                width=progress_width,
                color=lang.resolved_color,
                progress=progress,
                delay=delay + 300,
            ),
            "</g>",
        ]
    )


def render_normal_layout(
    langs: Sequence[LanguageUsage],
    width: int,
    total_size: int,
    stats_format: StatsFormat = StatsFormat.PERCENTAGES,
    hide_progress: bool = False,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    """Vertical stack of progress bars, ``ITEM_GAP`` apart."""
    items = [
        _create_progress_text_node(lang, width, total_size, stats_format, index, byte_formatter)
        for index, lang in enumerate(langs)
    ]
    return "".join(flex_layout(items, gap=ITEM_GAP, direction="column"))
