"""Layout renderers keyed by layout variant.

Every renderer pairs a height formula with a markup function sharing the
signature ``render(langs, width, total_size, stats_format, hide_progress,
byte_formatter)``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from top_languages_card.core.options import Layout
from top_languages_card.layouts.compact import (
    calculate_compact_layout_height,
    render_compact_layout,
)
from top_languages_card.layouts.donut import calculate_donut_layout_height, render_donut_layout
from top_languages_card.layouts.donut_vertical import (
    calculate_donut_vertical_layout_height,
    render_donut_vertical_layout,
)
from top_languages_card.layouts.normal import calculate_normal_layout_height, render_normal_layout
from top_languages_card.layouts.pie import calculate_pie_layout_height, render_pie_layout


@dataclass(frozen=True)
class LayoutRenderer:
    """Height formula and markup function of one layout.

    ``own_canvas`` layouts emit their own nested ``<svg>`` and are not
    wrapped in the shared language-items container.
    """

    calculate_height: Callable[[int], int]
    render: Callable[..., str]
    own_canvas: bool = False


RENDERERS: Mapping[Layout, LayoutRenderer] = MappingProxyType(
    {
        Layout.NORMAL: LayoutRenderer(calculate_normal_layout_height, render_normal_layout),
        Layout.COMPACT: LayoutRenderer(calculate_compact_layout_height, render_compact_layout),
        Layout.DONUT: LayoutRenderer(calculate_donut_layout_height, render_donut_layout),
        Layout.DONUT_VERTICAL: LayoutRenderer(
            calculate_donut_vertical_layout_height,
            render_donut_vertical_layout,
            own_canvas=True,
        ),
        Layout.PIE: LayoutRenderer(
            calculate_pie_layout_height, render_pie_layout, own_canvas=True
        ),
    }
)

__all__ = ["LayoutRenderer", "RENDERERS"]
