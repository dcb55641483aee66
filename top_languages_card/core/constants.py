"""Card dimensions and per-layout defaults."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from top_languages_card.core.options import Layout

DEFAULT_CARD_WIDTH = 300
MIN_CARD_WIDTH = 280
CARD_PADDING = 25
COMPACT_LAYOUT_BASE_HEIGHT = 90
MAXIMUM_LANGS_COUNT = 20
DEFAULT_LANG_COLOR = "#858585"
DONUT_WIDTH_PADDING = 50
HIDE_PROGRESS_HEIGHT_OFFSET = -25


@dataclass(frozen=True)
class LayoutSettings:
    """Defaults a layout applies when the caller does not override them.

    ``stagger_offset`` and ``stagger_step`` give the animation delay of the
    item at ``index`` as ``(index + stagger_offset) * stagger_step`` ms.
    """

    langs_count: int
    stagger_offset: int
    stagger_step: int


LAYOUT_SETTINGS: Mapping[Layout, LayoutSettings] = MappingProxyType(
    {
        Layout.NORMAL: LayoutSettings(langs_count=5, stagger_offset=3, stagger_step=150),
        Layout.COMPACT: LayoutSettings(langs_count=6, stagger_offset=3, stagger_step=150),
        Layout.DONUT: LayoutSettings(langs_count=5, stagger_offset=3, stagger_step=150),
        Layout.DONUT_VERTICAL: LayoutSettings(langs_count=6, stagger_offset=1, stagger_step=100),
        Layout.PIE: LayoutSettings(langs_count=6, stagger_offset=1, stagger_step=100),
    }
)

# Donut ring segments trail their legend entries.
DONUT_SEGMENT_STAGGER_STEP = 100
DONUT_SEGMENT_EXTRA_DELAY = 300


def stagger_delay(index: int, offset: int, step: int) -> int:
    """Animation delay in ms for the item at ``index``."""
    return (index + offset) * step
