"""
Top Languages Card — Render a user's programming-language usage as an SVG card.
"""

__version__ = "0.1.0"

from top_languages_card.core.card import Card
from top_languages_card.core.formatting import display_value, format_bytes
from top_languages_card.core.language import LanguageUsage, LayoutResult, ReducedDataset
from top_languages_card.core.options import Layout, RenderOptions, StatsFormat
from top_languages_card.core.reducer import trim_top_languages
from top_languages_card.core.top_languages import (
    TopLanguagesCard,
    compute_layout,
    render_top_languages,
)

__all__ = [
    "LanguageUsage",
    "ReducedDataset",
    "LayoutResult",
    "Layout",
    "StatsFormat",
    "RenderOptions",
    "Card",
    "TopLanguagesCard",
    "compute_layout",
    "render_top_languages",
    "trim_top_languages",
    "display_value",
    "format_bytes",
    "__version__",
]
