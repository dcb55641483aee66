"""Core data model for the top languages card."""

from top_languages_card.core.language import LanguageUsage, LayoutResult, ReducedDataset
from top_languages_card.core.options import Layout, RenderOptions, StatsFormat

__all__ = [
    "LanguageUsage",
    "ReducedDataset",
    "LayoutResult",
    "Layout",
    "StatsFormat",
    "RenderOptions",
]
