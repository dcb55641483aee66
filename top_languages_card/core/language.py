"""
Language usage data structures for the top languages card.

These dataclasses describe the aggregated per-language byte counts handed
over by the data fetcher and the values derived from them during a render.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from top_languages_card.core.constants import DEFAULT_LANG_COLOR


@dataclass(frozen=True)
class LanguageUsage:
    """Bytes of code attributed to a single programming language."""

    name: str
    size: int
    color: Optional[str] = None

    @property
    def resolved_color(self) -> str:
        """Language color, or the default gray when none is known."""
        return self.color or DEFAULT_LANG_COLOR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageUsage":
        size = int(data["size"])
        if size < 0:
            raise ValueError(f"Language size must be non-negative, got {size}")
        return cls(
            name=data["name"],
            size=size,
            color=data.get("color"),
        )


@dataclass(frozen=True)
class ReducedDataset:
    """Sorted, filtered and count-capped languages plus their total size.

    Attributes
    ----------
    languages : Tuple[LanguageUsage, ...]
        Languages in descending size order.
    total_size : int
        Sum of ``size`` over exactly ``languages``.
    """

    languages: Tuple[LanguageUsage, ...] = ()
    total_size: int = 0

    def __len__(self) -> int:
        return len(self.languages)

    def percentage(self, lang: LanguageUsage) -> float:
        """Share of ``lang`` in the total size, as a percentage (0-100)."""
        return percentage(lang.size, self.total_size)


@dataclass(frozen=True)
class LayoutResult:
    """Canvas size and markup fragment produced by a layout."""

    width: int
    height: int
    markup: str


def percentage(size: int, total_size: int) -> float:
    """``size`` as a percentage of ``total_size``; 0.0 for an empty total."""
    if total_size == 0:
        return 0.0
    return size / total_size * 100
