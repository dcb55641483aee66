"""Render options for the top languages card."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import jsonschema

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "render-options.json"


class Layout(Enum):
    """Visual layout of the language card."""

    NORMAL = "normal"
    COMPACT = "compact"
    DONUT = "donut"
    DONUT_VERTICAL = "donut-vertical"
    PIE = "pie"

    @classmethod
    def parse(cls, value: Union["Layout", str, None]) -> "Layout":
        """Resolve a layout name, falling back to ``NORMAL``."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NORMAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug("Unknown layout %r, using normal", value)
            return cls.NORMAL


class StatsFormat(Enum):
    """How the share of each language is displayed."""

    PERCENTAGES = "percentages"
    BYTES = "bytes"

    @classmethod
    def parse(cls, value: Union["StatsFormat", str, None]) -> "StatsFormat":
        """Resolve a stats format name, falling back to ``PERCENTAGES``."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.PERCENTAGES
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug("Unknown stats format %r, using percentages", value)
            return cls.PERCENTAGES


def _parse_hide(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(v) for v in value if str(v).strip())


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class RenderOptions:
    """Immutable options bag for a single render call.

    Parameters
    ----------
    layout : str
        One of ``normal``, ``compact``, ``donut``, ``donut-vertical``, ``pie``.
        Unknown names render as ``normal``.
    langs_count : int, optional
        Requested number of languages, clamped to ``[1, 20]``. Defaults
        depend on the layout.
    hide : Tuple[str, ...]
        Language names to exclude (case-insensitive, whitespace-trimmed).
    hide_progress : bool
        Drop the progress bar and values; forces the compact renderer.
    stats_format : str
        ``percentages`` or ``bytes``.
    card_width : int or str, optional
        Requested card width. Non-numeric values fall back to the default.
    """

    layout: Union[Layout, str] = "normal"
    langs_count: Optional[int] = None
    hide: Tuple[str, ...] = ()
    hide_progress: bool = False
    stats_format: Union[StatsFormat, str] = "percentages"
    card_width: Optional[Union[int, str]] = None

    # Card frame
    hide_title: bool = False
    hide_border: bool = False
    custom_title: Optional[str] = None
    title_color: Optional[str] = None
    text_color: Optional[str] = None
    bg_color: Optional[str] = None
    border_color: Optional[str] = None
    border_radius: float = 4.5
    theme: str = "default"
    locale: str = "en"
    disable_animations: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "hide", _parse_hide(self.hide))

    @property
    def resolved_layout(self) -> Layout:
        return Layout.parse(self.layout)

    @property
    def resolved_stats_format(self) -> StatsFormat:
        return StatsFormat.parse(self.stats_format)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "layout": _enum_value(self.layout),
            "langs_count": self.langs_count,
            "hide": list(self.hide),
            "hide_progress": self.hide_progress,
            "stats_format": _enum_value(self.stats_format),
            "card_width": self.card_width,
            "hide_title": self.hide_title,
            "hide_border": self.hide_border,
            "custom_title": self.custom_title,
            "title_color": self.title_color,
            "text_color": self.text_color,
            "bg_color": self.bg_color,
            "border_color": self.border_color,
            "border_radius": self.border_radius,
            "theme": self.theme,
            "locale": self.locale,
            "disable_animations": self.disable_animations,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderOptions":
        """Build options from a loose mapping; unknown keys are ignored."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def validate(self, strict: bool = False) -> bool:
        """Validate options against the bundled JSON schema.

        Parameters
        ----------
        strict : bool
            If True, raise ValidationError on failure.
            If False, return bool.

        Returns
        -------
        bool
            True if valid, False otherwise.
        """
        with open(SCHEMA_PATH) as f:
            schema = json.load(f)
        try:
            jsonschema.validate(self.to_dict(), schema)
        except jsonschema.ValidationError:
            if strict:
                raise
            return False
        return True
