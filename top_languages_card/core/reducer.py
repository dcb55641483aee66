"""Reduce raw language usage to the languages shown on the card."""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from top_languages_card.core.constants import LAYOUT_SETTINGS, MAXIMUM_LANGS_COUNT
from top_languages_card.core.language import LanguageUsage, ReducedDataset
from top_languages_card.core.options import Layout

logger = logging.getLogger(__name__)

UsageMapping = Mapping[str, Union[LanguageUsage, Mapping[str, Any]]]


def lowercase_trim(name: str) -> str:
    return name.strip().casefold()


def clamp_value(number: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, number))


def _coerce_count(langs_count: Any, default: int) -> int:
    if langs_count is None:
        return default
    try:
        count = int(langs_count)
    except (TypeError, ValueError):
        logger.debug("Non-numeric langs_count %r, using %d", langs_count, default)
        return default
    return int(clamp_value(count, 1, MAXIMUM_LANGS_COUNT))


def trim_top_languages(
    usage: UsageMapping,
    langs_count: Optional[int] = None,
    hide: Optional[Iterable[str]] = None,
    default_count: int = LAYOUT_SETTINGS[Layout.NORMAL].langs_count,
) -> ReducedDataset:
    """Sort, filter and cap languages, then total the kept sizes.

    Parameters
    ----------
    usage : Mapping[str, LanguageUsage]
        Per-language usage keyed by name. Plain dicts are accepted too.
    langs_count : int, optional
        Number of languages to keep, clamped to ``[1, MAXIMUM_LANGS_COUNT]``.
    hide : Iterable[str], optional
        Names to drop, compared case-insensitively after trimming.
    default_count : int
        Count used when ``langs_count`` is missing or not a number.

    Returns
    -------
    ReducedDataset
        Languages by descending size (stable for ties) and the total over
        exactly those languages.
    """
    hidden = {lowercase_trim(name) for name in (hide or [])}
    count = _coerce_count(langs_count, default_count)

    langs = [
        lang if isinstance(lang, LanguageUsage) else LanguageUsage.from_dict(dict(lang))
        for lang in usage.values()
    ]
    langs = sorted(langs, key=lambda lang: lang.size, reverse=True)
    langs = [lang for lang in langs if lowercase_trim(lang.name) not in hidden][:count]

    total = sum(lang.size for lang in langs)
    return ReducedDataset(languages=tuple(langs), total_size=total)
