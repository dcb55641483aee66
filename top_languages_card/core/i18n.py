"""Static label translations for the language card."""

from types import MappingProxyType
from typing import Mapping, Optional

FALLBACK_LOCALE = "en"

LANG_CARD_LOCALES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "langcard.title": MappingProxyType(
            {
                "en": "Most Used Languages",
                "de": "Meist verwendete Sprachen",
                "es": "Lenguajes más usados",
                "fr": "Langages les plus utilisés",
                "it": "Linguaggi più utilizzati",
                "ja": "最もよく使っている言語",
                "nl": "Meest gebruikte talen",
                "pt-br": "Linguagens mais usadas",
                "ru": "Наиболее используемые языки",
                "zh-cn": "最常用的语言",
            }
        ),
        "langcard.nodata": MappingProxyType(
            {
                "en": "No languages data.",
                "de": "Keine Sprachdaten.",
                "es": "Sin datos de lenguajes.",
                "fr": "Aucune donnée sur les langues.",
                "it": "Nessun dato sulle lingue.",
                "ja": "言語データがありません。",
                "nl": "Geen taalgegevens.",
                "pt-br": "Sem dados de linguagens.",
                "ru": "Нет данных о языках.",
                "zh-cn": "没有语言数据。",
            }
        ),
    }
)


class I18n:
    """Look up card labels for one locale, falling back to English.

    Parameters
    ----------
    locale : str, optional
        Locale code such as ``"de"`` or ``"pt-br"``; matched case-insensitively.
    translations : Mapping[str, Mapping[str, str]]
        Table of ``key -> locale -> text``.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        translations: Mapping[str, Mapping[str, str]] = LANG_CARD_LOCALES,
    ) -> None:
        self.locale = (locale or FALLBACK_LOCALE).lower()
        self.translations = translations

    def t(self, key: str) -> str:
        """Translate ``key``.

        Raises
        ------
        KeyError
            If ``key`` has no translations at all.
        """
        if key not in self.translations:
            raise KeyError(f"Translation string not found: '{key}'")
        entries = self.translations[key]
        return entries.get(self.locale, entries[FALLBACK_LOCALE])
