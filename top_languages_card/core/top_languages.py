"""Top languages card: layout selection, sizing and final assembly."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from top_languages_card.core.card import Card
from top_languages_card.core.constants import (
    CARD_PADDING,
    COMPACT_LAYOUT_BASE_HEIGHT,
    DEFAULT_CARD_WIDTH,
    DONUT_WIDTH_PADDING,
    HIDE_PROGRESS_HEIGHT_OFFSET,
    LAYOUT_SETTINGS,
    MIN_CARD_WIDTH,
)
from top_languages_card.core.formatting import ByteFormatter, encode_html, format_bytes
from top_languages_card.core.i18n import I18n
from top_languages_card.core.language import LayoutResult
from top_languages_card.core.options import Layout, RenderOptions
from top_languages_card.core.reducer import UsageMapping, trim_top_languages
from top_languages_card.layouts import RENDERERS
from top_languages_card.styles.colors import CardColors, get_card_colors

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]


def lang_card_css(text_color: str) -> str:
    return f"""
    @keyframes slideInAnimation {{
      from {{
        width: 0;
      }}
      to {{
        width: calc(100%-100px);
      }}
    }}
    @keyframes growWidthAnimation {{
      from {{
        width: 0;
      }}
      to {{
        width: 100%;
      }}
    }}
    .stat {{
      font: 600 14px 'Segoe UI', Ubuntu, "Helvetica Neue", Sans-Serif; fill: {text_color};
    }}
    @supports(-moz-appearance: auto) {{
      .stat {{ font-size:12px; }}
    }}
    .bold {{ font-weight: 700 }}
    .lang-name {{
      font: 400 11px "Segoe UI", Ubuntu, Sans-Serif;
      fill: {text_color};
    }}
    .stagger {{
      opacity: 0;
      animation: fadeInAnimation 0.3s ease-in-out forwards;
    }}
    #rect-mask rect{{
      animation: slideInAnimation 1s ease-in-out forwards;
    }}
    .lang-progress{{
      animation: growWidthAnimation 0.6s ease-in-out forwards;
    }}
"""


def get_default_languages_count(layout: Layout, hide_progress: bool = False) -> int:
    """Languages shown when no count is requested; hiding progress implies compact."""
    if hide_progress:
        return LAYOUT_SETTINGS[Layout.COMPACT].langs_count
    return LAYOUT_SETTINGS[layout].langs_count


def resolve_card_width(card_width: Any) -> int:
    """Requested width if numeric, raised to the minimum; else the default."""
    if card_width is None or card_width == "":
        return DEFAULT_CARD_WIDTH
    try:
        width = int(float(card_width))
    except (TypeError, ValueError):
        logger.debug("Non-numeric card_width %r, using %d", card_width, DEFAULT_CARD_WIDTH)
        return DEFAULT_CARD_WIDTH
    if width == 0:
        return DEFAULT_CARD_WIDTH
    return max(width, MIN_CARD_WIDTH)


def _effective_layout(options: RenderOptions) -> Layout:
    layout = options.resolved_layout
    if options.hide_progress and layout not in (Layout.PIE, Layout.DONUT_VERTICAL):
        return Layout.COMPACT
    return layout


def no_languages_data_node(text: str, color: str, layout: Layout) -> str:
    x = CARD_PADDING if RENDERERS[layout].own_canvas else 0
    return f'<text x="{x}" y="11" class="stat bold" fill="{color}">{encode_html(text)}</text>'


def _wrap_items(markup: str) -> str:
    return f'<svg data-testid="lang-items" x="{CARD_PADDING}">\n{markup}\n</svg>'


def compute_layout(
    usage: UsageMapping,
    options: Optional[RenderOptions] = None,
    *,
    byte_formatter: ByteFormatter = format_bytes,
    translator: Optional[Translator] = None,
    colors: Optional[CardColors] = None,
) -> LayoutResult:
    """Reduce the dataset and render the body fragment of the card.

    Parameters
    ----------
    usage : Mapping[str, LanguageUsage]
        Per-language usage from the data fetcher.
    options : RenderOptions, optional
        Presentation options; defaults throughout when omitted.
    byte_formatter : Callable[[int], str]
        Used for ``stats_format="bytes"``.
    translator : Callable[[str], str], optional
        Label lookup; an :class:`I18n` for ``options.locale`` by default.
    colors : CardColors, optional
        Resolved card colors; derived from the options when omitted.

    Returns
    -------
    LayoutResult
        Card width, height and the body markup.
    """
    options = options or RenderOptions()
    translator = translator or I18n(options.locale).t
    colors = colors or _colors_for(options)

    requested = options.resolved_layout
    layout = _effective_layout(options)
    dataset = trim_top_languages(
        usage,
        options.langs_count,
        options.hide,
        default_count=get_default_languages_count(requested, options.hide_progress),
    )
    width = resolve_card_width(options.card_width)

    if not dataset.languages:
        logger.debug("No languages to render for layout %s", requested.value)
        node = no_languages_data_node(translator("langcard.nodata"), colors.text_color, requested)
        markup = node if RENDERERS[requested].own_canvas else _wrap_items(node)
        return LayoutResult(width=width, height=COMPACT_LAYOUT_BASE_HEIGHT, markup=markup)

    renderer = RENDERERS[layout]
    height = renderer.calculate_height(len(dataset))
    if layout is Layout.COMPACT and options.hide_progress:
        height += HIDE_PROGRESS_HEIGHT_OFFSET
    if layout is Layout.DONUT:
        width += DONUT_WIDTH_PADDING

    markup = renderer.render(
        dataset.languages,
        width,
        dataset.total_size,
        stats_format=options.resolved_stats_format,
        hide_progress=options.hide_progress,
        byte_formatter=byte_formatter,
    )
    if not renderer.own_canvas:
        markup = _wrap_items(markup)
    return LayoutResult(width=width, height=height, markup=markup)


def _colors_for(options: RenderOptions) -> CardColors:
    return get_card_colors(
        theme=options.theme,
        title_color=options.title_color,
        text_color=options.text_color,
        bg_color=options.bg_color,
        border_color=options.border_color,
    )


def render_top_languages(
    usage: UsageMapping,
    options: Optional[RenderOptions] = None,
    *,
    byte_formatter: ByteFormatter = format_bytes,
    translator: Optional[Translator] = None,
    **overrides: Any,
) -> str:
    """Render the complete top languages card as an SVG document.

    Keyword ``overrides`` are merged into ``options`` using the
    :meth:`RenderOptions.from_dict` rules.
    """
    options = options or RenderOptions()
    if overrides:
        options = RenderOptions.from_dict({**options.to_dict(), **overrides})
    translator = translator or I18n(options.locale).t
    colors = _colors_for(options)

    result = compute_layout(
        usage, options, byte_formatter=byte_formatter, translator=translator, colors=colors
    )
    card = Card(
        width=result.width,
        height=result.height,
        title=options.custom_title or translator("langcard.title"),
        colors=colors,
        border_radius=options.border_radius,
        css=lang_card_css(colors.text_color),
        hide_border=options.hide_border,
        hide_title=options.hide_title,
    )
    if options.disable_animations:
        card.disable_animations()
    return card.render(result.markup)


@dataclass
class TopLanguagesCard:
    """Notebook-friendly wrapper around :func:`render_top_languages`.

    Parameters
    ----------
    usage : Mapping[str, LanguageUsage]
        Per-language usage to visualize.
    options : RenderOptions
        Presentation options.

    Examples
    --------
    >>> card = TopLanguagesCard({"Python": LanguageUsage("Python", 1200, "#3572A5")})
    >>> card.display()
    """

    usage: UsageMapping
    options: RenderOptions = field(default_factory=RenderOptions)

    @property
    def result(self) -> LayoutResult:
        return compute_layout(self.usage, self.options)

    def to_svg(self) -> str:
        return render_top_languages(self.usage, self.options)

    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_svg()

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        from IPython.display import SVG
        from IPython.display import display as ipy_display

        ipy_display(SVG(self.to_svg()))
