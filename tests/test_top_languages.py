"""Tests for layout selection, sizing and card assembly."""

import re

from top_languages_card import TopLanguagesCard, compute_layout, render_top_languages
from top_languages_card.core.language import LanguageUsage
from top_languages_card.core.options import Layout, RenderOptions
from top_languages_card.core.top_languages import (
    get_default_languages_count,
    resolve_card_width,
)

NAME_RE = re.compile(r'data-testid="lang-name"[^>]*>([^<]*)</text>')
ALL_LAYOUTS = ["normal", "compact", "donut", "donut-vertical", "pie"]


def _make_usage(**sizes):
    return {name: LanguageUsage(name, size) for name, size in sizes.items()}


def _eight_languages():
    return _make_usage(
        Python=800, Go=700, Rust=600, Java=500, Ruby=400, Haskell=300, Elixir=200, Scala=100
    )


def _rendered_names(markup):
    return [text.split()[0] for text in NAME_RE.findall(markup)]


def test_scenario_normal_percentages():
    """Two languages render as a normal card with their shares."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    result = compute_layout(usage, RenderOptions(layout="normal"))
    assert result.height == 165
    assert result.width == 300
    assert _rendered_names(result.markup) == ["JavaScript", "Python"]
    assert re.findall(r">(\d+\.\d\d%)</text>", result.markup) == ["75.00%", "25.00%"]


def test_scenario_single_language_donut():
    """A single language fills the donut."""
    result = compute_layout(_make_usage(Go=500), RenderOptions(layout="donut"))
    assert result.height == 215
    assert result.width == 350
    assert result.markup.count('data-testid="lang-donut"') == 1
    assert "<circle" in result.markup
    assert "<path" not in result.markup


def test_scenario_empty_usage_renders_no_data():
    """Every layout renders the no-data message for empty usage."""
    for layout in ALL_LAYOUTS:
        result = compute_layout({}, RenderOptions(layout=layout))
        assert result.height == 90, layout
        assert "No languages data." in result.markup
        for primitive in ("lang-donut", "lang-pie", "lang-progress", "lang-name"):
            assert primitive not in result.markup


def test_no_data_offset_depends_on_layout():
    """The no-data message is indented for the chart layouts."""
    pie = compute_layout({}, RenderOptions(layout="pie")).markup
    normal = compute_layout({}, RenderOptions(layout="normal")).markup
    assert '<text x="25" y="11" class="stat bold"' in pie
    assert '<text x="0" y="11" class="stat bold"' in normal
    assert 'data-testid="lang-items"' in normal


def test_scenario_compact_hide_and_count():
    """Hidden languages are skipped before the count applies."""
    options = RenderOptions(layout="compact", hide=("Go",), langs_count=5)
    result = compute_layout(_eight_languages(), options)
    names = _rendered_names(result.markup)
    assert len(names) == 5
    assert "Go" not in names
    assert result.height == 140


def test_hide_progress_forces_compact_and_shrinks_height():
    """Hiding progress switches to the compact renderer."""
    options = RenderOptions(layout="normal", hide=("Go",), langs_count=5, hide_progress=True)
    result = compute_layout(_eight_languages(), options)
    assert result.height == 115
    assert "rect-mask" not in result.markup
    assert "%" not in result.markup


def test_hide_progress_default_count_is_compact():
    """Hiding progress uses the compact default count."""
    result = compute_layout(_eight_languages(), RenderOptions(hide_progress=True))
    assert len(_rendered_names(result.markup)) == 6


def test_default_counts_per_layout():
    """Each layout has its own default count."""
    assert get_default_languages_count(Layout.NORMAL) == 5
    assert get_default_languages_count(Layout.DONUT) == 5
    assert get_default_languages_count(Layout.COMPACT) == 6
    assert get_default_languages_count(Layout.PIE) == 6
    assert get_default_languages_count(Layout.DONUT_VERTICAL) == 6
    assert get_default_languages_count(Layout.DONUT, hide_progress=True) == 6


def test_reduction_cap_across_layouts():
    """Requested counts are clamped to 1..20."""
    usage = {f"Lang{i}": LanguageUsage(f"Lang{i}", 1000 - i) for i in range(25)}
    for count, expected in ((1, 1), (3, 3), (20, 20), (40, 20)):
        result = compute_layout(usage, RenderOptions(layout="normal", langs_count=count))
        assert len(_rendered_names(result.markup)) == expected


def test_sort_invariant_in_markup():
    """Languages appear in descending size order."""
    usage = _make_usage(C=10, A=30, B=20, D=5)
    result = compute_layout(usage, RenderOptions(layout="compact"))
    # Compact splits into two columns: first half then second half.
    assert _rendered_names(result.markup) == ["A", "B", "C", "D"]


def test_percentages_sum_to_hundred():
    """Rounded shares sum to about 100."""
    usage = _make_usage(A=333, B=333, C=334, D=17, E=1)
    result = compute_layout(usage, RenderOptions(layout="normal"))
    values = [float(v) for v in re.findall(r">(\d+\.\d\d)%</text>", result.markup)]
    assert len(values) == 5
    assert abs(sum(values) - 100) <= 0.01 * len(values)


def test_unknown_layout_falls_back_to_normal():
    """Unknown layouts render exactly like normal."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    fallback = compute_layout(usage, RenderOptions(layout="hexagon"))
    normal = compute_layout(usage, RenderOptions(layout="normal"))
    assert fallback == normal


def test_card_width_resolution():
    """Widths are parsed, defaulted and floored."""
    assert resolve_card_width(None) == 300
    assert resolve_card_width("abc") == 300
    assert resolve_card_width(0) == 300
    assert resolve_card_width(100) == 280
    assert resolve_card_width("450") == 450
    assert resolve_card_width(500) == 500


def test_donut_pads_width():
    """The donut adds padding to the requested width."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    result = compute_layout(usage, RenderOptions(layout="donut", card_width=400))
    assert result.width == 450


def test_render_is_deterministic():
    """Rendering twice gives identical output."""
    usage = _eight_languages()
    for layout in ALL_LAYOUTS:
        options = RenderOptions(layout=layout)
        assert render_top_languages(usage, options) == render_top_languages(usage, options)


def test_bytes_format_uses_injected_formatter():
    """The bytes format calls the supplied formatter."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    result = compute_layout(
        usage,
        RenderOptions(stats_format="bytes"),
        byte_formatter=lambda n: f"{n} bytes",
    )
    assert ">3000 bytes</text>" in result.markup
    assert ">1000 bytes</text>" in result.markup


def test_language_names_are_escaped():
    """Language names are escaped in markup."""
    usage = {"<script>": LanguageUsage("<script>", 10)}
    markup = compute_layout(usage, RenderOptions()).markup
    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup


def test_full_card_document():
    """The full card wraps the layout in the titled frame."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    svg = render_top_languages(usage)
    assert svg.startswith('<svg width="300" height="165"')
    assert "Most Used Languages" in svg
    assert 'data-testid="lang-items"' in svg
    assert "fadeInAnimation" in svg


def test_full_card_options():
    """Keyword overrides reach the card frame."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    svg = render_top_languages(
        usage,
        custom_title="My <Langs>",
        hide_border=True,
        disable_animations=True,
        theme="dark",
    )
    assert "My &lt;Langs&gt;" in svg
    assert 'stroke-opacity="0"' in svg
    assert "animation-duration: 0s !important" in svg
    assert 'fill="#151515"' in svg


def test_hide_title_shrinks_card():
    """Hiding the title shortens the card."""
    usage = _make_usage(JavaScript=3000, Python=1000)
    svg = render_top_languages(usage, RenderOptions(hide_title=True))
    assert svg.startswith('<svg width="300" height="135"')
    assert 'data-testid="card-title"' not in svg


def test_localized_no_data():
    """Title and no-data text follow the locale."""
    svg = render_top_languages({}, RenderOptions(locale="de"))
    assert "Keine Sprachdaten." in svg
    assert "Meist verwendete Sprachen" in svg


def test_top_languages_card_wrapper():
    """The notebook wrapper renders the same SVG as HTML."""
    card = TopLanguagesCard(_make_usage(Go=500), RenderOptions(layout="pie"))
    assert card.result.height == 300
    assert card._repr_html_() == card.to_svg()
    assert 'data-testid="lang-pie"' in card.to_svg()


def test_percent_ties_round_up():
    """Shares exactly halfway between hundredths round up."""
    markup = compute_layout(_make_usage(A=31, B=1), RenderOptions()).markup
    assert ">96.88%</text>" in markup
    assert ">3.13%</text>" in markup


def test_non_numeric_count_uses_layout_default():
    """A non-numeric count falls back to the requested layout's default."""
    usage = {f"Lang{i}": LanguageUsage(f"Lang{i}", 1000 - i) for i in range(10)}
    result = compute_layout(usage, RenderOptions(layout="pie", langs_count="abc"))
    assert result.markup.count('data-testid="lang-pie"') == 6


def test_hide_given_as_string():
    """A single name passed as a string hides that language."""
    result = compute_layout(_eight_languages(), RenderOptions(hide="Go"))
    names = _rendered_names(result.markup)
    assert "Go" not in names
    assert names == ["Python", "Rust", "Java", "Ruby", "Haskell"]
