"""Tests for the card frame."""

from top_languages_card.core.card import Card
from top_languages_card.styles.colors import get_card_colors


def test_card_defaults():
    """Default card uses the default theme and offsets the body under the title."""
    card = Card(width=300, height=165, title="Most Used Languages")
    svg = card.render("<g/>")
    assert svg.startswith('<svg width="300" height="165" viewBox="0 0 300 165"')
    assert 'stroke="#e4e2e2"' in svg
    assert 'fill="#fffefe"' in svg
    assert 'width="299"' in svg
    assert '<g data-testid="main-card-body" transform="translate(0, 55)"><g/></g>' in svg


def test_card_hide_title():
    """Hiding the title shrinks the canvas and moves the body up."""
    card = Card(width=300, height=165, title="T", hide_title=True)
    svg = card.render("")
    assert card.rendered_height == 135
    assert 'height="135"' in svg
    assert 'data-testid="card-title"' not in svg
    assert 'transform="translate(0, 25)"' in svg


def test_card_disable_animations():
    """Disabling animations swaps the keyframes for zero-duration rules."""
    card = Card(width=300, height=100)
    assert "@keyframes fadeInAnimation" in card.render("")
    card.disable_animations()
    svg = card.render("")
    assert "@keyframes fadeInAnimation" not in svg
    assert "animation-delay: 0s !important" in svg


def test_card_gradient_background():
    """A gradient background becomes a linearGradient fill."""
    colors = get_card_colors(bg_color="90,ff0000,0000ff")
    svg = Card(width=300, height=100, colors=colors).render("")
    assert 'fill="url(#gradient)"' in svg
    assert 'gradientTransform="rotate(90)"' in svg
    assert '<stop offset="0%" stop-color="#ff0000" />' in svg
    assert '<stop offset="100%" stop-color="#0000ff" />' in svg


def test_card_css_injected():
    """Extra CSS lands inside the style block."""
    svg = Card(width=300, height=100, css=".lang-name { fill: red; }").render("")
    assert ".lang-name { fill: red; }" in svg


def test_card_aria_label_points_at_desc():
    """The element named by aria-labelledby exists and defaults to the title."""
    svg = Card(width=300, height=100, title="Langs & Co").render("")
    assert 'aria-labelledby="descId"' in svg
    assert '<desc id="descId">Langs &amp; Co</desc>' in svg

    svg = Card(width=300, height=100, title="T", description="Top five").render("")
    assert '<desc id="descId">Top five</desc>' in svg
