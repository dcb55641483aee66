"""Tests for angle, coordinate and arc-path math."""

import math
import re

import pytest

from top_languages_card.core.geometry import (
    cartesian_to_polar,
    circle_length,
    degrees_to_radians,
    donut_arc_path,
    donut_segments,
    get_longest_lang,
    large_arc_flag,
    pie_wedge_path,
    polar_to_cartesian,
    radians_to_degrees,
)
from top_languages_card.core.language import LanguageUsage


def test_degree_radian_conversion():
    """Degrees and radians convert both ways."""
    assert degrees_to_radians(180) == pytest.approx(math.pi)
    assert radians_to_degrees(math.pi / 2) == pytest.approx(90)


def test_polar_to_cartesian_measures_from_positive_x_axis():
    """Angle zero points along positive x and angles grow clockwise on screen."""
    p = polar_to_cartesian(0, 0, 10, 0)
    assert p.x == pytest.approx(10)
    assert p.y == pytest.approx(0)

    p = polar_to_cartesian(5, 5, 10, 90)
    assert p.x == pytest.approx(5)
    assert p.y == pytest.approx(15)


def test_cartesian_to_polar_normalizes_angle():
    """Negative atan2 results are shifted into [0, 360)."""
    polar = cartesian_to_polar(0, 0, 0, -10)
    assert polar.radius == pytest.approx(10)
    assert polar.angle == pytest.approx(270)


def test_circle_length():
    """Circumference is two pi times the radius."""
    assert circle_length(1) == pytest.approx(2 * math.pi)
    assert circle_length(80) == pytest.approx(502.6548, abs=1e-4)


def test_large_arc_flag_threshold():
    """Only sweeps strictly wider than half a circle set the flag."""
    assert large_arc_flag(0, 90) == 0
    assert large_arc_flag(0, 180) == 0
    assert large_arc_flag(0, 180.01) == 1
    assert large_arc_flag(90, 360) == 1


def test_donut_arc_path_uses_major_arc_over_half_circle():
    """Arcs past 180 degrees use the large-arc flag with sweep 0."""
    d = donut_arc_path(50, 50, 10, 0, 270)
    assert d.startswith("M ")
    assert re.search(r"A 10 10 0 1 0 ", d)


def test_donut_arc_path_starts_at_twelve_o_clock():
    """The arc ends at the rotated start angle, i.e. the top of the circle."""
    d = donut_arc_path(50, 50, 10, 0, 90)
    end_x, end_y = (float(v) for v in d.split()[-2:])
    assert end_x == pytest.approx(50)
    assert end_y == pytest.approx(40)


def test_pie_wedge_path():
    """Wedges start at the center, sweep clockwise and close."""
    d = pie_wedge_path(150, 100, 90, 0, 270)
    assert d.startswith("M 150 100 L 240 100 A 90 90 0 1 1 ")
    assert d.endswith(" Z")

    small = pie_wedge_path(150, 100, 90, 270, 360)
    assert " A 90 90 0 0 1 " in small


def test_donut_segments_accumulate():
    """Each segment starts where the previous one ended."""
    segments = donut_segments([75.0, 25.0])
    assert [s.percent for s in segments] == [75.0, 25.0]
    assert segments[0].start_angle == 0
    assert segments[0].end_angle == pytest.approx(270)
    assert segments[1].start_angle == segments[0].end_angle
    assert segments[1].end_angle == pytest.approx(360)


def test_donut_segments_renormalize_to_percent_total():
    """Values are rescaled so the shares sum to 100."""
    segments = donut_segments([1.0, 1.0, 2.0])
    assert [s.percent for s in segments] == [25.0, 25.0, 50.0]


def test_get_longest_lang():
    """The longest name wins; an empty list gives an empty language."""
    langs = [
        LanguageUsage("Go", 1),
        LanguageUsage("Haskell", 2),
        LanguageUsage("Fortran", 3),
    ]
    assert get_longest_lang(langs).name == "Haskell"
    assert get_longest_lang([]).name == ""
