"""Angle, coordinate and arc-path math for the circular layouts."""

import math
from typing import Iterable, List, NamedTuple, Sequence

from top_languages_card.core.formatting import format_number, round_half_up
from top_languages_card.core.language import LanguageUsage

# Charts start at 12 o'clock rather than 3 o'clock.
ROTATION_OFFSET = -90


class Point(NamedTuple):
    x: float
    y: float


class Polar(NamedTuple):
    radius: float
    angle: float


class Segment(NamedTuple):
    """A donut segment: its rounded share and accumulated angles in degrees."""

    percent: float
    start_angle: float
    end_angle: float


def degrees_to_radians(angle: float) -> float:
    return angle * (math.pi / 180.0)


def radians_to_degrees(angle: float) -> float:
    return angle / (math.pi / 180.0)


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    """Point at ``angle`` degrees from the positive x-axis."""
    rads = degrees_to_radians(angle)
    return Point(cx + radius * math.cos(rads), cy + radius * math.sin(rads))


def cartesian_to_polar(cx: float, cy: float, x: float, y: float) -> Polar:
    """Inverse of :func:`polar_to_cartesian`; the angle lies in ``[0, 360)``."""
    radius = math.hypot(x - cx, y - cy)
    angle = radians_to_degrees(math.atan2(y - cy, x - cx))
    if angle < 0:
        angle += 360
    return Polar(radius, angle)


def circle_length(radius: float) -> float:
    return 2 * math.pi * radius


def large_arc_flag(start_angle: float, end_angle: float) -> int:
    """1 when the arc from ``start_angle`` to ``end_angle`` exceeds 180 degrees."""
    return 1 if end_angle - start_angle > 180 else 0


def donut_arc_path(
    cx: float, cy: float, radius: float, start_angle: float, end_angle: float
) -> str:
    """Counter-clockwise arc path for one donut segment.

    The arc runs from the end angle back to the start angle, both rotated by
    ``ROTATION_OFFSET``.
    """
    start = polar_to_cartesian(cx, cy, radius, end_angle + ROTATION_OFFSET)
    end = polar_to_cartesian(cx, cy, radius, start_angle + ROTATION_OFFSET)
    r = format_number(radius)
    return (
        f"M {format_number(start.x)} {format_number(start.y)} "
        f"A {r} {r} 0 {large_arc_flag(start_angle, end_angle)} 0 "
        f"{format_number(end.x)} {format_number(end.y)}"
    )


def pie_wedge_path(
    cx: float, cy: float, radius: float, start_angle: float, end_angle: float
) -> str:
    """Closed clockwise wedge from the center through the arc."""
    start = polar_to_cartesian(cx, cy, radius, start_angle)
    end = polar_to_cartesian(cx, cy, radius, end_angle)
    r = format_number(radius)
    return (
        f"M {format_number(cx)} {format_number(cy)} "
        f"L {format_number(start.x)} {format_number(start.y)} "
        f"A {r} {r} 0 {large_arc_flag(start_angle, end_angle)} 1 "
        f"{format_number(end.x)} {format_number(end.y)} Z"
    )


def donut_segments(percentages: Sequence[float]) -> List[Segment]:
    """Accumulate segment angles; segment i starts where segment i - 1 ends.

    Each share is re-normalised against the sum of ``percentages`` and
    rounded to two decimals before being converted to degrees.
    """
    total = sum(percentages)
    segments: List[Segment] = []
    start_angle = 0.0
    for value in percentages:
        percent = round_half_up(value / total * 100, 2) if total else 0.0
        end_angle = 3.6 * percent + start_angle
        segments.append(Segment(percent, start_angle, end_angle))
        start_angle = end_angle
    return segments


def get_longest_lang(langs: Iterable[LanguageUsage]) -> LanguageUsage:
    """Language with the longest name; the first one wins ties."""
    longest = LanguageUsage(name="", size=0)
    for lang in langs:
        if len(lang.name) > len(longest.name):
            longest = lang
    return longest
