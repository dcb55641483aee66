"""Text formatting helpers shared by the layouts."""

import html
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Union

from top_languages_card.core.options import StatsFormat

ByteFormatter = Callable[[int], str]

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")

_CONTROL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f]")

# Approximate advance widths, in em, for the card's sans-serif font.
_AVERAGE_CHAR_WIDTH = 0.5279
_NARROW_CHARS = frozenset("fijlrt.,:;'!|()[] ")
_WIDE_CHARS = frozenset("mwMW@%")


def round_half_up(value: float, digits: int) -> float:
    """Round the exact binary value of ``value``, ties away from zero.

    ``round_half_up(3.125, 2) == 3.13`` where the built-in ``round`` gives 3.12.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with binary units, e.g. ``1536 -> "1.5 KB"``.

    Raises
    ------
    ValueError
        If ``num_bytes`` is negative or beyond exabytes.
    """
    if num_bytes < 0:
        raise ValueError("Bytes must be a non-negative number")
    if num_bytes == 0:
        return "0 B"

    i = 0
    while num_bytes >= 1024 ** (i + 1):
        i += 1
    if i >= len(BYTE_UNITS):
        raise ValueError("Bytes is too large to convert to a human-readable string")
    return f"{round_half_up(num_bytes / 1024 ** i, 1):.1f} {BYTE_UNITS[i]}"


def display_value(
    size: int,
    percentage: float,
    stats_format: Union[StatsFormat, str] = StatsFormat.PERCENTAGES,
    byte_formatter: ByteFormatter = format_bytes,
) -> str:
    """Text shown next to a language name.

    ``percentage`` is computed by the caller against the card total; it is
    never recomputed here.
    """
    if StatsFormat.parse(stats_format) is StatsFormat.BYTES:
        return byte_formatter(size)
    return f"{round_half_up(percentage, 2):.2f}%"


def format_number(value: float) -> str:
    """Render a coordinate for markup; integral values drop the ``.0``."""
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def encode_html(text: str) -> str:
    """Escape text for embedding in SVG and strip control characters."""
    return _CONTROL_CHARS.sub("", html.escape(text))


def measure_text(text: str, font_size: float = 10) -> float:
    """Approximate rendered width of ``text`` at ``font_size``."""
    width = 0.0
    for char in text:
        if char in _NARROW_CHARS:
            width += 0.3
        elif char in _WIDE_CHARS:
            width += 0.85
        elif char.isupper():
            width += 0.65
        else:
            width += _AVERAGE_CHAR_WIDTH
    return width * font_size
