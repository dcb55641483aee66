"""Markup building blocks shared by the layout renderers."""

from typing import List, Optional, Sequence, Tuple, TypeVar

from top_languages_card.core.formatting import format_number
from top_languages_card.core.reducer import clamp_value

T = TypeVar("T")

PROGRESS_BAR_BACKGROUND = "#ddd"


def flex_layout(
    items: Sequence[str],
    gap: float,
    direction: str = "row",
    sizes: Optional[Sequence[float]] = None,
) -> List[str]:
    """Wrap each non-empty item in a ``<g>`` translated along ``direction``.

    Item ``i`` is offset by the sum of the preceding ``sizes`` plus one
    ``gap`` per preceding item.
    """
    sizes = sizes or []
    offset = 0.0
    laid_out = []
    visible = [item for item in items if item]
    for i, item in enumerate(visible):
        if direction == "column":
            transform = f"translate(0, {format_number(offset)})"
        else:
            transform = f"translate({format_number(offset)}, 0)"
        laid_out.append(f'<g transform="{transform}">{item}</g>')
        offset += (sizes[i] if i < len(sizes) else 0) + gap
    return laid_out


def create_progress_node(
    x: float,
    y: float,
    width: float,
    color: str,
    progress: float,
    background_color: str = PROGRESS_BAR_BACKGROUND,
    delay: int = 0,
) -> str:
    """Rounded progress bar; the filled part is clamped to 2..100 %."""
    filled = clamp_value(progress, 2, 100)
    return "\n".join(
        [
            f'<svg width="{format_number(width)}" x="{format_number(x)}" y="{format_number(y)}">',
            f'<rect rx="5" ry="5" x="0" y="0" width="{format_number(width)}" height="8" '
            f'fill="{background_color}"></rect>',
            f'<svg data-testid="lang-progress" width="{format_number(filled)}%">',
            f'<rect height="8" fill="{color}" rx="5" ry="5" x="0" y="0" class="lang-progress" '
            f'style="animation-delay: {delay}ms;" />',
            "</svg>",
            "</svg>",
        ]
    )


def split_columns(items: Sequence[T]) -> Tuple[List[T], List[T]]:
    """Split into two columns holding ``n // 2`` and the remaining items."""
    half = len(items) // 2
    return list(items[:half]), list(items[half:])
