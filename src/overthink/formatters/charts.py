"""Bar chart and divider primitives."""

from __future__ import annotations

import math

from rich.text import Text

from overthink.formatters.styles import (
    ACCENT_STYLE,
    DIVIDER_GLYPH,
    LIGHT_GLYPH,
    MUTED_STYLE,
    SOLID_GLYPH,
)

DEFAULT_WIDTH = 40


def bar_segments(value: float, max_value: float = 100, width: int = DEFAULT_WIDTH) -> tuple[int, int]:
    """Return ``(filled, empty)`` glyph counts for *value* on a *width*-wide bar."""
    if max_value <= 0:
        raise ValueError(f"max_value must be positive, got {max_value}")
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")

    clamped = min(max(value, 0), max_value)
    filled = math.floor(clamped * width / max_value)
    return filled, width - filled


def render_bar(
    value: float,
    max_value: float = 100,
    width: int = DEFAULT_WIDTH,
    style: str = ACCENT_STYLE,
) -> Text:
    """Two-tone block bar: solid glyphs in *style*, light glyphs muted."""
    filled, empty = bar_segments(value, max_value, width)
    bar = Text()
    bar.append(SOLID_GLYPH * filled, style=style)
    bar.append(LIGHT_GLYPH * empty, style=MUTED_STYLE)
    return bar


def render_divider(width: int) -> str:
    return DIVIDER_GLYPH * max(width, 0)
