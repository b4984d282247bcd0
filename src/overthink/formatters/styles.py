"""Centralized style constants for terminal output."""

from __future__ import annotations

# ── Glyphs ───────────────────────────────────────────────────────────

SOLID_GLYPH = "█"
LIGHT_GLYPH = "░"
DIVIDER_GLYPH = "─"
WARNING_GLYPH = "⚠"
CLOSING_ARROW = "-->"

# ── Rich styles ──────────────────────────────────────────────────────

TITLE_STYLE = "bold bright_cyan"
HEADING_STYLE = "bold bright_yellow"
ACCENT_STYLE = "bright_cyan"
CITATION_INDEX_STYLE = "dim bright_cyan"
MUTED_STYLE = "dim"
JUSTIFICATION_STYLE = "dim italic"
CLOSING_STYLE = "bold italic"
WARNING_STYLE = "bold bright_yellow"

# ── Risk bands ───────────────────────────────────────────────────────
# (lower bound inclusive, style), checked from the top down.

RISK_BANDS: tuple[tuple[int, str], ...] = (
    (70, "bright_red"),
    (40, "bright_yellow"),
    (0, "bright_green"),
)


def risk_style(score: int) -> str:
    """Fill color for the risk bar: red when alarming, yellow for caution, else green."""
    for lower, style in RISK_BANDS:
        if score >= lower:
            return style
    return RISK_BANDS[-1][1]
