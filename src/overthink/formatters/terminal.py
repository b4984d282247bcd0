"""Terminal renderer: colorized, bar-charted layout of an analysis record.

Every styled fragment is a ``rich.text.Text``; nothing is passed through rich
markup, so brackets and emoji codes in model output print literally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from overthink.core.config import RenderConfig
from overthink.formatters.charts import DEFAULT_WIDTH, render_bar, render_divider
from overthink.formatters.styles import (
    ACCENT_STYLE,
    CITATION_INDEX_STYLE,
    CLOSING_ARROW,
    CLOSING_STYLE,
    HEADING_STYLE,
    JUSTIFICATION_STYLE,
    MUTED_STYLE,
    TITLE_STYLE,
    WARNING_GLYPH,
    WARNING_STYLE,
    risk_style,
)
from overthink.models import AnalysisResult, Citation, Probability

EXTERNAL_DIVIDER_WIDTH = 60
FALLBACK_NOTICE = "   Falling back to the built-in overthinking engine."


def make_console(file: Optional[TextIO] = None, *, force_terminal: Optional[bool] = None) -> Console:
    """Console settings shared by the CLI and tests: no wrapping, no highlighting."""
    return Console(
        file=file,
        force_terminal=force_terminal,
        highlight=False,
        emoji=False,
        markup=False,
        soft_wrap=True,
    )


class TerminalRenderer:
    """Writes analysis records to a rich Console in a fixed section order."""

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        chart_width: int = DEFAULT_WIDTH,
        external_divider_width: int = EXTERNAL_DIVIDER_WIDTH,
    ) -> None:
        self._console = console or make_console()
        self._chart_width = chart_width
        self._external_divider_width = external_divider_width

    @classmethod
    def from_config(cls, config: RenderConfig, file: Optional[TextIO] = None) -> TerminalRenderer:
        return cls(
            make_console(file, force_terminal=config.force_terminal),
            chart_width=config.chart_width,
            external_divider_width=config.external_divider_width,
        )

    @property
    def console(self) -> Console:
        return self._console

    # ── Public API ───────────────────────────────────────────────────

    def render(self, result: AnalysisResult) -> None:
        """Render *result*: title, summary, probabilities, risk, citations, conclusion."""
        self._blank()
        self._line("  ", (result.title, TITLE_STYLE))
        self._line((render_divider(len(result.title) + 2), MUTED_STYLE))
        self._blank()
        self._section("Executive Summary", result.summary)
        self._blank()
        self._probabilities(result.probabilities)
        self._blank()
        self._risk(result.risk_index, result.risk_justification)
        self._blank()
        self._citations(result.citations)
        self._blank()
        self._section("Grand Conclusion", result.conclusion)
        self._blank()
        self._line("  ", (f"{CLOSING_ARROW} {result.closing_line}", CLOSING_STYLE))
        self._blank()

    def render_warning(self, message: str) -> None:
        """Two-line caution notice shown before falling back to the local engine."""
        self._line((f"{WARNING_GLYPH}  Warning: {message}", WARNING_STYLE))
        self._line(FALLBACK_NOTICE)
        self._blank()

    def render_external_header(self, model_name: str) -> None:
        """Attribution header for records produced by an external model."""
        self._blank()
        self._line("  ", (f"[ Thinker: {model_name} ]", TITLE_STYLE))
        self._line((render_divider(self._external_divider_width), MUTED_STYLE))

    def render_external(self, model_name: str, result: AnalysisResult) -> None:
        self.render_external_header(model_name)
        self.render(result)

    def format(self, result: AnalysisResult) -> str:
        """Render *result* into a string instead of the console's file."""
        with self._console.capture() as capture:
            self.render(result)
        return capture.get()

    @property
    def content_type(self) -> str:
        return "text/plain"

    # ── Sections ─────────────────────────────────────────────────────

    def _section(self, heading: str, body: str) -> None:
        self._heading(heading)
        self._line("  ", body)

    def _probabilities(self, probabilities: Sequence[Probability]) -> None:
        self._heading("Probability Analysis")
        self._blank()
        for p in probabilities:
            self._line("  ", (f"{p.percentage:5.1f}", ACCENT_STYLE), "%  ", (p.label, MUTED_STYLE))
        self._blank()
        self._line("  ", ("Visual Breakdown:", MUTED_STYLE))
        self._blank()
        for p in probabilities:
            self._line(
                "  ",
                (f"{p.percentage:5.1f}%", ACCENT_STYLE),
                "  ",
                render_bar(p.percentage, 100, self._chart_width, ACCENT_STYLE),
                "  ",
                (p.label, MUTED_STYLE),
            )

    def _risk(self, score: int, justification: Optional[str]) -> None:
        color = risk_style(score)
        self._line(
            ("Emotional Risk Index: ", "bold"),
            (str(score), f"bold {color}"),
            ("/100", "bold"),
        )
        self._line(render_bar(score, 100, self._chart_width, color))
        if justification:
            self._line("  ", (justification, JUSTIFICATION_STYLE))

    def _citations(self, citations: Sequence[Citation]) -> None:
        self._heading("Academic Citations")
        for c in citations:
            self._line("  ", (f"[{c.index}]", CITATION_INDEX_STYLE), "  ", c.source)

    # ── Primitives ───────────────────────────────────────────────────

    def _heading(self, heading: str) -> None:
        self._line((f"{heading}:", HEADING_STYLE))

    def _line(self, *parts: str | tuple[str, str] | Text) -> None:
        self._console.print(Text.assemble(*parts))

    def _blank(self) -> None:
        self._console.print()
