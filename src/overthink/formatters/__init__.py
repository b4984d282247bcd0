"""Output formatters for rendering an AnalysisResult.

Usage::

    from overthink.formatters import JSONFormatter, TerminalRenderer

    TerminalRenderer().render(result)
    payload = JSONFormatter().format(result)
"""

from __future__ import annotations

from overthink.formatters.charts import render_bar, render_divider
from overthink.formatters.json_formatter import JSONFormatter
from overthink.formatters.protocols import IOutputFormatter
from overthink.formatters.terminal import TerminalRenderer

__all__ = [
    "IOutputFormatter",
    "JSONFormatter",
    "TerminalRenderer",
    "render_bar",
    "render_divider",
]
