"""overthink: a dramatic overanalysis engine.

Usage::

    from overthink import analyze, TerminalRenderer

    TerminalRenderer().render(analyze("Should I text my ex?"))
"""

from __future__ import annotations

from overthink.core.config import AppSettings
from overthink.engine.analyzer import analyze
from overthink.exceptions import EmptyPoolError, OverthinkError, ThinkerError
from overthink.formatters.json_formatter import JSONFormatter
from overthink.formatters.terminal import TerminalRenderer
from overthink.models import AnalysisResult, Citation, Probability
from overthink.services.analysis_service import AnalysisOutcome, AnalysisService

__all__ = [
    "AppSettings",
    "analyze",
    "AnalysisResult",
    "Probability",
    "Citation",
    "TerminalRenderer",
    "JSONFormatter",
    "AnalysisService",
    "AnalysisOutcome",
    "OverthinkError",
    "EmptyPoolError",
    "ThinkerError",
]
