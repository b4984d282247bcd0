"""Thinker protocol — the analysis capability every backend implements."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from overthink.models import AnalysisResult


@runtime_checkable
class IThinker(Protocol):
    """Produces an analysis record for a question.

    External backends raise ``ThinkerError`` on any failure; callers decide
    whether to fall back.
    """

    @property
    def name(self) -> str:
        """Human-readable backend name used in attribution headers."""
        ...

    async def analyze(self, question: str) -> AnalysisResult:
        ...
