"""Output formatter protocol — the contract all formatters implement."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from overthink.models import AnalysisResult


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for analysis formatters (terminal, JSON)."""

    def format(self, result: AnalysisResult) -> str:
        """Render *result* into a string."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type of the rendered output."""
        ...


__all__ = ["IOutputFormatter"]
