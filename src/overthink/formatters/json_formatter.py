"""JSON output formatter — machine-readable companion to the terminal layout."""

from __future__ import annotations

from overthink.models import AnalysisResult


class JSONFormatter:
    """Renders an AnalysisResult as indented JSON."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def format(self, result: AnalysisResult) -> str:
        return result.model_dump_json(indent=self._indent)

    @property
    def content_type(self) -> str:
        return "application/json"
