"""Adapter from the external model's JSON payload to ``AnalysisResult``.

The payload is untrusted: percentages are re-normalized with the same
assign-then-correct routine the local generator uses, duplicate labels and
sources are dropped, lists are capped and the risk index is clamped.  Whatever
still cannot form a valid record raises ``ResponseValidationError``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from overthink.engine.probability import distribute_percentages
from overthink.exceptions import ResponseValidationError
from overthink.models import (
    MAX_CITATIONS,
    MAX_PROBABILITIES,
    AnalysisResult,
    Citation,
    Probability,
)


class ProbabilityEntry(BaseModel):
    label: str
    percentage: float = Field(allow_inf_nan=False)


class CitationEntry(BaseModel):
    source: str


class ThinkerResponse(BaseModel):
    """The structured JSON object the model is asked to return."""

    model_config = ConfigDict(extra="ignore")

    title: str
    summary: str
    probabilities: list[ProbabilityEntry]
    risk_index: float = Field(allow_inf_nan=False)
    risk_justification: str = ""
    citations: list[CitationEntry]
    conclusion: str
    closing_remark: str

    @field_validator("citations", mode="before")
    @classmethod
    def _accept_bare_strings(cls, value: Any) -> Any:
        # Models regularly answer with ["Journal (2019)", ...] instead of objects
        if isinstance(value, list):
            return [{"source": item} if isinstance(item, str) else item for item in value]
        return value

    @classmethod
    def from_payload(cls, payload: Any) -> ThinkerResponse:
        if not isinstance(payload, dict):
            raise ResponseValidationError(
                f"expected a JSON object, got {type(payload).__name__}"
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise ResponseValidationError(
                f"response is missing or mistypes {e.error_count()} field(s)"
            ) from e

    def to_analysis_result(self) -> AnalysisResult:
        try:
            return AnalysisResult(
                title=self.title.strip().upper(),
                summary=self.summary.strip(),
                probabilities=self._normalized_probabilities(),
                risk_index=min(max(round(self.risk_index), 0), 100),
                risk_justification=self.risk_justification.strip() or None,
                citations=self._normalized_citations(),
                conclusion=self.conclusion.strip(),
                closing_line=self.closing_remark.strip(),
            )
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise ResponseValidationError(
                f"response does not form a valid analysis ({location}: {first['msg']})"
            ) from e

    def _normalized_probabilities(self) -> list[Probability]:
        entries: list[ProbabilityEntry] = []
        seen: set[str] = set()
        for entry in self.probabilities:
            label = entry.label.strip()
            if not label or label in seen:
                continue
            seen.add(label)
            entries.append(ProbabilityEntry(label=label, percentage=entry.percentage))
        entries = entries[:MAX_PROBABILITIES]

        weights = [max(entry.percentage, 0.0) for entry in entries]
        if entries and sum(weights) <= 0:
            weights = [1.0] * len(entries)

        return [
            Probability(label=entry.label, percentage=pct)
            for entry, pct in zip(entries, distribute_percentages(weights))
        ]

    def _normalized_citations(self) -> list[Citation]:
        sources: list[str] = []
        for entry in self.citations:
            source = entry.source.strip()
            if source and source not in sources:
                sources.append(source)
        return [
            Citation(index=index, source=source)
            for index, source in enumerate(sources[:MAX_CITATIONS], start=1)
        ]
