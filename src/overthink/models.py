"""Pydantic data models for overthink.

``AnalysisResult`` is the single aggregate handed to every formatter.  All of
its invariants are checked on construction, so a record that reaches a
renderer is always complete and internally consistent.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_PROBABILITIES = 3
MAX_PROBABILITIES = 5
MIN_CITATIONS = 2
MAX_CITATIONS = 4


class Probability(BaseModel):
    """One fabricated outcome and its suspiciously precise percentage."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    percentage: float = Field(ge=0.0, le=100.0)


class Citation(BaseModel):
    """A fabricated academic reference."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    source: str = Field(min_length=1)


class AnalysisResult(BaseModel):
    """The complete output of one analysis pass."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    summary: str = Field(min_length=1)
    probabilities: tuple[Probability, ...]
    risk_index: int = Field(ge=0, le=100)
    citations: tuple[Citation, ...]
    conclusion: str = Field(min_length=1)
    closing_line: str = Field(min_length=1)
    risk_justification: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _title_is_upper(cls, value: str) -> str:
        if value != value.upper():
            raise ValueError("title must be upper-case")
        return value

    @field_validator("probabilities")
    @classmethod
    def _check_probabilities(cls, value: tuple[Probability, ...]) -> tuple[Probability, ...]:
        if not MIN_PROBABILITIES <= len(value) <= MAX_PROBABILITIES:
            raise ValueError(
                f"expected {MIN_PROBABILITIES}-{MAX_PROBABILITIES} probabilities, got {len(value)}"
            )
        labels = [p.label for p in value]
        if len(set(labels)) != len(labels):
            raise ValueError("probability labels must be unique")
        total = round(sum(p.percentage for p in value), 1)
        if total != 100.0:
            raise ValueError(f"probabilities must sum to 100.0, got {total}")
        return value

    @field_validator("citations")
    @classmethod
    def _check_citations(cls, value: tuple[Citation, ...]) -> tuple[Citation, ...]:
        if not MIN_CITATIONS <= len(value) <= MAX_CITATIONS:
            raise ValueError(
                f"expected {MIN_CITATIONS}-{MAX_CITATIONS} citations, got {len(value)}"
            )
        if [c.index for c in value] != list(range(1, len(value) + 1)):
            raise ValueError("citation indexes must be 1-based and contiguous")
        sources = [c.source for c in value]
        if len(set(sources)) != len(sources):
            raise ValueError("citation sources must be unique")
        return value

    @field_validator("risk_justification")
    @classmethod
    def _blank_justification_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value
