"""Unit tests for data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from overthink.models import AnalysisResult, Citation, Probability


def _payload(**overrides):
    data = {
        "title": "THE CATASTROPHIC RISK TOPOLOGY OF THIS SITUATION",
        "summary": "Summary.",
        "probabilities": [
            {"label": "a", "percentage": 33.3},
            {"label": "b", "percentage": 33.3},
            {"label": "c", "percentage": 33.4},
        ],
        "risk_index": 50,
        "citations": [
            {"index": 1, "source": "One (2010)"},
            {"index": 2, "source": "Two (2011)"},
        ],
        "conclusion": "Conclusion.",
        "closing_line": "Closing.",
    }
    data.update(overrides)
    return data


class TestProbability:
    def test_bounds(self):
        with pytest.raises(ValidationError):
            Probability(label="x", percentage=100.1)
        with pytest.raises(ValidationError):
            Probability(label="x", percentage=-0.1)

    def test_label_required(self):
        with pytest.raises(ValidationError):
            Probability(label="", percentage=10.0)


class TestAnalysisResult:
    def test_valid_payload(self):
        result = AnalysisResult(**_payload())
        assert isinstance(result.probabilities, tuple)
        assert isinstance(result.citations[0], Citation)

    def test_frozen(self):
        result = AnalysisResult(**_payload())
        with pytest.raises(ValidationError):
            result.risk_index = 10  # type: ignore[misc]

    def test_title_must_be_upper(self):
        with pytest.raises(ValidationError, match="upper-case"):
            AnalysisResult(**_payload(title="Lower"))

    def test_probability_sum_enforced(self):
        probs = [{"label": "a", "percentage": 30}, {"label": "b", "percentage": 30}, {"label": "c", "percentage": 30}]
        with pytest.raises(ValidationError, match="sum to 100.0"):
            AnalysisResult(**_payload(probabilities=probs))

    def test_probability_count_enforced(self):
        probs = [{"label": "a", "percentage": 50}, {"label": "b", "percentage": 50}]
        with pytest.raises(ValidationError, match="3-5 probabilities"):
            AnalysisResult(**_payload(probabilities=probs))

    def test_probability_labels_unique(self):
        probs = [{"label": "a", "percentage": 50}, {"label": "a", "percentage": 25}, {"label": "b", "percentage": 25}]
        with pytest.raises(ValidationError, match="unique"):
            AnalysisResult(**_payload(probabilities=probs))

    def test_citation_indexes_contiguous(self):
        cites = [{"index": 1, "source": "A"}, {"index": 3, "source": "B"}]
        with pytest.raises(ValidationError, match="contiguous"):
            AnalysisResult(**_payload(citations=cites))

    def test_citation_sources_unique(self):
        cites = [{"index": 1, "source": "A"}, {"index": 2, "source": "A"}]
        with pytest.raises(ValidationError, match="unique"):
            AnalysisResult(**_payload(citations=cites))

    def test_citation_count_enforced(self):
        cites = [{"index": i, "source": f"S{i}"} for i in range(1, 6)]
        with pytest.raises(ValidationError, match="2-4 citations"):
            AnalysisResult(**_payload(citations=cites))

    @pytest.mark.parametrize("risk", [-1, 101])
    def test_risk_bounds(self, risk):
        with pytest.raises(ValidationError):
            AnalysisResult(**_payload(risk_index=risk))

    def test_blank_justification_becomes_none(self):
        assert AnalysisResult(**_payload(risk_justification="   ")).risk_justification is None

    def test_serialization_roundtrip(self):
        result = AnalysisResult(**_payload(risk_justification="Because."))
        assert AnalysisResult.model_validate_json(result.model_dump_json()) == result
