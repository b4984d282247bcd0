"""Tests for the external-model response adapter."""

from __future__ import annotations

import pytest

from overthink.exceptions import ResponseValidationError
from overthink.thinkers.ollama.response import ThinkerResponse


def _payload(**overrides):
    data = {
        "title": "The Unresolved Narrative Arc of Coffee",
        "summary": "Alarming.",
        "probabilities": [
            {"label": "chance of regret", "percentage": 40},
            {"label": "chance of joy", "percentage": 35},
            {"label": "chance of jitters", "percentage": 25},
        ],
        "risk_index": 64,
        "risk_justification": "Caffeine is a gateway decision.",
        "citations": [
            {"source": "Journal of Bean Studies (2020)"},
            {"source": "Annals of Espresso (2014)"},
        ],
        "conclusion": "Drink it.",
        "closing_remark": "You were always going to.",
    }
    data.update(overrides)
    return data


def _convert(**overrides):
    return ThinkerResponse.from_payload(_payload(**overrides)).to_analysis_result()


class TestToAnalysisResult:
    def test_maps_fields(self):
        result = _convert()
        assert result.title == "THE UNRESOLVED NARRATIVE ARC OF COFFEE"
        assert result.closing_line == "You were always going to."
        assert result.risk_justification == "Caffeine is a gateway decision."
        assert [c.index for c in result.citations] == [1, 2]
        assert [p.percentage for p in result.probabilities] == [40.0, 35.0, 25.0]

    def test_renormalizes_probabilities(self):
        probs = [
            {"label": "a", "percentage": 50},
            {"label": "b", "percentage": 50},
            {"label": "c", "percentage": 50},
        ]
        result = _convert(probabilities=probs)
        assert [p.percentage for p in result.probabilities] == [33.3, 33.3, 33.4]

    def test_all_zero_percentages_split_evenly(self):
        probs = [{"label": x, "percentage": 0} for x in "abcd"]
        result = _convert(probabilities=probs)
        assert [p.percentage for p in result.probabilities] == [25.0, 25.0, 25.0, 25.0]

    def test_negative_percentages_treated_as_zero(self):
        probs = [{"label": "a", "percentage": -10}, {"label": "b", "percentage": 60}, {"label": "c", "percentage": 40}]
        result = _convert(probabilities=probs)
        assert [p.percentage for p in result.probabilities] == [0.0, 60.0, 40.0]

    @pytest.mark.parametrize("last", [0, -5])
    def test_zero_weight_last_entry_does_not_go_negative(self, last):
        probs = [
            {"label": "a", "percentage": 33.36},
            {"label": "b", "percentage": 33.36},
            {"label": "c", "percentage": 33.28},
            {"label": "d", "percentage": last},
        ]
        result = _convert(probabilities=probs)
        assert [p.percentage for p in result.probabilities] == [33.3, 33.4, 33.3, 0.0]

    def test_duplicate_labels_dropped_and_capped_at_five(self):
        probs = [{"label": f"l{i % 7}", "percentage": 10} for i in range(10)]
        result = _convert(probabilities=probs)
        assert [p.label for p in result.probabilities] == ["l0", "l1", "l2", "l3", "l4"]
        assert f"{sum(p.percentage for p in result.probabilities):.1f}" == "100.0"

    @pytest.mark.parametrize(("raw", "expected"), [(-5, 0), (250, 100), (41.6, 42)])
    def test_risk_index_clamped(self, raw, expected):
        assert _convert(risk_index=raw).risk_index == expected

    def test_citations_deduplicated_and_reindexed(self):
        cites = [{"source": "A"}, {"source": "A"}, {"source": " "}, {"source": "B"}, {"source": "C"}, {"source": "D"}, {"source": "E"}]
        result = _convert(citations=cites)
        assert [(c.index, c.source) for c in result.citations] == [(1, "A"), (2, "B"), (3, "C"), (4, "D")]

    def test_bare_string_citations_accepted(self):
        result = _convert(citations=["One (2001)", "Two (2002)"])
        assert [c.source for c in result.citations] == ["One (2001)", "Two (2002)"]

    def test_blank_justification_is_none(self):
        assert _convert(risk_justification="").risk_justification is None

    def test_extra_fields_ignored(self):
        assert _convert(mood="dramatic").title.startswith("THE")


class TestInvalidResponses:
    def test_non_object_payload(self):
        with pytest.raises(ResponseValidationError, match="JSON object"):
            ThinkerResponse.from_payload(["not", "an", "object"])

    def test_missing_field(self):
        payload = _payload()
        del payload["summary"]
        with pytest.raises(ResponseValidationError):
            ThinkerResponse.from_payload(payload)

    def test_too_few_probabilities(self):
        probs = [{"label": "a", "percentage": 50}, {"label": "a", "percentage": 50}, {"label": "b", "percentage": 0}]
        with pytest.raises(ResponseValidationError, match="probabilities"):
            _convert(probabilities=probs)

    def test_single_citation(self):
        with pytest.raises(ResponseValidationError, match="citations"):
            _convert(citations=[{"source": "Only (2000)"}])

    def test_empty_title(self):
        with pytest.raises(ResponseValidationError, match="title"):
            _convert(title="   ")

    def test_nan_risk_rejected(self):
        with pytest.raises(ResponseValidationError):
            ThinkerResponse.from_payload(_payload(risk_index=float("nan")))
