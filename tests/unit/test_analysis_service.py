"""Tests for backend selection and fallback orchestration."""

from __future__ import annotations

import random

import pytest

from overthink.exceptions import EmptyPoolError, JSONParseError, RetryableError
from overthink.formatters.terminal import FALLBACK_NOTICE
from overthink.services.analysis_service import AnalysisService, render_outcome
from overthink.thinkers.local import LocalThinker
from tests.fakes.fake_thinker import FakeThinker


def _local() -> LocalThinker:
    return LocalThinker(rng_factory=lambda: random.Random(21))


class TestAnalysisService:
    @pytest.mark.asyncio
    async def test_local_only(self):
        outcome = await AnalysisService(fallback=_local()).analyze("Should I text my ex?")
        assert not outcome.external
        assert not outcome.fell_back
        assert outcome.thinker_name == "built-in"

    @pytest.mark.asyncio
    async def test_external_success(self, sample_result):
        thinker = FakeThinker(result=sample_result, name="llama3")
        outcome = await AnalysisService(thinker, fallback=_local()).analyze("q")

        assert outcome.external
        assert outcome.result == sample_result
        assert outcome.thinker_name == "llama3"
        assert thinker.calls == ["q"]

    @pytest.mark.asyncio
    async def test_external_failure_falls_back(self):
        error = RetryableError("ollama is not running")
        outcome = await AnalysisService(FakeThinker(error=error), fallback=_local()).analyze("q")

        assert outcome.fell_back
        assert outcome.error is error
        assert not outcome.external
        assert 3 <= len(outcome.result.probabilities) <= 5

    @pytest.mark.asyncio
    async def test_configuration_errors_propagate(self):
        service = AnalysisService(FakeThinker(error=EmptyPoolError("empty")), fallback=_local())
        with pytest.raises(EmptyPoolError):
            await service.analyze("q")

    @pytest.mark.asyncio
    async def test_programming_errors_propagate(self):
        service = AnalysisService(FakeThinker(error=KeyError("boom")), fallback=_local())
        with pytest.raises(KeyError):
            await service.analyze("q")


class TestRenderOutcome:
    @pytest.mark.asyncio
    async def test_fallback_renders_warning_then_full_body(self, renderer, buffer):
        service = AnalysisService(
            FakeThinker(error=JSONParseError("model 'llama3' produced empty output")),
            fallback=_local(),
        )
        outcome = await service.analyze("Should I quit my job?")
        render_outcome(renderer, outcome)

        out = buffer.getvalue()
        assert out.startswith("⚠  Warning: model 'llama3' produced empty output\n")
        assert FALLBACK_NOTICE in out
        assert "[ Thinker:" not in out
        positions = [
            out.index(FALLBACK_NOTICE),
            out.index(outcome.result.title),
            out.index("Probability Analysis:"),
            out.index("Academic Citations:"),
            out.index(f"--> {outcome.result.closing_line}"),
        ]
        assert positions == sorted(positions)

    @pytest.mark.asyncio
    async def test_external_renders_header(self, renderer, buffer, sample_result):
        service = AnalysisService(FakeThinker(result=sample_result, name="mistral"))
        render_outcome(renderer, await service.analyze("q"))
        out = buffer.getvalue()
        assert "Warning" not in out
        assert out.index("[ Thinker: mistral ]") < out.index(sample_result.title)

    @pytest.mark.asyncio
    async def test_local_renders_plain_body(self, renderer, buffer):
        render_outcome(renderer, await AnalysisService(fallback=_local()).analyze("q"))
        out = buffer.getvalue()
        assert "[ Thinker:" not in out
        assert "Warning" not in out
        assert "Grand Conclusion:" in out
