"""Shared fixtures for overthink tests."""

from __future__ import annotations

import io
import random

import pytest

from overthink.formatters.terminal import TerminalRenderer, make_console
from overthink.models import AnalysisResult, Citation, Probability


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def sample_result() -> AnalysisResult:
    """Hand-built record with every optional field populated."""
    return AnalysisResult(
        title="THE INEVITABLE DECISION VORTEX OF TEXT",
        summary="The cognitive simulation completed successfully.",
        probabilities=[
            Probability(label="chance of immediate regret", percentage=42.5),
            Probability(label="chance of consulting a horoscope", percentage=30.0),
            Probability(label="chance of blaming Mercury retrograde", percentage=27.5),
        ],
        risk_index=72,
        risk_justification="Texting an ex is a documented hazard.",
        citations=[
            Citation(index=1, source="Journal of Existential Hesitation et al. (2019)"),
            Citation(index=2, source="Archives of Temporal Panic & Associates (2011)"),
        ],
        conclusion="The analysis is complete.",
        closing_line="You already know what you're going to do.",
    )


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def renderer(buffer: io.StringIO) -> TerminalRenderer:
    """Renderer writing plain (non-terminal) text into ``buffer``."""
    return TerminalRenderer(make_console(buffer, force_terminal=False))
