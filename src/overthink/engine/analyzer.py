"""Assemble one complete analysis record from a question."""

from __future__ import annotations

import logging
import random
from typing import Optional

from overthink.engine.citations import generate_citations
from overthink.engine.narrative import pick_closing_line, pick_conclusion, pick_summary
from overthink.engine.probability import generate_probabilities
from overthink.engine.randomness import new_source
from overthink.engine.risk import calculate_risk_index
from overthink.engine.title import generate_title
from overthink.models import AnalysisResult

log = logging.getLogger(__name__)


def analyze(question: str, rng: Optional[random.Random] = None) -> AnalysisResult:
    """Run the procedural generator over *question*.

    All randomness is drawn from *rng* (a fresh clock-seeded source when
    omitted).  ``EmptyPoolError`` propagates: it means a pool is misconfigured.
    """
    if rng is None:
        rng = new_source()

    result = AnalysisResult(
        title=generate_title(question, rng),
        summary=pick_summary(rng),
        probabilities=generate_probabilities(rng),
        risk_index=calculate_risk_index(question, rng),
        citations=generate_citations(rng),
        conclusion=pick_conclusion(rng),
        closing_line=pick_closing_line(rng),
    )
    log.debug(
        "Local analysis assembled",
        extra={
            "probabilities": len(result.probabilities),
            "citations": len(result.citations),
            "risk_index": result.risk_index,
        },
    )
    return result
