"""Emotional Risk Index scoring."""

from __future__ import annotations

import random

from overthink.engine.pools import RISK_BASE_MIN, RISK_BASE_SPAN, RISK_KEYWORDS, RISK_MAX
from overthink.engine.text import tokenize


def keyword_hits(question: str) -> dict[str, int]:
    """Distinct risk keywords present in *question*, mapped to their increments."""
    hits: dict[str, int] = {}
    for token in tokenize(question):
        if token in RISK_KEYWORDS and token not in hits:
            hits[token] = RISK_KEYWORDS[token]
    return hits


def calculate_risk_index(question: str, rng: random.Random) -> int:
    """Random baseline plus one increment per distinct keyword, capped at 100."""
    base = RISK_BASE_MIN + rng.randrange(RISK_BASE_SPAN)
    accumulated = sum(keyword_hits(question).values())
    return min(RISK_MAX, base + accumulated)
