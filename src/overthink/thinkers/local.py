"""Built-in procedural backend."""

from __future__ import annotations

import random
from collections.abc import Callable

from overthink.engine.analyzer import analyze
from overthink.engine.randomness import new_source
from overthink.models import AnalysisResult


class LocalThinker:
    """Wraps the procedural generator behind the thinker protocol. Never fails."""

    def __init__(self, rng_factory: Callable[[], random.Random] = new_source) -> None:
        self._rng_factory = rng_factory

    @property
    def name(self) -> str:
        return "built-in"

    async def analyze(self, question: str) -> AnalysisResult:
        return analyze(question, self._rng_factory())
