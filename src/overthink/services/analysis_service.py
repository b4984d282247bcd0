"""Analysis service: backend selection and fallback orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from overthink.exceptions import ThinkerError
from overthink.formatters.terminal import TerminalRenderer
from overthink.models import AnalysisResult
from overthink.thinkers.local import LocalThinker
from overthink.thinkers.protocols import IThinker

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisOutcome:
    """A rendered-ready record plus where it came from."""

    result: AnalysisResult
    thinker_name: str
    external: bool
    error: Optional[ThinkerError] = None

    @property
    def fell_back(self) -> bool:
        return self.error is not None


class AnalysisService:
    """Ask the external thinker first (when configured), the local engine otherwise.

    Only ``ThinkerError`` triggers the fallback; configuration defects such as
    ``EmptyPoolError`` propagate.
    """

    def __init__(
        self,
        thinker: Optional[IThinker] = None,
        *,
        fallback: Optional[IThinker] = None,
    ) -> None:
        self._thinker = thinker
        self._fallback = fallback or LocalThinker()

    async def analyze(self, question: str) -> AnalysisOutcome:
        if self._thinker is not None:
            try:
                result = await self._thinker.analyze(question)
            except ThinkerError as e:
                log.warning(
                    "External thinker failed, falling back to local engine",
                    extra={"thinker": self._thinker.name, "error": str(e)},
                )
                local = await self._fallback.analyze(question)
                return AnalysisOutcome(local, self._fallback.name, external=False, error=e)
            return AnalysisOutcome(result, self._thinker.name, external=True)

        result = await self._fallback.analyze(question)
        return AnalysisOutcome(result, self._fallback.name, external=False)


def render_outcome(renderer: TerminalRenderer, outcome: AnalysisOutcome) -> None:
    """Warning (if the external path failed), then the record with its header."""
    if outcome.error is not None:
        renderer.render_warning(str(outcome.error))
    if outcome.external:
        renderer.render_external(outcome.thinker_name, outcome.result)
    else:
        renderer.render(outcome.result)
