"""Ollama thinker: asks a local model for the analysis as structured JSON."""

from __future__ import annotations

import asyncio
import logging

from overthink.exceptions import JSONParseError, ThinkerTimeoutError
from overthink.models import AnalysisResult
from overthink.thinkers.ollama.client import LLMClient
from overthink.thinkers.ollama.prompts import build_system_prompt, build_user_prompt
from overthink.thinkers.ollama.response import ThinkerResponse

log = logging.getLogger(__name__)


class OllamaThinker:
    """External backend. Every failure surfaces as a ``ThinkerError``."""

    def __init__(self, client: LLMClient, *, timeout: float) -> None:
        self._client = client
        self._timeout = timeout

    @property
    def name(self) -> str:
        return self._client.model_name

    async def analyze(self, question: str) -> AnalysisResult:
        try:
            content = await asyncio.wait_for(
                self._client.complete(
                    build_user_prompt(question),
                    system_prompt=build_system_prompt(),
                    json_mode=True,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise ThinkerTimeoutError(
                f"model {self.name!r} timed out after {self._timeout:g}s"
            ) from e

        if not content.strip():
            raise JSONParseError(f"model {self.name!r} produced empty output")

        payload = self._client.extract_json(content)
        if payload is None:
            raise JSONParseError(
                f"model {self.name!r} did not return parseable JSON", raw_response=content
            )

        result = ThinkerResponse.from_payload(payload).to_analysis_result()
        log.debug("External analysis received", extra={"model": self.name})
        return result
