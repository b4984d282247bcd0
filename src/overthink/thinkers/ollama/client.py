"""Async LLM client routed through LiteLLM.

Ollama is reached through LiteLLM's ``ollama_chat/`` provider, so switching to
an OpenAI-compatible server is a configuration change rather than a code path.
"""

from __future__ import annotations

import asyncio
import json
import logging
import random
import re
from typing import Any, Optional

from overthink.core.config import ThinkerConfig
from overthink.exceptions import NonRetryableError, RetryableError

log = logging.getLogger(__name__)

_PROVIDER_PREFIXES: dict[str, str] = {
    "ollama": "ollama_chat",
    "openai": "openai",
}


def qualified_model(provider: str, model: str) -> str:
    """LiteLLM model id for *model* served by *provider* (``llama3`` -> ``ollama_chat/llama3``)."""
    prefix = _PROVIDER_PREFIXES.get(provider)
    if prefix is None or model.startswith(f"{prefix}/"):
        return model
    return f"{prefix}/{model}"


class LLMClient:
    """Async LLM client using LiteLLM with bounded retries."""

    def __init__(self, config: ThinkerConfig, model: Optional[str] = None) -> None:
        model_name = model or config.model
        if not model_name:
            raise ValueError("LLMClient requires a model name")
        self._config = config
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def model(self) -> str:
        return qualified_model(self._config.provider, self._model_name)

    @staticmethod
    def _is_retryable(exc: Exception) -> bool:
        """Classify whether an LLM API error should be retried.

        Non-retryable: AuthenticationError, BadRequestError, NotFoundError (4xx non-429).
        Retryable (default): everything else including rate limits, timeouts, 5xx.
        """
        from litellm.exceptions import AuthenticationError, BadRequestError, NotFoundError

        return not isinstance(exc, (AuthenticationError, BadRequestError, NotFoundError))

    def _request_kwargs(
        self,
        messages: list[dict[str, Any]],
        *,
        json_mode: bool,
        temperature: Optional[float],
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature if temperature is not None else self._config.temperature,
            "timeout": self._config.timeout,
            "api_base": self._config.base_url,
        }
        if self._config.api_key not in ("", "no-key"):
            kwargs["api_key"] = self._config.api_key
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        return kwargs

    async def complete(
        self,
        prompt: str,
        *,
        system_prompt: Optional[str] = None,
        json_mode: bool = False,
        temperature: Optional[float] = None,
    ) -> str:
        """Single completion, returns the content string.

        Args:
            prompt: User message content.
            system_prompt: Optional system message.
            json_mode: Ask the provider to constrain output to a JSON object.
            temperature: Override the configured temperature.
        """
        import litellm
        from litellm import acompletion

        # litellm prints a help banner to stdout on provider errors
        litellm.suppress_debug_info = True

        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        kwargs = self._request_kwargs(messages, json_mode=json_mode, temperature=temperature)
        max_retries = self._config.max_retries

        last_error: Optional[Exception] = None
        for attempt in range(max_retries):
            try:
                response = await acompletion(**kwargs)
                return response.choices[0].message.content or ""

            except Exception as e:
                last_error = e
                if not self._is_retryable(e):
                    raise NonRetryableError(f"model {self._model_name!r} rejected the request: {e}") from e

                base_wait = min(2 ** attempt, self._config.retry_max_delay)
                wait = base_wait + random.uniform(0, base_wait * self._config.retry_jitter_factor)

                log.warning(
                    "LLM retry %d/%d: %s (wait=%.1fs)",
                    attempt + 1, max_retries, e, wait,
                )
                if attempt < max_retries - 1:
                    await asyncio.sleep(wait)

        raise RetryableError(
            f"model {self._model_name!r} is unreachable after {max_retries} attempt(s): {last_error}"
        ) from last_error

    # ── JSON extraction (static) ─────────────────────────────────────

    @staticmethod
    def extract_json(content: str) -> Any:
        """Parse JSON from an LLM response, handling fences, prose and trailing commas.

        Returns ``None`` when nothing parseable is found.
        """

        def _try_parse(s: str) -> Any | None:
            s = s.strip()
            if not s:
                return None
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                pass
            # Trailing comma fix
            s = re.sub(r",\s*([}\]])", r"\1", s)
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None

        # Strategy 1: fenced block, with or without a language tag
        fence = re.search(r"```(?:json)?\s*(.*?)```", content, re.DOTALL)
        if fence:
            result = _try_parse(fence.group(1))
            if result is not None:
                return result

        # Strategy 2: full content as JSON
        result = _try_parse(content)
        if result is not None:
            return result

        # Strategy 3: first balanced { ... } in the response
        idx = content.find("{")
        if idx != -1:
            depth = 0
            in_string = False
            escape = False
            for i in range(idx, len(content)):
                ch = content[i]
                if escape:
                    escape = False
                    continue
                if ch == "\\":
                    escape = True
                    continue
                if ch == '"':
                    in_string = not in_string
                    continue
                if in_string:
                    continue
                if ch == "{":
                    depth += 1
                elif ch == "}":
                    depth -= 1
                    if depth == 0:
                        return _try_parse(content[idx : i + 1])

        log.debug(
            "Failed to parse JSON from LLM response",
            extra={"response_length": len(content), "response_preview": content[:200]},
        )
        return None
