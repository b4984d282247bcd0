"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from overthink.core.config import AppSettings

log = logging.getLogger(__name__)

# Providers served locally that do not require an API key
_NO_KEY_PROVIDERS = frozenset({"ollama"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_timeout(settings)
    _check_base_url(settings)


def _check_api_key(settings: AppSettings) -> None:
    """Reject placeholder API keys for providers that need real ones."""
    if settings.thinker.provider not in _NO_KEY_PROVIDERS:
        if settings.thinker.api_key in ("no-key", ""):
            raise ValueError(
                f"OVERTHINK_THINKER_API_KEY is required for provider "
                f"'{settings.thinker.provider}'. Set it via environment variable."
            )


def _check_timeout(settings: AppSettings) -> None:
    if settings.thinker.timeout <= 0:
        raise ValueError(
            f"OVERTHINK_THINKER_TIMEOUT must be positive, got {settings.thinker.timeout}"
        )


def _check_base_url(settings: AppSettings) -> None:
    """Warn when the thinker endpoint is not plain http(s)."""
    if not settings.thinker.base_url.startswith(("http://", "https://")):
        log.warning(
            "OVERTHINK_THINKER_BASE_URL=%s does not look like an http(s) URL; "
            "external analysis will most likely fall back to the local engine.",
            settings.thinker.base_url,
        )
