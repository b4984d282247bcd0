"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``OVERTHINK_<GROUP>_*`` env vars::

    export OVERTHINK_THINKER_MODEL=llama3
    export OVERTHINK_RENDER_CHART_WIDTH=50
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ThinkerConfig(BaseSettings):
    """External LLM backend configuration.

    Env vars use ``OVERTHINK_THINKER_`` prefix::

        export OVERTHINK_THINKER_PROVIDER=ollama
        export OVERTHINK_THINKER_BASE_URL=http://localhost:11434
    """

    model_config = {"env_prefix": "OVERTHINK_THINKER_"}

    provider: Literal["ollama", "openai", "litellm"] = "ollama"
    base_url: str = "http://localhost:11434"
    api_key: str = "no-key"
    model: Optional[str] = None
    temperature: float = 0.9
    timeout: float = 120.0
    max_retries: int = Field(default=1, ge=1)
    retry_jitter_factor: float = 0.5
    retry_max_delay: float = 30.0


class RenderConfig(BaseSettings):
    """Terminal rendering configuration.

    Env vars use ``OVERTHINK_RENDER_`` prefix.
    """

    model_config = {"env_prefix": "OVERTHINK_RENDER_"}

    chart_width: int = Field(default=40, ge=1, le=200)
    external_divider_width: int = Field(default=60, ge=1, le=200)
    force_terminal: Optional[bool] = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``OVERTHINK_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "OVERTHINK_OBSERVABILITY_"}

    log_level: str = "WARNING"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs.

    Sub-configs are built per instance so each one reads the environment at
    construction time.
    """

    thinker: ThinkerConfig = Field(default_factory=ThinkerConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
