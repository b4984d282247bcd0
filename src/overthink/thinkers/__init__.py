"""Analysis backends: the local generator and the Ollama-backed thinker."""

from __future__ import annotations

from overthink.thinkers.local import LocalThinker
from overthink.thinkers.ollama.thinker import OllamaThinker
from overthink.thinkers.protocols import IThinker

__all__ = ["IThinker", "LocalThinker", "OllamaThinker"]
