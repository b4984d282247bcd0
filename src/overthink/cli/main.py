"""CLI for overthink: a dramatic overanalysis engine."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from overthink.core.config import AppSettings, ObservabilityConfig
from overthink.core.logging_config import setup_logging
from overthink.core.startup_checks import validate_settings
from overthink.formatters.json_formatter import JSONFormatter
from overthink.formatters.terminal import TerminalRenderer
from overthink.services.analysis_service import AnalysisService, render_outcome
from overthink.thinkers.ollama.client import LLMClient
from overthink.thinkers.ollama.thinker import OllamaThinker

log = logging.getLogger(__name__)

USAGE = """overthink -- a dramatic overanalysis engine

Usage:
  overthink [flags] "<your question>"

Flags:
  --thinker <model>   Use a local Ollama model (e.g. llama3, mistral)
                      Falls back to built-in engine if Ollama is unavailable.
  --json              Print the analysis as JSON.
  -v, --verbose       Debug logging on stderr.

Examples:
  overthink "Should I text my ex?"
  overthink "Is it too late to start coding?"
  overthink --thinker llama3 "Should I quit my job?"

If no question is provided, this message is printed and the program exits.
"""

app = typer.Typer(name="overthink", help="A dramatic overanalysis engine", add_completion=False)
err_console = Console(stderr=True, highlight=False, markup=False, emoji=False)


def _build_service(settings: AppSettings, renderer: TerminalRenderer) -> AnalysisService:
    """Local-only service unless a thinker model is configured and valid."""
    if not settings.thinker.model:
        return AnalysisService()

    try:
        validate_settings(settings)
    except ValueError as e:
        log.warning("Thinker configuration rejected", extra={"error": str(e)})
        renderer.render_warning(str(e))
        return AnalysisService()

    client = LLMClient(settings.thinker)
    return AnalysisService(OllamaThinker(client, timeout=settings.thinker.timeout))


# Flags come first; from the first question word on, dash-prefixed words
# such as "-5" belong to the question.
@app.command(context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True})
def main(
    question: Optional[list[str]] = typer.Argument(None, help="The question to overthink"),
    thinker: Optional[str] = typer.Option(
        None, "--thinker", help="Ollama model name to use for analysis"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Overanalyze QUESTION with fake statistics and fabricated citations."""
    text = " ".join(question or []).strip()
    if not text:
        err_console.print(USAGE, end="")
        raise typer.Exit(code=1)

    settings = AppSettings()
    if thinker:
        settings.thinker = settings.thinker.model_copy(update={"model": thinker})

    level = "DEBUG" if verbose else settings.observability.log_level
    setup_logging(ObservabilityConfig(log_level=level), machine_readable=as_json)

    renderer = TerminalRenderer.from_config(settings.render)
    service = _build_service(settings, renderer)
    outcome = asyncio.run(service.analyze(text))

    if as_json:
        if outcome.error is not None:
            err_console.print(f"Warning: {outcome.error}")
        typer.echo(JSONFormatter().format(outcome.result))
        return

    render_outcome(renderer, outcome)


if __name__ == "__main__":
    app()
