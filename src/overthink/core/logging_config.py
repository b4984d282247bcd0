"""Structured logging configuration using structlog.

Every module logs through the stdlib ``logging`` API; the root handler renders
those records with structlog, including any ``extra=`` fields.  Output goes to
stderr only, so stdout carries nothing but the analysis (or the ``--json``
document).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO

import structlog

if TYPE_CHECKING:
    from overthink.core.config import ObservabilityConfig

# Third-party loggers that are only interesting when something goes wrong.
QUIET_LOGGERS = ("LiteLLM", "LiteLLM Router", "httpx", "httpcore")


def _build_formatter(json_lines: bool) -> structlog.stdlib.ProcessorFormatter:
    processors: list = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_lines:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=processors,
    )


def setup_logging(
    config: ObservabilityConfig,
    *,
    machine_readable: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Install a single structlog-rendering handler on the root logger.

    Args:
        config: Supplies the log level; unknown names mean WARNING.
        machine_readable: Emit JSON lines even when the stream is a terminal.
            The CLI sets this together with ``--json``.
        stream: Destination, defaulting to the current ``sys.stderr``.
    """
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    if stream is None:
        stream = sys.stderr
    json_lines = machine_readable or not stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(_build_formatter(json_lines))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("overthink").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
