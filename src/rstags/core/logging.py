"""structlog setup for the rstags CLI.

structlog events are rendered by stdlib ``logging`` handlers, one per
configured output, so each output keeps its own level and renderer.
Console outputs go quiet while a progress bar owns the terminal.

Usage::

    log_file = configure_logging(config=config.logging)
    set_run_id()
    structlog.get_logger(__name__).info("tag_run_start", files=12)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from rstags.config.models import LoggingConfig, LogOutputConfig

_CONSOLE_DESTINATIONS = ("stderr", "stdout")


class ConsoleSuppressingFilter(logging.Filter):
    """Drop console records while a Rich progress bar is live."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        from rstags.core.progress import is_console_suppressed

        return not is_console_suppressed()


def set_run_id(run_id: str | None = None) -> str:
    """Bind a run id to every event logged from this context."""
    rid = run_id or uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(run_id=rid)
    return rid


def configure_logging(*, config: LoggingConfig | None = None, level: str = "INFO") -> Path | None:
    """Install structlog and one root handler per output.

    Without ``config`` a single console output on stderr at ``level`` is
    used. Returns the first file destination, or ``None`` when every
    output is a console stream.
    """
    from rstags.config.models import LoggingConfig

    if config is None:
        config = LoggingConfig(level=level)  # type: ignore[arg-type]

    levels = logging.getLevelNamesMapping()
    root_level = levels[config.level]
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers bound at import time must see later reconfiguration
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)

    log_file: Path | None = None
    for output in config.outputs:
        handler = _make_handler(output)
        handler.setLevel(levels[output.level or config.level])
        handler.setFormatter(_make_formatter(output, shared))
        root.addHandler(handler)
        if log_file is None and output.destination not in _CONSOLE_DESTINATIONS:
            log_file = Path(output.destination)
    return log_file


def _make_handler(output: LogOutputConfig) -> logging.Handler:
    if output.destination not in _CONSOLE_DESTINATIONS:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, mode="a", encoding="utf-8")

    stream = sys.stderr if output.destination == "stderr" else sys.stdout
    handler = logging.StreamHandler(stream)
    handler.addFilter(ConsoleSuppressingFilter())
    return handler


def _make_formatter(
    output: LogOutputConfig, shared: list[structlog.types.Processor]
) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=output.destination == "stderr" and sys.stderr.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
