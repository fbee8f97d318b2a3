"""Observability – configure_logging."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from mp_datagen.observability.logging.processors import flatten_datagen_error


def configure_logging(
    level: int = logging.WARNING,
    *,
    json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route structlog through the stdlib root logger.

    Generators only log soft failures (skipped fields, failed
    instantiations), so the default level is ``WARNING``.  Pass
    ``json=True`` for machine-readable output in CI.  Records go to
    *stream*, ``sys.stderr`` when omitted.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        flatten_datagen_error,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging"]
