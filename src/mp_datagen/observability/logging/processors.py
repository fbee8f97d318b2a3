"""Observability – get_logger helper and the generation-error processor."""
from __future__ import annotations

from typing import Any

import structlog

from mp_datagen.kernel.errors import BaseError


def flatten_datagen_error(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that expands an ``error=BaseError`` entry.

    The error's code, message and detail keys are merged into the event so
    soft failures render as flat key/value pairs::

        log.warning("field_skipped", error=FieldInjectionError(...))
        # -> field_skipped code=field_injection_failed owner=Person field=age ...
    """
    error = event_dict.get("error")
    if isinstance(error, BaseError):
        del event_dict["error"]
        for key, value in error.to_dict().items():
            event_dict.setdefault(key, value)
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["flatten_datagen_error", "get_logger"]
