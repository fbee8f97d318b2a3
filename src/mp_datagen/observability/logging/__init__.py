"""Observability – structured logging helpers."""
from mp_datagen.observability.logging.factory import configure_logging
from mp_datagen.observability.logging.processors import flatten_datagen_error, get_logger

__all__ = ["configure_logging", "flatten_datagen_error", "get_logger"]
