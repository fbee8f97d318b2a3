"""Unit tests for structlog configuration and the error-flattening processor."""

from __future__ import annotations

import dataclasses
import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_datagen.kernel.errors import FieldInjectionError
from mp_datagen.observability.logging import (
    configure_logging,
    flatten_datagen_error,
    get_logger,
)


@dataclasses.dataclass
class Owner:
    value: int = 0


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# flatten_datagen_error
# ---------------------------------------------------------------------------


class TestFlattenDatagenError:
    def test_expands_error_into_keys(self) -> None:
        error = FieldInjectionError(Owner, "value", "generator produced None")
        event = flatten_datagen_error(None, "warning", {"event": "field_skipped", "error": error})
        assert "error" not in event
        assert event["code"] == "field_injection_failed"
        assert event["owner"] == "Owner"
        assert event["field"] == "value"
        assert event["reason"] == "generator produced None"
        assert "generator produced None" in event["message"]

    def test_existing_keys_win(self) -> None:
        error = FieldInjectionError(Owner, "value", "reason")
        event = flatten_datagen_error(None, "warning", {"event": "e", "field": "kept", "error": error})
        assert event["field"] == "kept"

    def test_other_errors_untouched(self) -> None:
        error = RuntimeError("plain")
        event = flatten_datagen_error(None, "error", {"event": "e", "error": error})
        assert event["error"] is error


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("datagen.test", component="builder").warning("hello")
        assert logs == [{"event": "hello", "log_level": "warning", "component": "builder"}]

    def test_unbound_logger(self) -> None:
        with capture_logs() as logs:
            get_logger("datagen.test").info("plain")
        assert logs[0]["event"] == "plain"


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_json_output_flattens_errors(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, json=True, stream=stream)
        error = FieldInjectionError(Owner, "value", "generator produced None")
        get_logger("datagen.json").warning("field_skipped", error=error)

        line = stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "field_skipped"
        assert payload["level"] == "warning"
        assert payload["logger"] == "datagen.json"
        assert payload["code"] == "field_injection_failed"
        assert payload["field"] == "value"
        assert "timestamp" in payload

    def test_console_output(self) -> None:
        stream = io.StringIO()
        configure_logging(json=False, stream=stream)
        get_logger("datagen.console").error("instantiation_failed", target="Owner")
        err = stream.getvalue()
        assert "instantiation_failed" in err
        assert "target=Owner" in err

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.WARNING, json=True, stream=stream)
        get_logger("datagen.level").info("too_quiet")
        assert "too_quiet" not in stream.getvalue()

    def test_replaces_root_handlers(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1
