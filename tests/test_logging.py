"""Tests for the JSON logging configuration."""

import json
import logging

from eventdispatch.logging import JSONLogFormatter, configure_logging


def test_formatter_includes_extras():
    record = logging.LogRecord("eventdispatch.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.event_name = "evt"

    payload = json.loads(JSONLogFormatter().format(record))

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "eventdispatch.test"
    assert payload["event_name"] == "evt"
    assert "lineno" not in payload


def test_formatter_serializes_arbitrary_objects():
    record = logging.LogRecord("eventdispatch.test", logging.INFO, __file__, 1, "msg", None, None)
    record.payload = object()

    payload = json.loads(JSONLogFormatter().format(record))

    assert payload["payload"].startswith("<object object")


def test_configure_logging_uses_environment_level(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setenv("EVENTDISPATCH_LOG_LEVEL", "warning")
    try:
        configure_logging()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JSONLogFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
