"""Structured logging — JSON formatter fields and handler setup."""

import json
import logging

from todo_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "todo_api.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "todo_api.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(todo_id="abc", error_code="INVALID_ID", unrelated="x"),
    ))
    assert out["todo_id"] == "abc"
    assert out["error_code"] == "INVALID_ID"
    assert "unrelated" not in out


def _todo_api_handlers() -> list[logging.Handler]:
    return [h for h in logging.root.handlers if h.get_name() == "todo_api"]


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first not in logging.root.handlers
    assert _todo_api_handlers() == [second]
    assert logging.root.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)


def test_setup_logging_twice_keeps_handler_count():
    setup_logging("INFO", "text")
    before = len(logging.root.handlers)
    setup_logging("INFO", "json")
    assert len(logging.root.handlers) == before
    assert isinstance(_todo_api_handlers()[0].formatter, JSONFormatter)
