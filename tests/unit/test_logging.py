"""Unit tests for structured logging."""

from __future__ import annotations

import io
import json
import logging
import sys

from seed_orchestrator.orchestrator.logging import JsonFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="seed_orchestrator.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Seeded %s",
        args=("roles",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_nests_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(task="roles", count=8)))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "seed_orchestrator.test"
    assert payload["message"] == "Seeded roles"
    assert payload["extra"] == {"task": "roles", "count": 8}
    assert "timestamp" in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]


def test_json_formatter_stringifies_unserialisable_values() -> None:
    payload = json.loads(JsonFormatter().format(_record(path=object)))

    assert payload["extra"]["path"] == str(object)


def test_configure_logging_writes_json_to_stream(restore_root_logger: None) -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    logging.getLogger("seed_orchestrator.test").debug("hello", extra={"task": "users"})

    line = stream.getvalue().strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["extra"]["task"] == "users"
    assert logging.getLogger("sqlalchemy").level == logging.WARNING
