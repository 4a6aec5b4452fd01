"""Structured Logging — JSONFormatter output shape and repeated setup."""

import json
import logging

from campushub.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "campushub.test", logging.INFO, __file__, 1, "Signed in", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "campushub.test"
    assert log["message"] == "Signed in"
    assert "timestamp" in log


def test_known_extras_surfaced_unknown_dropped():
    log = json.loads(JSONFormatter().format(
        _record(user_id="u1", storage_key="slot", secret="x"),
    ))
    assert log["user_id"] == "u1"
    assert log["storage_key"] == "slot"
    assert "secret" not in log


def test_setup_logging_twice_keeps_one_handler():
    before_handlers = list(logging.root.handlers)
    before_level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("INFO", "text")
        ours = [h for h in logging.root.handlers if getattr(h, "_campushub_handler", False)]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before_handlers:
                logging.root.removeHandler(handler)
        logging.root.setLevel(before_level)
