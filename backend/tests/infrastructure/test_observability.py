"""Structured Logging — JSON formatter surfaces extra fields when present."""

import json
import logging

from predictor_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "predictor_api.test", logging.ERROR, __file__, 1, "boom", None, None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "ERROR"
    assert out["logger"] == "predictor_api.test"
    assert out["message"] == "boom"
    assert "timestamp" in out


def test_json_formatter_surfaces_extra_fields():
    out = json.loads(JSONFormatter().format(
        _record(error_code="PERSISTENCE_ERROR", path="/predictors"),
    ))
    assert out["error_code"] == "PERSISTENCE_ERROR"
    assert out["path"] == "/predictors"
    assert "predictor_id" not in out


def test_setup_logging_installs_single_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        first = setup_logging("DEBUG", "text")
        second = setup_logging("INFO", "json")

        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.INFO
        assert logging.getLogger("pymongo").level == logging.WARNING
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
