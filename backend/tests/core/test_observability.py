"""Structured Logging — tests for the JSON formatter and handler setup."""

import json
import logging

from mentorship.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("mentorship.test", logging.WARNING, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "WARNING"
    assert data["logger"] == "mentorship.test"
    assert data["message"] == "hello"
    assert "timestamp" in data


def test_json_formatter_surfaces_extra_fields():
    data = json.loads(JSONFormatter().format(
        _record(error_code="CONFLICT", path="/api/v1/mentees", entity_type="mentee"),
    ))
    assert data["error_code"] == "CONFLICT"
    assert data["path"] == "/api/v1/mentees"
    assert data["entity_type"] == "mentee"
    assert "resource_id" not in data


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    try:
        setup_logging("DEBUG", "text")
        setup_logging("DEBUG", "text")
        installed = [h for h in root.handlers if getattr(h, "_mentorship_handler", False)]
        assert len(installed) == 1
        assert root.level == logging.DEBUG
    finally:
        for handler in setup_logging("WARNING", "json"):
            root.removeHandler(handler)


def test_setup_logging_rotating_files(tmp_path):
    root = logging.getLogger()
    handlers = setup_logging("INFO", "json", log_dir=str(tmp_path), retention_days=3)
    try:
        assert len(handlers) == 3
        logging.getLogger("mentorship.test").error("disk full")
        for handler in handlers:
            handler.flush()
        assert "disk full" in (tmp_path / "application.log").read_text()
        assert "disk full" in (tmp_path / "error.log").read_text()
        assert handlers[2].level == logging.ERROR
        assert handlers[1].backupCount == 3
    finally:
        for handler in handlers:
            root.removeHandler(handler)
            handler.close()
