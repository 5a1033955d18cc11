"""Structured Logging — JSON formatter, console and rotating-file setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, entity_type, resource_id) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: handlers it installed are replaced, never stacked

Design Decisions:
    - Optional log_dir adds two daily-rotated files: everything, and errors only
      (retention in days, matching the old winston transports)
    - setup_logging called once on startup via lifespan, and by scripts
"""

import json
import logging
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

_EXTRA_FIELDS = (
    "error_code", "path", "method", "status_code",
    "entity_type", "resource_id", "email",
)
_HANDLER_MARK = "_mentorship_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _rotating_handler(path: Path, retention_days: int) -> TimedRotatingFileHandler:
    handler = TimedRotatingFileHandler(
        path, when="midnight", backupCount=retention_days, encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    return handler


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    log_dir: str | None = None,
    retention_days: int = 14,
) -> list[logging.Handler]:
    """Configure root logging for the application. Returns installed handlers."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)
            existing.close()

    formatter = _build_formatter(fmt)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _rotating_handler(directory / "application.log", retention_days),
        )
        error_handler = _rotating_handler(directory / "error.log", retention_days)
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handlers
