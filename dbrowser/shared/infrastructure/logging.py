"""
Structured Logging
==================

One JSON object per line on stdout. Every record carries ``timestamp``,
``environment`` and, inside a request, the ``correlation_id`` set by
``CorrelationIDMiddleware``.

Usage:
    from dbrowser.shared.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Shortcut created", extra={"shortcut_id": "..."})
"""

import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger import jsonlogger

REDACTED = "***REDACTED***"
SENSITIVE_KEY_PARTS = ("password", "token", "api_key")

# Third-party loggers kept quieter than the application's level
QUIET_LOGGERS = {
    "uvicorn.access": "WARNING",
    "sqlalchemy.engine": "WARNING",
}


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(part in lowered for part in SENSITIVE_KEY_PARTS)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding request context and masking secrets."""

    def __init__(self, *args: Any, environment: str = "unknown", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.environment = environment

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
        log_record["environment"] = getattr(record, "environment", self.environment)

        correlation_id = getattr(record, "correlation_id", message_dict.get("correlation_id"))
        if correlation_id is not None:
            log_record["correlation_id"] = correlation_id

        for key, value in log_record.items():
            if isinstance(value, str) and is_sensitive(key):
                log_record[key] = REDACTED


def setup_logging(level: str = "INFO", environment: str = "development") -> None:
    """
    Route every logger through a single stdout JSON handler.

    Args:
        level: Root level name (DEBUG, INFO, WARNING, ERROR)
        environment: Value stamped on every record
    """
    level = level.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
                "environment": environment,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "json",
                "level": level,
            },
        },
        "root": {"level": level, "handlers": ["stdout"]},
        "loggers": {name: {"level": quiet} for name, quiet in QUIET_LOGGERS.items()},
    })


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
