import json
import logging

from dbrowser.shared.infrastructure.logging import CustomJsonFormatter, setup_logging


def _format(formatter, **extra):
    record = logging.LogRecord(
        name="dbrowser.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Shortcut created",
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(formatter.format(record))


def test_formatter_adds_context_fields():
    formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s", environment="staging")

    entry = _format(formatter, correlation_id="req-1", shortcut_id="abc")

    assert entry["message"] == "Shortcut created"
    assert entry["levelname"] == "INFO"
    assert entry["correlation_id"] == "req-1"
    assert entry["environment"] == "staging"
    assert entry["shortcut_id"] == "abc"
    assert entry["timestamp"]


def test_formatter_redacts_secrets():
    formatter = CustomJsonFormatter("%(message)s")

    entry = _format(formatter, api_key="sk-123", db_password="hunter2", refresh_token="t")

    assert entry["api_key"] == "***REDACTED***"
    assert entry["db_password"] == "***REDACTED***"
    assert entry["refresh_token"] == "***REDACTED***"
    assert entry["environment"] == "unknown"


def test_setup_logging_installs_json_handler():
    setup_logging(level="warning", environment="production")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, CustomJsonFormatter)
    assert formatter.environment == "production"
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
