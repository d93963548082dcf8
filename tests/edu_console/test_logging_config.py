import json
import logging

from pythonjsonlogger import jsonlogger

from edu_console.logging_config import configure_logging


def test_json_format_by_default(monkeypatch):
    monkeypatch.delenv("EDU_CONSOLE_LOG_FORMAT", raising=False)
    monkeypatch.delenv("EDU_CONSOLE_LOG_LEVEL", raising=False)

    configure_logging()
    handler = logging.getLogger().handlers[0]
    record = logging.LogRecord("edu_console.test", logging.INFO, __file__, 1, "hello", None, None)
    record.table = "students"
    payload = json.loads(handler.format(record))

    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["table"] == "students"


def test_plain_format_and_env_level(monkeypatch):
    monkeypatch.setenv("EDU_CONSOLE_LOG_LEVEL", "debug")

    configure_logging(force_format="plain")
    root = logging.getLogger()

    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.DEBUG
    assert logging.getLogger("werkzeug").level == logging.WARNING
