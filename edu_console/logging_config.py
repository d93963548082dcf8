from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "EDU_CONSOLE_LOG_FORMAT"
LOG_LEVEL_ENV = "EDU_CONSOLE_LOG_LEVEL"

# Loggers that flood the output at INFO (one line per Dash request)
_NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(default: int) -> int:
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the console.

    Output is JSON lines by default (one object per record, `extra={...}` fields
    merged in) or plain text for local work. The format comes from
    force_format ("json" / "plain") when given, else from EDU_CONSOLE_LOG_FORMAT.

    EDU_CONSOLE_LOG_LEVEL (e.g. DEBUG) overrides `level`; at DEBUG the dataset
    view reports every record whose accessor failed during sort/filter.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    level = _resolve_level(level)

    if format_mode == "plain":
        formatter: logging.Formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
