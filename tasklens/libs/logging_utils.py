"""Logging configuration helpers for Tasklens.

Output is JSON lines by default; ``TASKLENS_LOG_FORMAT=text`` switches to a
plain console format that highlights warnings and errors.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict, Iterator, Tuple

DEV_ENVIRONMENTS = {"local", "dev", "development", "test"}

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}

_ANSI_RESET = "\033[0m"
_LEVEL_COLORS: Tuple[Tuple[int, str], ...] = (
    (logging.ERROR, "\033[31m"),
    (logging.WARNING, "\033[33m"),
)


def _environment() -> str:
    return os.getenv("TASKLENS_ENVIRONMENT", "dev").lower()


def color_enabled() -> bool:
    flag = os.getenv("TASKLENS_LOG_COLOR")
    if flag:
        return flag == "1"
    return _environment() in DEV_ENVIRONMENTS


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    return ((key, value) for key, value in vars(record).items() if key not in _STANDARD_ATTRS)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, extra fields inlined at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **dict(_extra_fields(record)),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ColorTextFormatter(logging.Formatter):
    """Console formatter; warnings render yellow and errors red."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not color_enabled():
            return line
        for threshold, code in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return f"{code}{line}{_ANSI_RESET}"
        return line


def configure_logging() -> None:
    """Install a single console handler on the root logger from environment."""

    fallback_level = "DEBUG" if _environment() in DEV_ENVIRONMENTS else "INFO"
    level = os.getenv("TASKLENS_LOG_LEVEL", fallback_level).upper()
    use_json = os.getenv("TASKLENS_LOG_FORMAT", "json").lower() == "json"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonFormatter},
                "text": {"()": ColorTextFormatter, "format": TEXT_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if use_json else "text",
                    "level": level,
                },
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )


__all__ = ["ColorTextFormatter", "JsonFormatter", "color_enabled", "configure_logging"]
