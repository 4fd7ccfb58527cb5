"""
Log setup shared by the CLI, the loader and the analyzer.

The analyzer reports counts (records, skipped records, skipped items) through
`extra=` rather than in the message text. The console format prints time,
level, logger and message; with `LOG_JSON=true` each record becomes one JSON
object and those `extra=` fields become top-level keys.

    configure_logging(level="DEBUG", json_logs=True)
    get_logger("sales_metrics.analyzer").info("done", extra={"ranked": 4})
    # {"level": "INFO", "logger": "sales_metrics.analyzer", "message": "done", "ranked": 4}
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "extra"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Serialize one record, lifting `extra=` attributes to the top level."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    for key, value in vars(record).items():
        if key not in _STANDARD_ATTRS:
            payload[key] = value
    nested = getattr(record, "extra", None)
    if isinstance(nested, dict):
        payload.update(nested)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Formatter installed when `LOG_JSON` is enabled."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
) -> None:
    """
    Install a single stderr handler on the root logger.

    Called once per CLI invocation; calling it again replaces the handler, so
    tests can switch between console and JSON output.
    """
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Module loggers are plain stdlib loggers under the `sales_metrics` tree."""
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
