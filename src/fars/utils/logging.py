"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _utc_isoformat(created: float) -> str:
    """ISO-8601 UTC timestamp with a ``Z`` suffix."""
    ts = datetime.fromtimestamp(created, tz=timezone.utc)
    return ts.isoformat().replace("+00:00", "Z")


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utc_isoformat(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Merge any extra fields passed via logger.info(..., extra={...})
        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(level: int = logging.INFO, json_output: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the ``fars`` package logger.

    Calling it again replaces the previous handler, so the CLI can be
    invoked repeatedly in one process (tests) without duplicate lines.

    Args:
        level: Logging level for the package logger.
        json_output: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    pkg_logger = logging.getLogger("fars")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(_PLAIN_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    return pkg_logger
