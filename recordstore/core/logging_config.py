"""
Logging setup for the record store.

Logs go to stdout, either as plain text or as one JSON object per line
(LOG_JSON=true) so they can be shipped to a log aggregator as-is.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

REQUEST_FIELDS = ("method", "path", "status_code", "latency_ms", "record_id")
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """
    Render a LogRecord as a single-line JSON object.

    Always present: timestamp, level, logger, message. Request fields passed
    through ``extra={...}`` are copied when set, and exception text is added
    when the record carries exc_info.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in REQUEST_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """Install a single stdout handler on the root logger (idempotent)."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_recordstore", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler._recordstore = True  # type: ignore[attr-defined]
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # uvicorn already prints its own access lines
    logging.getLogger("uvicorn.access").propagate = False
    return root
