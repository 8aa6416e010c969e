"""
Structured Logging

JSON-formatted log output for hook registration and dispatch, plus a
single entry point for configuring the root logger.
"""

import json
import logging
from datetime import datetime, timezone

from hookloader.config import settings

_EXTRA_FIELDS = ["hook_name", "kind", "priority", "accepted_args", "plugin"]


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per line, suitable for log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; defaults to settings.log_level.
        json_format: Emit JSON lines; defaults to settings.log_json.
    """
    level = (level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.log_json

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
