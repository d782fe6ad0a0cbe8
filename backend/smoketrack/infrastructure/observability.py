"""Structured Logging - one-line JSON records for the API process.

Invariants:
    - Each record carries timestamp (from the record, UTC), level, logger, message
    - Domain identifiers passed via `extra=` (user_id, supply_id, event_id, ...)
      are copied into the record only when set
    - setup_logging replaces the handler it installed earlier instead of stacking
"""

import json
import logging
from datetime import datetime, timezone


EXTRA_FIELDS = (
    "user_id", "supply_id", "event_id", "error_code", "path",
    "remaining_minutes", "interval_minutes",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_installed: logging.Handler | None = None


def _jsonable(value):
    if isinstance(value, (bool, int, float)):
        return value
    return str(value)


class JSONFormatter(logging.Formatter):
    """Renders a LogRecord as a JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            key: _jsonable(getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the process log handler on the root logger."""
    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _installed = handler
    return handler
