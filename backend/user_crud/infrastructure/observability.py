"""Structured Logging - JSON formatter and setup for the user CRUD service.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request context (user_id, path, operation) and error tags (error_code,
      error_kind) surfaced when present, never in response bodies
    - Values that are not JSON types are logged via str(), never dropped
    - setup_logging is idempotent: a second call replaces the handler it installed

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency
    - setup_logging runs from the lifespan, which reruns under uvicorn --reload and
      in tests; handlers added by other code are left alone
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("user_id", "path", "operation", "error_code", "error_kind")

_HANDLER_NAME = "user_crud"


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler, replacing any earlier one."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
