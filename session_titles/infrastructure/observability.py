"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (chat_id, schedule_id, error_code, path) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency
    - setup_logging called on startup via lifespan; repeated calls (tests,
      reloads) swap the handler rather than duplicating every line
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("chat_id", "schedule_id", "error_code", "path")
_HANDLER_TAG = "_session_titles_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure the root logger; calling it again replaces our handler instead of stacking one."""
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
