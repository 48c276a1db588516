"""Structured Logging: JSON formatter and setup for the serving process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (command, destination, client, error_code) surfaced when present
    - JSON format by default, human-readable with fmt="text"

Design Decisions:
    - stdlib logging + small JSONFormatter, no third-party logging package
    - setup_logging called once on startup via lifespan (or by the CLI)
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "command", "destination", "client", "error_code", "binding_count",
    "command_count", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

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
    """Configure root logging. Safe to call more than once."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if getattr(existing, "_linkhop", False):
            logging.root.removeHandler(existing)
    handler._linkhop = True  # type: ignore[attr-defined]
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
