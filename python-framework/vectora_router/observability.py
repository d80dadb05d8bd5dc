"""
Vectora Router Logging - formatter and one-call setup.

Guard denials are logged at INFO and guard faults at WARNING with the
traceback attached, so the level decides how much of a navigation shows up.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("viewport", "guard", "strategy", "step")

class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
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

def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """
    Attach a stream handler to the `vectora_router` logger.

    Args:
        level: Level name, e.g. "DEBUG".
        fmt: "json" for JSONFormatter, anything else for plain text.

    Returns:
        The installed handler, so callers can remove it again.
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger("vectora_router")
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
