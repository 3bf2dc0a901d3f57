"""Structured Logging - one JSON object per record, tagged with tool/user context.

Invariants:
    - timestamp is the record's creation time (UTC), not the time of formatting
    - Context extras are copied only when a caller passed them via extra={...}
    - Warnings and above also carry the source location

Design Decisions:
    - Plain stdlib logging: modules use logging.getLogger(__name__) and pass
      context through extra=, so no logger wrapper is needed
    - Our handler is named so setup_logging() can run again (tests, reload)
      without stacking duplicate handlers on the root logger
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "lifeformula"
CONTEXT_FIELDS = ("tool_id", "user_ref", "error_code", "path", "tool_count")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name))
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.levelno >= logging.WARNING:
            payload["location"] = f"{record.module}:{record.lineno}"
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the lifeformula handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
