"""JSON logging formatter used by the provider logging setup.

Serializes the standard record fields plus any non-internal ``extra``
attributes. When the message itself is a JSON object (as produced by
``log_event``) its keys are hoisted to the top level so emitted lines are not
double-encoded.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RESERVED = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """Lightweight single-line JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - trivial formatting
        message = record.getMessage()
        out = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
            "msg": message,
        }
        with contextlib.suppress(ValueError, TypeError):
            parsed = json.loads(message)
            if isinstance(parsed, dict):
                out.pop("msg")
                out.update(parsed)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED or key in out:
                continue
            out[key] = value
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
