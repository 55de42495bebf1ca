"""Base structured logging utilities for the provider layer.

Rationale:
- One place configures JSON (or plain) logging for every provider module.
- Child loggers (``unified_providers.openai``...) carry no handlers of their
  own and propagate to the shared ``unified_providers`` logger.

Events are emitted as single-line JSON payloads via :func:`log_event`.
:func:`normalized_log_event` guarantees the canonical keys ``structured``,
``phase``, ``attempt``, ``error_code``, ``emitted`` and ``tokens`` so
downstream filters work the same for every vendor.

Environment:
    UNIFIED_PROVIDERS_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "unified_providers"
LOG_LEVEL_ENV = "UNIFIED_PROVIDERS_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_unified_providers_initialized"
_CONSOLE_HANDLER_ATTR = "_unified_providers_console_handler"
_FILE_HANDLER_ATTR = "_unified_providers_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name; unknown values fall back to ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared base logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    desired = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger wired to the shared base configuration.

    Names outside the ``unified_providers`` namespace are nested under it so
    their records still reach the shared handler.
    """
    base = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name. ``None`` keeps the current level.
    file_path:
        When provided, attach (or retarget) a rotating file handler managed by
        this module. When ``None``, a previously attached managed file handler
        is removed. User-attached handlers are never touched.
    json_mode:
        JSON formatter (default) or plain text for the managed handlers.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)
    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for h in managed:
        if target is not None and getattr(h, "baseFilename", None) == target:
            h.setFormatter(_formatter(json_mode))
            h.setLevel(logger.level)
            target = None
            continue
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()
    if target is None:
        return logger

    os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
    fh = RotatingFileHandler(target, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured JSON log line.

    Keys whose value is ``None`` are dropped unless ``keep_none`` is set.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info (mapping, pairs, or ``Usage``) to plain JSON."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(tokens, (list, tuple)):
        with contextlib.suppress(TypeError, ValueError):
            return dict(tokens)
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | int | None = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a structured event carrying the normalized key set.

    ``error_code`` is omitted when ``None``; every other required key is
    always present (possibly ``null``). Extra fields never overwrite a
    normalized value that is already set.
    """
    fields: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "error_code": error_code,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is None:
        fields.pop("error_code")
    for k, v in extra_fields.items():
        if v is None or fields.get(k) is not None:
            continue
        fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "BASE_LOGGER_NAME",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
