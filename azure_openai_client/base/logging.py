"""Structured logging utilities for the client.

One base logger (``azure_openai``) owns a single stderr handler; module
loggers are children that propagate to it. Events are emitted as one JSON
object per line via :func:`log_event`, and :func:`normalized_log_event`
guarantees the canonical keys (``phase``, ``emitted``, ``error_code``)
across request and stream paths.

The level can be overridden with ``AZURE_OPENAI_LOG_LEVEL``.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from typing import Any, Dict

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "azure_openai"
LOG_LEVEL_ENV = "AZURE_OPENAI_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_azure_openai_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_azure_openai_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name case-insensitively; ``default`` on unknown values."""
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


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared base logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for existing in logger.handlers:
            if getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                existing.setLevel(desired_level)
                if json_mode != isinstance(existing.formatter, JsonFormatter):
                    existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger under the ``azure_openai`` hierarchy.

    The base logger is configured on first use. Child loggers carry no
    handlers of their own and propagate to the base handler, so each event
    is written exactly once.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
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
    """Emit a single structured log event.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from :func:`get_logger`).
    event: str
        Event name, e.g. ``stream.decode_error``.
    ctx: LogContext | None
        Request context merged shallowly into the payload.
    level: int
        Logging level for the record.
    keep_none: bool
        Preserve keys whose value is ``None`` instead of dropping them.
    **fields: Any
        Additional JSON-serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "emitted", "error_code")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    emitted: int | bool | None = None,
    error_code: str | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event that always carries the normalized keys.

    ``error_code`` is omitted when ``None``; ``phase`` and ``emitted`` are
    always present. Extra fields never overwrite the normalized values.
    """
    base_fields: Dict[str, Any] = {"phase": phase, "emitted": emitted}
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
