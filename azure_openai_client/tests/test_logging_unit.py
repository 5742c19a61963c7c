"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import io
import json
import logging

from azure_openai_client.base.log_support import JsonFormatter
from azure_openai_client.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    get_logger,
    log_event,
    normalized_log_event,
)

from helpers import events


def _stream_logger(name: str) -> tuple:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger(name)
    logger.handlers[:] = [handler]
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    return logger, stream


def test_child_loggers_live_under_base_name():
    logger = get_logger("transport")
    assert logger.name == f"{BASE_LOGGER_NAME}.transport"  # nosec B101
    assert logger.propagate and not logger.handlers  # nosec B101
    assert get_logger(f"{BASE_LOGGER_NAME}.client").name == f"{BASE_LOGGER_NAME}.client"  # nosec B101


def test_env_overrides_level(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_LOG_LEVEL", "ERROR")
    base = get_logger(BASE_LOGGER_NAME, level=logging.DEBUG)
    assert base.level == logging.ERROR  # nosec B101
    monkeypatch.setenv("AZURE_OPENAI_LOG_LEVEL", "bogus")
    assert get_logger(BASE_LOGGER_NAME).level == logging.INFO  # nosec B101


def test_json_formatter_hoists_event_payload():
    logger, stream = _stream_logger("test.azure_openai.formatter")
    ctx = LogContext(operation="embeddings", deployment="d1", request_id="r1")
    log_event(logger, "request.finish", ctx, status=200, skipped=None)
    data = json.loads(stream.getvalue().strip())
    assert data["event"] == "request.finish"  # nosec B101
    assert data["operation"] == "embeddings" and data["request_id"] == "r1"  # nosec B101
    assert data["status"] == 200 and "skipped" not in data  # nosec B101
    assert "msg" not in data and data["level"] == "INFO"  # nosec B101


def test_json_formatter_keeps_plain_messages():
    logger, stream = _stream_logger("test.azure_openai.plain")
    logger.warning("plain %s", "text")
    data = json.loads(stream.getvalue().strip())
    assert data["msg"] == "plain text" and data["level"] == "WARNING"  # nosec B101


def test_normalized_event_always_has_phase_and_emitted(log_capture):
    logger = get_logger("normalized")
    normalized_log_event(logger, "stream.finish", LogContext(model="m"), phase="finalize", emitted=0, phase_extra=1)
    normalized_log_event(
        logger, "request.error", None, phase="error", emitted=False, error_code="http_error", level=logging.WARNING
    )
    first, second = events(log_capture)[-2:]
    for key in ("phase", "emitted"):
        assert key in first and key in second  # nosec B101
    assert "error_code" not in first  # nosec B101
    assert all(k in second for k in REQUIRED_NORMALIZED_KEYS)  # nosec B101
    assert first["model"] == "m" and first["phase_extra"] == 1  # nosec B101


def test_log_context_merges_extra():
    ctx = LogContext(operation="op", extra={"attempt": 2, "skip": None})
    assert ctx.to_dict() == {"operation": "op", "attempt": 2}  # nosec B101
