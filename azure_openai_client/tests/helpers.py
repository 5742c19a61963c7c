"""Shared payload builders and log helpers for client tests."""
from __future__ import annotations

import json
import logging
from typing import List, Optional


def events(records: List[logging.LogRecord]) -> List[dict]:
    """Decode captured JSON log messages, skipping non-JSON records."""
    out = []
    for r in records:
        try:
            payload = json.loads(r.getMessage())
        except ValueError:
            continue
        if isinstance(payload, dict):
            out.append(payload)
    return out


def chunk_json(content: str = "", *, index: int = 0, role: Optional[str] = None, finish_reason: Optional[str] = None) -> str:
    delta = {}
    if role is not None:
        delta["role"] = role
    if content:
        delta["content"] = content
    return json.dumps(
        {
            "id": "chatcmpl-1",
            "object": "chat.completion.chunk",
            "created": 1700000000,
            "model": "gpt-4o",
            "choices": [{"index": index, "delta": delta, "finish_reason": finish_reason}],
        }
    )


CHAT_RESPONSE = {
    "id": "chatcmpl-abc",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-4o",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}
