"""azure_openai_client.config.env
==============================

Environment variable names and lookup helpers for client configuration.

Failure Modes
-------------
- Lookups return ``None`` for unset or blank variables; callers decide how
  to proceed.
- ``parse_env_float`` raises ``ValueError`` naming the variable when a value
  is present but not a number.
"""

from __future__ import annotations

import os
from typing import Optional

ENV_RESOURCE_NAME = "AZURE_OPENAI_RESOURCE_NAME"
ENV_API_KEY = "AZURE_OPENAI_API_KEY"
ENV_API_VERSION = "AZURE_OPENAI_API_VERSION"
ENV_TIMEOUT_SECONDS = "AZURE_OPENAI_TIMEOUT_SECONDS"
ENV_ENDPOINT = "AZURE_OPENAI_ENDPOINT"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'your-', 'example', or
    starts with 'test_'. Case-insensitive, surrounding spaces ignored.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("your-")
        or v.startswith("test_")
    )


def get_env(name: str) -> Optional[str]:
    """Return the stripped value of ``name`` or None when unset or blank."""
    val = os.getenv(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def parse_env_float(name: str) -> Optional[float]:
    raw = get_env(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


__all__ = [
    "ENV_RESOURCE_NAME",
    "ENV_API_KEY",
    "ENV_API_VERSION",
    "ENV_TIMEOUT_SECONDS",
    "ENV_ENDPOINT",
    "is_placeholder",
    "get_env",
    "parse_env_float",
]
