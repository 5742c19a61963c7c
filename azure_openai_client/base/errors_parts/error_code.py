"""
Normalized client error codes and status categories.

``ErrorCode`` names which branch of the error taxonomy raised; values are
lowercase snake_case and form a stable contract for logging. ``ErrorCategory``
is an informational classification of HTTP statuses.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error codes, one per exception class."""

    API_ERROR = "api_error"
    HTTP_ERROR = "http_error"
    INVALID_RESPONSE = "invalid_response"
    STREAMING_ERROR = "streaming_error"
    ENCODING_ERROR = "encoding_error"
    UNRECOGNIZED_SHAPE = "unrecognized_shape"
    TRANSPORT_ERROR = "transport_error"


class ErrorCategory(str, Enum):
    """Failure category derived from an HTTP status code."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode", "ErrorCategory"]
