"""
HTTP status classification.

Maps response statuses to :class:`ErrorCategory` values so callers can
decide on their own retry policy; the client itself never retries.
"""
from __future__ import annotations

from typing import Dict, Optional

from .error_code import ErrorCategory


_HTTP_STATUS_MAP: Dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION,
    401: ErrorCategory.AUTH,
    403: ErrorCategory.AUTH,
    404: ErrorCategory.NOT_FOUND,
    408: ErrorCategory.TIMEOUT,
    409: ErrorCategory.CONFLICT,
    422: ErrorCategory.VALIDATION,
    429: ErrorCategory.RATE_LIMIT,
    500: ErrorCategory.SERVER_ERROR,
    502: ErrorCategory.TRANSIENT,
    503: ErrorCategory.UNAVAILABLE,
    504: ErrorCategory.TIMEOUT,
}


def classify_status(status: Optional[int]) -> ErrorCategory:
    """Return the category for ``status``; ``UNKNOWN`` when unmapped or absent."""
    if status is None:
        return ErrorCategory.UNKNOWN
    return _HTTP_STATUS_MAP.get(status, ErrorCategory.UNKNOWN)


__all__ = ["classify_status", "_HTTP_STATUS_MAP"]
