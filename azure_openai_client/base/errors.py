"""Client error taxonomy public surface.

Re-exports the implementations under ``azure_openai_client.base.errors_parts``
to keep a single stable import path.
"""

from .errors_parts.error_code import ErrorCategory, ErrorCode
from .errors_parts.classification import classify_status
from .errors_parts.client_error import (
    ApiError,
    ClientError,
    EncodingError,
    HttpError,
    InvalidResponse,
    StreamingError,
    TransportFailure,
    UnrecognizedShape,
)

__all__ = [
    "ErrorCode",
    "ErrorCategory",
    "classify_status",
    "ClientError",
    "TransportFailure",
    "ApiError",
    "HttpError",
    "InvalidResponse",
    "StreamingError",
    "EncodingError",
    "UnrecognizedShape",
]
