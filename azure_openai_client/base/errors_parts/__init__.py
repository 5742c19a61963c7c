"""Error taxonomy parts (one concern per module)."""

from .error_code import ErrorCategory, ErrorCode
from .classification import classify_status
from .client_error import (
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
