"""
Typed client exceptions.

Every failure the client surfaces is a :class:`ClientError` subclass. The
class identifies the branch of the taxonomy; ``error_code`` mirrors it as a
stable string for structured logs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .error_code import ErrorCategory, ErrorCode
from .classification import classify_status


@dataclass(eq=False)
class ClientError(Exception):
    """Base class for all client failures.

    Attributes:
        message: Human-readable error message suitable for logging.
        cause: Optional original exception for diagnostics.
    """

    message: str
    cause: Optional[BaseException] = None

    error_code: ClassVar[ErrorCode] = ErrorCode.TRANSPORT_ERROR

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


@dataclass(eq=False)
class TransportFailure(ClientError):
    """The request could not be sent or no response headers arrived."""

    error_code: ClassVar[ErrorCode] = ErrorCode.TRANSPORT_ERROR


@dataclass(eq=False)
class ApiError(ClientError):
    """The service answered with a non-success status and a structured error body.

    Attributes:
        error_type: ``error.type`` from the body.
        param: ``error.param`` from the body, when present.
        code: ``error.code`` from the body, when present.
        status_code: HTTP status of the response.
    """

    error_type: str = ""
    param: Optional[str] = None
    code: Optional[str] = None
    status_code: Optional[int] = None

    error_code: ClassVar[ErrorCode] = ErrorCode.API_ERROR

    @property
    def category(self) -> ErrorCategory:
        return classify_status(self.status_code)

    def __str__(self) -> str:
        return (
            f"API Error: {self.message} "
            f"(type: {self.error_type}, code: {self.code or 'unknown'})"
        )


@dataclass(eq=False)
class HttpError(ClientError):
    """Non-success status whose body is not a decodable error document."""

    status_code: int = 0
    body: str = ""

    error_code: ClassVar[ErrorCode] = ErrorCode.HTTP_ERROR

    @property
    def category(self) -> ErrorCategory:
        return classify_status(self.status_code)

    def __str__(self) -> str:
        return f"HTTP Error: {self.status_code}"


@dataclass(eq=False)
class InvalidResponse(ClientError):
    """Success status but the body does not decode into the expected type."""

    status_code: Optional[int] = None

    error_code: ClassVar[ErrorCode] = ErrorCode.INVALID_RESPONSE


@dataclass(eq=False)
class StreamingError(ClientError):
    """Transport failure while a stream was being consumed."""

    error_code: ClassVar[ErrorCode] = ErrorCode.STREAMING_ERROR


@dataclass(eq=False)
class EncodingError(ClientError):
    """A request value cannot be serialized for the wire."""

    error_code: ClassVar[ErrorCode] = ErrorCode.ENCODING_ERROR


@dataclass(eq=False)
class UnrecognizedShape(ClientError, ValueError):
    """A polymorphic value matched none of its candidate wire shapes.

    Subclasses ``ValueError`` so pydantic reports it as a validation error
    when raised from inside a model validator.
    """

    field: str = ""
    observed: str = ""

    error_code: ClassVar[ErrorCode] = ErrorCode.UNRECOGNIZED_SHAPE


__all__ = [
    "ClientError",
    "TransportFailure",
    "ApiError",
    "HttpError",
    "InvalidResponse",
    "StreamingError",
    "EncodingError",
    "UnrecognizedShape",
]
