"""Request/response helpers shared by every Azure OpenAI operation.

Purpose:
    Keep URL building, body encoding, and response classification out of
    ``client.py`` so each public operation reads as a short pipeline:
    encode -> send -> classify -> decode.

Notes:
    These helpers assume the consumer provides ``_config``
    (:class:`AzureOpenAIConfiguration`), ``_transport`` (:class:`HttpTransport`)
    and ``_logger`` attributes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ..base.constants import API_KEY_HEADER, ERROR_BODY_EXCERPT_LIMIT, JSON_CONTENT_TYPE
from ..base.errors import ApiError, ClientError, EncodingError, HttpError, InvalidResponse
from ..base.logging import LogContext, normalized_log_event
from ..models.common import ErrorResponse, WireModel
from ..multipart import MultipartPart, content_type_header, encode_multipart, make_boundary

M = TypeVar("M", bound=BaseModel)

_REQUEST_ID_HEADERS = ("apim-request-id", "x-request-id")


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def request_id_of(response: httpx.Response) -> Optional[str]:
    for name in _REQUEST_ID_HEADERS:
        if value := response.headers.get(name):
            return value
    return None


def encode_json_body(request: WireModel) -> bytes:
    """Serialize a request model to UTF-8 JSON bytes.

    Raises:
        EncodingError: a field cannot be represented as JSON (non-finite
            number, unsupported schema leaf, text not encodable as UTF-8).
    """
    try:
        body = request.to_wire()
    except PydanticSerializationError as exc:
        raise EncodingError(f"cannot serialize {type(request).__name__}: {exc}", cause=exc) from exc
    return dumps_json(body)


def dumps_json(body: Any) -> bytes:
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (ValueError, TypeError) as exc:
        # UnicodeEncodeError is a ValueError
        raise EncodingError(f"request body is not valid JSON: {exc}", cause=exc) from exc


def error_from_response(response: httpx.Response) -> ClientError:
    """Map a non-success response to :class:`ApiError` or :class:`HttpError`."""
    body = response.content
    try:
        detail = ErrorResponse.model_validate_json(body).error
    except ValidationError:
        excerpt = body[:ERROR_BODY_EXCERPT_LIMIT].decode("utf-8", errors="replace")
        return HttpError(f"HTTP {response.status_code}", status_code=response.status_code, body=excerpt)
    return ApiError(
        detail.message,
        error_type=detail.type or "",
        param=detail.param,
        code=detail.code,
        status_code=response.status_code,
    )


def decode_model(model: Type[M], response: httpx.Response) -> M:
    """Decode a success body into ``model``.

    Raises:
        InvalidResponse: the body is not JSON or does not match ``model``.
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise InvalidResponse(
            f"response body does not decode as {model.__name__}: {exc.error_count()} error(s)",
            cause=exc,
            status_code=response.status_code,
        ) from exc


class AzureRequestMixin:
    """Mixin with URL, header and envelope helpers for Azure deployments.

    Consumers must define ``_config`` and ``_logger``.
    """

    def _operation_url(self, deployment: str, operation: str) -> str:
        """Return ``{base}/openai/deployments/{deployment}/{operation}``.

        The deployment name is percent-quoted as a single path segment.
        """
        return f"{self._config.base_url}/openai/deployments/{quote(deployment, safe='')}/{operation}"

    def _query(self) -> Dict[str, str]:
        return {"api-version": self._config.api_version}

    def _headers(self, content_type: str = JSON_CONTENT_TYPE) -> Dict[str, str]:
        return {API_KEY_HEADER: self._config.api_key, "Content-Type": content_type}

    def _timeout(self, timeout: Optional[float]) -> httpx.Timeout:
        return httpx.Timeout(self._config.timeout_seconds if timeout is None else timeout)

    def _multipart_envelope(self, parts: List[MultipartPart]) -> Tuple[bytes, Mapping[str, str]]:
        boundary = make_boundary()
        body = encode_multipart(parts, boundary)
        return body, self._headers(content_type_header(boundary))

    def _log_request_start(self, ctx: LogContext, body_bytes: int) -> None:
        normalized_log_event(
            self._logger,
            "request.start",
            ctx,
            phase="start",
            emitted=False,
            body_bytes=body_bytes,
        )

    def _log_request_finish(self, ctx: LogContext, response: httpx.Response, latency_ms: float) -> None:
        normalized_log_event(
            self._logger,
            "request.finish",
            ctx,
            phase="finish",
            emitted=True,
            status=response.status_code,
            latency_ms=round(latency_ms, 2),
        )

    def _log_request_error(self, ctx: LogContext, error: ClientError, phase: str = "error") -> None:
        normalized_log_event(
            self._logger,
            "request.error",
            ctx,
            phase=phase,
            emitted=False,
            error_code=error.error_code.value,
            level=logging.WARNING,
            error=str(error),
            status=getattr(error, "status_code", None),
        )


__all__ = [
    "AzureRequestMixin",
    "decode_model",
    "dumps_json",
    "encode_json_body",
    "error_from_response",
    "is_success",
    "request_id_of",
]
