"""Azure OpenAI client (OpenAI-style REST over HTTP).

Summary:
- JSON operations: chat completions, embeddings, image generation
- Multipart operations: audio transcription/translation, image variations/edits
- Streaming chat completions via :class:`ChatCompletionStream`

Errors & Observability:
- Every failure is a typed :class:`ClientError`; nothing is retried
- Each call emits ``request.start`` and ``request.finish``/``request.error``;
  streams add ``stream.start`` and ``stream.finish``/``stream.error``

This module orchestrates I/O only; encoding and decoding live in the codec,
models, multipart and streaming packages.
"""

from __future__ import annotations

import time
from typing import List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from ..base.constants import (
    OP_AUDIO_TRANSCRIPTIONS,
    OP_AUDIO_TRANSLATIONS,
    OP_CHAT_COMPLETIONS,
    OP_EMBEDDINGS,
    OP_IMAGES_EDITS,
    OP_IMAGES_GENERATIONS,
    OP_IMAGES_VARIATIONS,
)
from ..base.errors import ClientError, StreamingError, TransportFailure
from ..base.http import HttpTransport
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..config import AzureOpenAIConfiguration
from ..models.audio import (
    AudioResponseFormat,
    AudioTranscriptionRequest,
    AudioTranslationRequest,
    TranscriptionResponse,
    VerboseTranscriptionResponse,
)
from ..models.chat import ChatCompletionRequest, ChatCompletionResponse
from ..models.embeddings import EmbeddingRequest, EmbeddingResponse
from ..models.images import (
    ImageEditRequest,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageVariationRequest,
)
from ..multipart import MultipartPart
from .helpers import (
    AzureRequestMixin,
    decode_model,
    encode_json_body,
    error_from_response,
    is_success,
    request_id_of,
)
from .stream_helpers import ChatCompletionStream

M = TypeVar("M", bound=BaseModel)

AudioRequest = Union[AudioTranscriptionRequest, AudioTranslationRequest]


class AzureOpenAIClient(AzureRequestMixin):
    """Typed client for one Azure OpenAI resource.

    Parameters:
        configuration: Resource name, key, API version and default timeout.
        http_client: Optional caller-owned ``httpx.Client``. It is never
            closed by this object; when omitted a client is created and
            owned here.

    The client holds only immutable configuration and the transport handle,
    so one instance may serve many threads. Use it as a context manager or
    call :meth:`close` to release an owned connection pool.
    """

    def __init__(
        self,
        configuration: AzureOpenAIConfiguration,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = configuration
        self._transport = HttpTransport(http_client, timeout_seconds=configuration.timeout_seconds)
        self._logger = get_logger("azure_openai.client")

    @property
    def configuration(self) -> AzureOpenAIConfiguration:
        return self._config

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    def close(self) -> None:
        """Release the owned HTTP client; a caller-supplied client is left open."""
        self._transport.close()

    shutdown = close

    def __enter__(self) -> "AzureOpenAIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- JSON operations ----

    def chat_completions(
        self, request: ChatCompletionRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> ChatCompletionResponse:
        """Create a chat completion.

        Raises:
            EncodingError: the request cannot be serialized.
            ApiError / HttpError: the service returned a non-success status.
            InvalidResponse: the success body does not decode.
            TransportFailure: the request could not be completed.
        """
        ctx = LogContext(operation=OP_CHAT_COMPLETIONS, deployment=deployment, model=request.model)
        body = self._encode(encode_json_body, request, ctx)
        response = self._send(deployment, OP_CHAT_COMPLETIONS, body, self._headers(), ctx, timeout)
        return self._decode(ChatCompletionResponse, response, ctx)

    def embeddings(
        self, request: EmbeddingRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> EmbeddingResponse:
        ctx = LogContext(operation=OP_EMBEDDINGS, deployment=deployment)
        body = self._encode(encode_json_body, request, ctx)
        response = self._send(deployment, OP_EMBEDDINGS, body, self._headers(), ctx, timeout)
        return self._decode(EmbeddingResponse, response, ctx)

    def create_images(
        self, request: ImageGenerationRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> ImageGenerationResponse:
        ctx = LogContext(operation=OP_IMAGES_GENERATIONS, deployment=deployment, model=request.model)
        body = self._encode(encode_json_body, request, ctx)
        response = self._send(deployment, OP_IMAGES_GENERATIONS, body, self._headers(), ctx, timeout)
        return self._decode(ImageGenerationResponse, response, ctx)

    # ---- multipart operations ----

    def transcribe_audio(
        self, request: AudioTranscriptionRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> TranscriptionResponse:
        """Transcribe audio in its spoken language.

        With ``response_format`` text, srt or vtt the raw body is returned
        as ``text``; with verbose_json the result is a
        :class:`VerboseTranscriptionResponse`.
        """
        return self._audio(OP_AUDIO_TRANSCRIPTIONS, request, deployment, timeout)

    def translate_audio(
        self, request: AudioTranslationRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> TranscriptionResponse:
        """Translate audio into English text; response handling as :meth:`transcribe_audio`."""
        return self._audio(OP_AUDIO_TRANSLATIONS, request, deployment, timeout)

    def create_image_variations(
        self, request: ImageVariationRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> ImageGenerationResponse:
        ctx = LogContext(operation=OP_IMAGES_VARIATIONS, deployment=deployment, model=request.model)
        response = self._send_multipart(deployment, OP_IMAGES_VARIATIONS, request.to_multipart_parts(), ctx, timeout)
        return self._decode(ImageGenerationResponse, response, ctx)

    def edit_image(
        self, request: ImageEditRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> ImageGenerationResponse:
        ctx = LogContext(operation=OP_IMAGES_EDITS, deployment=deployment, model=request.model)
        response = self._send_multipart(deployment, OP_IMAGES_EDITS, request.to_multipart_parts(), ctx, timeout)
        return self._decode(ImageGenerationResponse, response, ctx)

    # ---- streaming ----

    def stream_chat_completions(
        self, request: ChatCompletionRequest, deployment: str, *, timeout: Optional[float] = None
    ) -> ChatCompletionStream:
        """Start a streamed chat completion.

        ``stream`` is forced on. The response headers are awaited before
        this returns, so setup failures raise here; the returned handle
        yields :class:`ChatCompletionChunk` values as frames complete.

        Raises:
            EncodingError: the request cannot be serialized.
            ApiError / HttpError: the service returned a non-success status.
            StreamingError: the connection failed before any response.
        """
        ctx = LogContext(operation=OP_CHAT_COMPLETIONS, deployment=deployment, model=request.model)
        body = self._encode(encode_json_body, request.model_copy(update={"stream": True}), ctx)
        http_request = self._transport.client.build_request(
            "POST",
            self._operation_url(deployment, OP_CHAT_COMPLETIONS),
            params=self._query(),
            headers=self._headers(),
            content=body,
            timeout=self._timeout(timeout),
        )
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", emitted=0, body_bytes=len(body))
        try:
            response = self._transport.client.send(http_request, stream=True)
        except httpx.TransportError as exc:
            error = StreamingError(f"stream could not be opened: {exc}", cause=exc)
            self._log_request_error(ctx, error, phase="start")
            raise error from exc
        ctx.request_id = request_id_of(response)
        if not is_success(response.status_code):
            try:
                response.read()
                error = error_from_response(response)
            except httpx.RequestError as exc:
                error = StreamingError(f"error body could not be read: {exc}", cause=exc)
            finally:
                response.close()
            self._log_request_error(ctx, error, phase="start")
            raise error
        try:
            return ChatCompletionStream(response, logger=self._logger, ctx=ctx)
        except Exception as exc:
            response.close()
            error = StreamingError(f"stream could not be started: {exc}", cause=exc)
            self._log_request_error(ctx, error, phase="start")
            raise error from exc

    # ---- internals ----

    def _audio(
        self, operation: str, request: AudioRequest, deployment: str, timeout: Optional[float]
    ) -> TranscriptionResponse:
        ctx = LogContext(operation=operation, deployment=deployment, model=request.model)
        response = self._send_multipart(deployment, operation, request.to_multipart_parts(), ctx, timeout)
        fmt = request.response_format
        if fmt is not None and fmt.is_plain_text:
            return TranscriptionResponse(text=response.text)
        if fmt is AudioResponseFormat.VERBOSE_JSON:
            return self._decode(VerboseTranscriptionResponse, response, ctx)
        return self._decode(TranscriptionResponse, response, ctx)

    def _encode(self, encoder, value, ctx: LogContext) -> bytes:
        try:
            return encoder(value)
        except ClientError as error:
            self._log_request_error(ctx, error, phase="encode")
            raise

    def _send_multipart(
        self,
        deployment: str,
        operation: str,
        parts: List[MultipartPart],
        ctx: LogContext,
        timeout: Optional[float],
    ) -> httpx.Response:
        body, headers = self._encode(self._multipart_envelope, parts, ctx)
        return self._send(deployment, operation, body, headers, ctx, timeout)

    def _send(
        self,
        deployment: str,
        operation: str,
        body: bytes,
        headers,
        ctx: LogContext,
        timeout: Optional[float],
    ) -> httpx.Response:
        """POST ``body`` and return a success response.

        Non-success statuses are raised as :class:`ApiError` or
        :class:`HttpError`; transport failures as :class:`TransportFailure`.
        """
        self._log_request_start(ctx, len(body))
        t0 = time.perf_counter()
        try:
            response = self._transport.client.post(
                self._operation_url(deployment, operation),
                params=self._query(),
                headers=headers,
                content=body,
                timeout=self._timeout(timeout),
            )
        except httpx.TransportError as exc:
            error = TransportFailure(f"{operation} request failed: {exc}", cause=exc)
            self._log_request_error(ctx, error)
            raise error from exc
        ctx.request_id = request_id_of(response)
        if not is_success(response.status_code):
            error = error_from_response(response)
            self._log_request_error(ctx, error)
            raise error
        self._log_request_finish(ctx, response, (time.perf_counter() - t0) * 1000.0)
        return response

    def _decode(self, model: Type[M], response: httpx.Response, ctx: LogContext) -> M:
        try:
            return decode_model(model, response)
        except ClientError as error:
            self._log_request_error(ctx, error, phase="decode")
            raise


__all__ = ["AzureOpenAIClient", "ChatCompletionStream"]
