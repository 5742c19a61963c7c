"""Streaming chat completion handle.

Purpose:
    Wrap one open ``text/event-stream`` response and expose it as an
    iterator of :class:`ChatCompletionChunk`. Frame decoding is delegated to
    :class:`EventStreamDecoder`; this module owns the response lifecycle.

Lifecycle:
    - The response is opened before the handle is returned, so connection
      and status errors surface at the call site.
    - :meth:`ChatCompletionStream.close` (or leaving a ``with`` block, or
      abandoning the iterator) closes the response, which tells the
      transport to stop reading.
    - Transport and content-decoding failures while reading become
      :class:`StreamingError`, raised after every event that was already
      decoded.
    - An unknown declared charset falls back to UTF-8.
"""

from __future__ import annotations

import codecs
import logging
from typing import Iterator, Optional

import httpx

from ..base.errors import StreamingError
from ..base.logging import LogContext, log_event, normalized_log_event
from ..models.chat import ChatCompletionChunk, ChatCompletionResponse
from ..streaming.accumulator import accumulate_chunks
from ..streaming.sse_decoder import EventStreamDecoder


def parse_chunk(payload: str) -> ChatCompletionChunk:
    """Decode one frame payload; raises ``ValidationError`` on malformed JSON."""
    return ChatCompletionChunk.model_validate_json(payload)


class ChatCompletionStream:
    """Iterator over the chunks of one streamed chat completion.

    Single use: iterate it once, then discard it. Usable as a context
    manager; leaving the block closes the underlying response.
    """

    def __init__(self, response: httpx.Response, *, logger: logging.Logger, ctx: LogContext) -> None:
        self._response = response
        self._logger = logger
        self._ctx = ctx
        self._decoder: EventStreamDecoder[ChatCompletionChunk] = EventStreamDecoder(
            parse_chunk,
            encoding=self._stream_encoding(),
            logger=logger,
            ctx=ctx,
        )
        self._events = self._iterate()
        self._closed = False

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def emitted(self) -> int:
        return self._decoder.emitted

    @property
    def skipped(self) -> int:
        return self._decoder.skipped

    @property
    def finish_reason(self) -> Optional[str]:
        """``"sentinel"`` or ``"eof"`` once the stream has ended normally."""
        return self._decoder.finish_reason

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[ChatCompletionChunk]:
        return self

    def __next__(self) -> ChatCompletionChunk:
        return next(self._events)

    def __enter__(self) -> "ChatCompletionStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Stop the stream and release the connection; safe to call repeatedly."""
        if self._closed:
            return
        self._events.close()
        self._close_response()

    def collect(self) -> ChatCompletionResponse:
        """Drain the remaining chunks and fold them into one response."""
        with self:
            return accumulate_chunks(self)

    def _stream_encoding(self) -> str:
        """Declared charset of the response, or UTF-8 when it is absent or unknown."""
        declared = self._response.charset_encoding
        if not declared:
            return "utf-8"
        try:
            return codecs.lookup(declared).name
        except LookupError:
            log_event(
                self._logger,
                "stream.charset_fallback",
                self._ctx,
                level=logging.WARNING,
                declared=declared,
                used="utf-8",
            )
            return "utf-8"

    def _close_response(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._response.close()

    def _iterate(self) -> Iterator[ChatCompletionChunk]:
        outcome = "cancelled"
        try:
            yield from self._decoder.iter_events(self._response.iter_bytes())
            outcome = "finished"
        except httpx.RequestError as exc:
            outcome = "error"
            error = StreamingError(f"stream interrupted: {exc}", cause=exc)
            normalized_log_event(
                self._logger,
                "stream.error",
                self._ctx,
                phase="stream",
                emitted=self._decoder.emitted,
                error_code=error.error_code.value,
                level=logging.WARNING,
                error=str(exc),
            )
            raise error from exc
        finally:
            self._close_response()
            if outcome == "finished":
                normalized_log_event(
                    self._logger,
                    "stream.finish",
                    self._ctx,
                    phase="finalize",
                    emitted=self._decoder.emitted,
                    finish_reason=self._decoder.finish_reason,
                    skipped=self._decoder.skipped,
                )
            elif outcome == "cancelled":
                normalized_log_event(
                    self._logger,
                    "stream.cancelled",
                    self._ctx,
                    phase="finalize",
                    emitted=self._decoder.emitted,
                    level=logging.DEBUG,
                )


__all__ = ["ChatCompletionStream", "parse_chunk"]
