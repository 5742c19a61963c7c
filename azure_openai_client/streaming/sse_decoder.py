"""Incremental decoder for ``text/event-stream`` response bodies.

The transport hands over byte fragments that have no relation to event
boundaries. :class:`EventStreamDecoder` owns one text buffer per stream,
appends each decoded fragment to it, and extracts every complete frame
(``data: ...`` followed by a blank line) as soon as it is available.

Frame handling, in order:

- ``[DONE]`` ends the stream; anything after it is discarded.
- An empty payload is a keep-alive and is skipped.
- A payload that fails to parse is logged as ``stream.decode_error`` and
  skipped, so one bad frame cannot end an otherwise healthy stream.
- Anything else is parsed into one event and emitted in arrival order.

Line endings may be CRLF, LF or a lone CR; all are normalized to LF.

Transport EOF without the sentinel is a normal end; an incomplete trailing
frame is dropped.
"""
from __future__ import annotations

import codecs
import logging
from typing import AsyncIterable, AsyncIterator, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from pydantic import ValidationError

from ..base.constants import SSE_DATA_MARKER, SSE_DONE_SENTINEL, SSE_FRAME_TERMINATOR
from ..base.logging import LogContext, get_logger, log_event

T = TypeVar("T")

FINISH_SENTINEL = "sentinel"
FINISH_EOF = "eof"


def _frame_payload(block: str) -> str:
    """Join the values of every ``data:`` line in one frame block.

    ``block`` starts right after the first marker. Lines that carry other
    SSE fields (``event:``, ``id:``, ``retry:``) or comments are ignored.
    """
    lines = block.split("\n")
    values = [lines[0]]
    for line in lines[1:]:
        if line.startswith(SSE_DATA_MARKER):
            values.append(line[len(SSE_DATA_MARKER):])
    return "\n".join(v[1:] if v.startswith(" ") else v for v in values)


class EventStreamDecoder(Generic[T]):
    """Turn arbitrary byte fragments into an ordered sequence of events.

    Parameters:
        parse: Converts one frame payload into an event. ``ValueError``
            (including pydantic ``ValidationError``) marks the frame as
            malformed.
        encoding: Character encoding declared by the response.
        logger: Logger for decode-error events.
        ctx: Context merged into log events.

    One instance serves exactly one stream and must not be shared.
    """

    def __init__(
        self,
        parse: Callable[[str], T],
        *,
        encoding: str = "utf-8",
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._parse = parse
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""
        self._held_cr = False
        self._logger = logger or get_logger("azure_openai.streaming")
        self._ctx = ctx
        self.finished = False
        self.finish_reason: Optional[str] = None
        self.emitted = 0
        self.skipped = 0

    @property
    def pending(self) -> str:
        """Text received but not yet resolved into a complete frame."""
        return self._buffer

    def feed(self, fragment: Union[bytes, str]) -> List[T]:
        """Append one fragment and return the events it completed."""
        if self.finished:
            return []
        text = self._decoder.decode(fragment) if isinstance(fragment, bytes) else fragment
        if self._held_cr:
            text = "\r" + text
        # a trailing CR may be the first half of CRLF
        self._held_cr = text.endswith("\r")
        if self._held_cr:
            text = text[:-1]
        if not text:
            return []
        self._buffer += text.replace("\r\n", "\n").replace("\r", "\n")
        return self._drain()

    def close(self) -> List[T]:
        """Mark transport EOF; an unterminated trailing frame is discarded.

        Returns the events completed by a line-ending CR that was held back
        at the end of the last fragment.
        """
        if self.finished:
            return []
        self._decoder.decode(b"", final=True)
        events: List[T] = []
        if self._held_cr:
            self._held_cr = False
            self._buffer += "\n"
            events = self._drain()
            if self.finished:
                return events
        if self._buffer.strip():
            log_event(
                self._logger,
                "stream.partial_frame_dropped",
                self._ctx,
                level=logging.DEBUG,
                pending_chars=len(self._buffer),
            )
        self._buffer = ""
        self.finished = True
        self.finish_reason = FINISH_EOF
        return events

    def iter_events(self, fragments: Iterable[Union[bytes, str]]) -> Iterator[T]:
        """Lazily decode a synchronous fragment source.

        Stops pulling fragments as soon as the sentinel is seen.
        """
        for fragment in fragments:
            yield from self.feed(fragment)
            if self.finished:
                return
        yield from self.close()

    async def aiter_events(self, fragments: AsyncIterable[Union[bytes, str]]) -> AsyncIterator[T]:
        """Asynchronous counterpart of :meth:`iter_events`."""
        async for fragment in fragments:
            for event in self.feed(fragment):
                yield event
            if self.finished:
                return
        for event in self.close():
            yield event

    def _drain(self) -> List[T]:
        events: List[T] = []
        while True:
            start = self._buffer.find(SSE_DATA_MARKER)
            if start < 0:
                break
            body_start = start + len(SSE_DATA_MARKER)
            end = self._buffer.find(SSE_FRAME_TERMINATOR, body_start)
            if end < 0:
                break
            payload = _frame_payload(self._buffer[body_start:end]).strip()
            self._buffer = self._buffer[end + len(SSE_FRAME_TERMINATOR):]

            if payload == SSE_DONE_SENTINEL:
                self._buffer = ""
                self.finished = True
                self.finish_reason = FINISH_SENTINEL
                break
            if not payload:
                continue
            try:
                event = self._parse(payload)
            except (ValueError, ValidationError) as exc:
                self.skipped += 1
                log_event(
                    self._logger,
                    "stream.decode_error",
                    self._ctx,
                    level=logging.WARNING,
                    error=str(exc).splitlines()[0] if str(exc) else type(exc).__name__,
                    payload_chars=len(payload),
                )
                continue
            self.emitted += 1
            events.append(event)
        return events


__all__ = ["EventStreamDecoder", "FINISH_SENTINEL", "FINISH_EOF"]
