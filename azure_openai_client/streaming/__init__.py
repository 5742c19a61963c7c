"""Event stream decoding and chat chunk accumulation."""

from .accumulator import ChatStreamAccumulator, accumulate_chunks
from .sse_decoder import FINISH_EOF, FINISH_SENTINEL, EventStreamDecoder

__all__ = [
    "EventStreamDecoder",
    "FINISH_EOF",
    "FINISH_SENTINEL",
    "ChatStreamAccumulator",
    "accumulate_chunks",
]
