"""Event stream decoder behavior.

Covers:
- Frames are emitted in order regardless of fragment boundaries.
- ``[DONE]`` ends the stream even with trailing bytes.
- Malformed frames are skipped and logged; neighbors survive.
- CRLF and lone-CR framing, multi-byte characters split across fragments.
- EOF without the sentinel drops an unterminated trailing frame.
- Async iteration mirrors the synchronous path.
"""
from __future__ import annotations

import asyncio
import json
from typing import AsyncIterator, Iterator, List

import pytest

from azure_openai_client.models import ChatCompletionChunk
from azure_openai_client.streaming import FINISH_EOF, FINISH_SENTINEL, EventStreamDecoder

from helpers import chunk_json, events


def _decoder() -> EventStreamDecoder[ChatCompletionChunk]:
    return EventStreamDecoder(ChatCompletionChunk.model_validate_json)


def _frame(payload: str) -> bytes:
    return f"data: {payload}\n\n".encode("utf-8")


TWO_FRAMES = _frame(chunk_json("Hel", role="assistant")) + _frame(chunk_json("lo"))


def _contents(chunks: List[ChatCompletionChunk]) -> List[str]:
    return [c.choices[0].delta.content for c in chunks]


def test_two_frames_in_one_fragment():
    out = _decoder().feed(TWO_FRAMES)
    assert _contents(out) == ["Hel", "lo"]  # nosec B101


@pytest.mark.parametrize("cuts", [(1, 2), (7, 60), (40, len(TWO_FRAMES) - 3), (5, len(_frame(chunk_json("Hel", role="assistant"))))])
def test_fragment_boundaries_do_not_change_output(cuts):
    a, b = cuts
    dec = _decoder()
    out: List[ChatCompletionChunk] = []
    for piece in (TWO_FRAMES[:a], TWO_FRAMES[a:b], TWO_FRAMES[b:]):
        out.extend(dec.feed(piece))
    assert _contents(out) == ["Hel", "lo"]  # nosec B101


def test_byte_by_byte_delivery():
    dec = _decoder()
    out = list(dec.iter_events(TWO_FRAMES[i:i + 1] for i in range(len(TWO_FRAMES))))
    assert _contents(out) == ["Hel", "lo"]  # nosec B101
    assert dec.finish_reason == FINISH_EOF  # nosec B101


def test_done_sentinel_ends_stream_despite_trailing_bytes():
    dec = _decoder()
    out = dec.feed(_frame(chunk_json("a")) + b"data: [DONE]\n\n" + _frame(chunk_json("never")))
    assert _contents(out) == ["a"]  # nosec B101
    assert dec.finished and dec.finish_reason == FINISH_SENTINEL  # nosec B101
    assert dec.feed(_frame(chunk_json("late"))) == []  # nosec B101


def test_sentinel_stops_pulling_fragments():
    pulled: List[int] = []

    def source() -> Iterator[bytes]:
        for i, part in enumerate([_frame(chunk_json("x")), b"data: [DONE]\n\n", _frame(chunk_json("y"))]):
            pulled.append(i)
            yield part

    out = list(_decoder().iter_events(source()))
    assert _contents(out) == ["x"]  # nosec B101
    assert pulled == [0, 1]  # nosec B101


def test_malformed_frame_is_skipped_and_logged(log_capture):
    dec = _decoder()
    out = dec.feed(_frame(chunk_json("before")) + b"data: {not json\n\n" + _frame(chunk_json("after")))
    assert _contents(out) == ["before", "after"]  # nosec B101
    assert dec.emitted == 2 and dec.skipped == 1  # nosec B101
    names = [e["event"] for e in events(log_capture)]
    assert "stream.decode_error" in names  # nosec B101


def test_valid_json_with_wrong_shape_is_skipped():
    dec = _decoder()
    out = dec.feed(b'data: {"hello": "world"}\n\n' + _frame(chunk_json("ok")))
    assert _contents(out) == ["ok"]  # nosec B101
    assert dec.skipped == 1  # nosec B101


def test_crlf_framing():
    raw = TWO_FRAMES.replace(b"\n", b"\r\n")
    dec = _decoder()
    out = dec.feed(raw[:30]) + dec.feed(raw[30:])
    assert _contents(out) == ["Hel", "lo"]  # nosec B101


def test_crlf_split_between_fragments():
    raw = _frame(chunk_json("z")).replace(b"\n", b"\r\n")
    dec = _decoder()
    out = dec.feed(raw[:-3]) + dec.feed(raw[-3:-1]) + dec.feed(raw[-1:])
    assert _contents(out) == ["z"]  # nosec B101


def test_lone_cr_framing():
    dec = EventStreamDecoder(str)
    assert dec.feed(b"data: a\r\rdata: b\r\r") == ["a"]  # nosec B101
    assert dec.feed(b"data: c\r") == ["b"]  # nosec B101
    assert dec.close() == []  # nosec B101
    assert dec.finish_reason == FINISH_EOF  # nosec B101


def test_held_cr_completes_frame_at_eof():
    assert list(EventStreamDecoder(str).iter_events([b"data: a\r", b"\r"])) == ["a"]  # nosec B101


def test_multibyte_character_split_across_fragments():
    raw = _frame(json.dumps(json.loads(chunk_json("héllo ☃")), ensure_ascii=False))
    split = raw.index("☃".encode("utf-8")) + 1
    dec = _decoder()
    out = dec.feed(raw[:split]) + dec.feed(raw[split:])
    assert _contents(out) == ["héllo ☃"]  # nosec B101


def test_keepalive_and_comment_lines_ignored():
    raw = b": ping\n\n" + b"data:\n\n" + _frame(chunk_json("k"))
    assert _contents(_decoder().feed(raw)) == ["k"]  # nosec B101


def test_multiline_data_joined_with_newline():
    received: List[str] = []
    dec: EventStreamDecoder[str] = EventStreamDecoder(lambda p: received.append(p) or p)
    dec.feed(b"data: first\ndata: second\n\n")
    assert received == ["first\nsecond"]  # nosec B101


def test_eof_drops_unterminated_frame():
    dec = _decoder()
    out = list(dec.iter_events([_frame(chunk_json("done")), b'data: {"id": "partial']))
    assert _contents(out) == ["done"]  # nosec B101
    assert dec.finished and dec.finish_reason == FINISH_EOF  # nosec B101
    assert dec.pending == ""  # nosec B101


def test_async_iteration_matches_sync():
    async def source() -> AsyncIterator[bytes]:
        for i in range(0, len(TWO_FRAMES), 11):
            yield TWO_FRAMES[i:i + 11]

    async def run() -> List[ChatCompletionChunk]:
        return [evt async for evt in _decoder().aiter_events(source())]

    assert _contents(asyncio.run(run())) == ["Hel", "lo"]  # nosec B101
