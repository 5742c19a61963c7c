"""Embedding vectors: float arrays and packed base64 payloads."""
from __future__ import annotations

import base64
import struct

import pytest

from azure_openai_client.base.errors import UnrecognizedShape
from azure_openai_client.codec import Base64Vector, FloatVector, as_floats, decode_embedding_vector
from azure_openai_client.models import EmbeddingData, EmbeddingRequest, EmbeddingResponse


def test_base64_payload_is_little_endian_float32():
    raw = struct.pack("<3f", 1.0, -2.5, 0.25)
    vec = decode_embedding_vector(base64.b64encode(raw).decode("ascii"))
    assert isinstance(vec, Base64Vector)  # nosec B101
    assert vec.to_floats() == [1.0, -2.5, 0.25]  # nosec B101


def test_from_floats_packs_the_same_bytes():
    vec = Base64Vector.from_floats([0.5, 4.0])
    assert base64.b64decode(vec.data) == struct.pack("<2f", 0.5, 4.0)  # nosec B101


def test_invalid_base64_yields_none():
    assert Base64Vector("not base64!!").to_floats() is None  # nosec B101


def test_length_not_multiple_of_four_yields_none():
    data = base64.b64encode(b"\x00\x00\x80\x3f\x01").decode("ascii")
    assert Base64Vector(data).to_floats() is None  # nosec B101


def test_float_array_decodes_as_float_vector():
    vec = decode_embedding_vector([1, 0.5, -3])
    assert vec == FloatVector((1.0, 0.5, -3.0))  # nosec B101
    assert as_floats(vec) == [1.0, 0.5, -3.0]  # nosec B101


def test_object_is_not_an_embedding():
    with pytest.raises(UnrecognizedShape):
        decode_embedding_vector({"values": []})


def test_embedding_response_decodes_both_encodings():
    packed = base64.b64encode(struct.pack("<2f", 1.0, 2.0)).decode("ascii")
    body = {
        "object": "list",
        "data": [
            {"object": "embedding", "index": 0, "embedding": [0.1, 0.2]},
            {"object": "embedding", "index": 1, "embedding": packed},
        ],
        "model": "text-embedding-3-small",
        "usage": {"prompt_tokens": 4, "total_tokens": 4},
    }
    resp = EmbeddingResponse.model_validate(body)
    assert isinstance(resp.data[0].embedding, FloatVector)  # nosec B101
    assert isinstance(resp.data[1].embedding, Base64Vector)  # nosec B101
    assert resp.data[1].floats() == [1.0, 2.0]  # nosec B101
    assert resp.to_wire()["data"][1]["embedding"] == packed  # nosec B101


def test_embedding_request_accepts_plain_values():
    req = EmbeddingRequest(input=["one", "two"], encoding_format="base64")
    assert req.to_wire() == {"input": ["one", "two"], "encoding_format": "base64"}  # nosec B101


def test_embedding_data_rejects_unknown_shape():
    with pytest.raises(ValueError):
        EmbeddingData.model_validate({"object": "embedding", "index": 0, "embedding": True})
