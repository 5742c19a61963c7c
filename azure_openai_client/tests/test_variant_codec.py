"""Shape-based decoding of polymorphic fields.

Covers:
- Encode-then-decode keeps the variant tag for every field family.
- String candidates are always tried before object candidates.
- Values matching no candidate raise UnrecognizedShape naming the field.
- Candidate order is checked against the global priority.
"""
from __future__ import annotations

import pytest

from azure_openai_client.base.errors import UnrecognizedShape
from azure_openai_client.codec import (
    ContentPart,
    EmbeddingText,
    EmbeddingTextList,
    EmbeddingTokenBatch,
    EmbeddingTokens,
    PartsContent,
    StopList,
    StopText,
    TextContent,
    ToolChoiceAuto,
    ToolChoiceFunction,
    ToolChoiceNone,
    ToolChoiceRequired,
    decode_content,
    decode_embedding_input,
    decode_stop,
    decode_tool_choice,
    encode_variant,
)
from azure_openai_client.codec.variants import Shape, WireShape, _check_order, _probe_string


@pytest.mark.parametrize(
    "variant, decode",
    [
        (StopText("END"), decode_stop),
        (StopList(("a", "b")), decode_stop),
        (ToolChoiceNone(), decode_tool_choice),
        (ToolChoiceAuto(), decode_tool_choice),
        (ToolChoiceRequired(), decode_tool_choice),
        (ToolChoiceFunction("get_weather"), decode_tool_choice),
        (EmbeddingText("hello"), decode_embedding_input),
        (EmbeddingTextList(("a", "b")), decode_embedding_input),
        (EmbeddingTokens((1, 2, 3)), decode_embedding_input),
        (EmbeddingTokenBatch(((1, 2), (3,))), decode_embedding_input),
        (TextContent("hi"), decode_content),
        (PartsContent((ContentPart.of_text("look"), ContentPart.of_image("https://x/y.png"))), decode_content),
    ],
)
def test_decode_of_encoded_variant_keeps_tag_and_payload(variant, decode):
    decoded = decode(encode_variant(variant))
    assert type(decoded) is type(variant)  # nosec B101
    assert decoded == variant  # nosec B101


def test_tool_choice_none_string_never_tried_as_object():
    assert decode_tool_choice("none") == ToolChoiceNone()  # nosec B101
    assert decode_tool_choice("auto") == ToolChoiceAuto()  # nosec B101


def test_tool_choice_named_function_wire_shape():
    wire = ToolChoiceFunction("lookup").to_wire()
    assert wire == {"type": "function", "function": {"name": "lookup"}}  # nosec B101
    assert decode_tool_choice(wire) == ToolChoiceFunction("lookup")  # nosec B101


def test_unknown_tool_choice_keyword_is_rejected():
    with pytest.raises(UnrecognizedShape) as info:
        decode_tool_choice("sometimes")
    assert info.value.field == "tool_choice"  # nosec B101
    assert info.value.observed == "string"  # nosec B101


def test_stop_rejects_number_and_mixed_array():
    with pytest.raises(UnrecognizedShape):
        decode_stop(5)
    with pytest.raises(UnrecognizedShape) as info:
        decode_stop(["a", 1])
    assert info.value.observed == "array"  # nosec B101


def test_embedding_input_prefers_token_list_over_batch():
    assert decode_embedding_input([1, 2]) == EmbeddingTokens((1, 2))  # nosec B101
    assert decode_embedding_input([[1, 2], [3]]) == EmbeddingTokenBatch(((1, 2), (3,)))  # nosec B101


def test_empty_embedding_input_array_decodes_as_text_list():
    assert decode_embedding_input([]) == EmbeddingTextList(())  # nosec B101


def test_booleans_are_not_tokens():
    with pytest.raises(UnrecognizedShape):
        decode_embedding_input([True, False])


def test_content_parts_require_known_part_type():
    with pytest.raises(UnrecognizedShape) as info:
        decode_content([{"type": "audio", "data": "..."}])
    assert info.value.field == "content"  # nosec B101


def test_decoded_variants_pass_through():
    value = StopList(["x"])
    assert decode_stop(value) is value  # nosec B101
    assert value.values == ("x",)  # nosec B101


def test_candidate_order_is_enforced():
    shapes = (
        Shape(WireShape.OBJECT, _probe_string, str),
        Shape(WireShape.STRING, _probe_string, str),
    )
    with pytest.raises(RuntimeError):
        _check_order("broken", shapes)


def test_unrecognized_shape_is_a_value_error():
    assert issubclass(UnrecognizedShape, ValueError)  # nosec B101
