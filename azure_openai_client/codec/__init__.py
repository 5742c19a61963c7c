"""Variant codec: shape-based encode/decode for polymorphic wire fields."""

from .content import ContentPart, ContentPartType, ImageDetail, ImageUrl
from .function_parameters import (
    FunctionParameters,
    decode_function_parameters,
    encode_function_parameters,
)
from .json_value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    from_json_value,
    to_json_value,
)
from .variants import (
    Base64Vector,
    ChatContent,
    EmbeddingInput,
    EmbeddingText,
    EmbeddingTextList,
    EmbeddingTokenBatch,
    EmbeddingTokens,
    EmbeddingVector,
    FloatVector,
    PartsContent,
    Shape,
    StopList,
    StopSequence,
    StopText,
    TextContent,
    ToolChoice,
    ToolChoiceAuto,
    ToolChoiceFunction,
    ToolChoiceNone,
    ToolChoiceRequired,
    WireShape,
    as_floats,
    decode_content,
    decode_embedding_input,
    decode_embedding_vector,
    decode_stop,
    decode_tool_choice,
    decode_variant,
    encode_variant,
)

__all__ = [
    "ContentPart",
    "ContentPartType",
    "ImageDetail",
    "ImageUrl",
    "FunctionParameters",
    "decode_function_parameters",
    "encode_function_parameters",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "from_json_value",
    "to_json_value",
    "Base64Vector",
    "ChatContent",
    "EmbeddingInput",
    "EmbeddingText",
    "EmbeddingTextList",
    "EmbeddingTokenBatch",
    "EmbeddingTokens",
    "EmbeddingVector",
    "FloatVector",
    "PartsContent",
    "Shape",
    "StopList",
    "StopSequence",
    "StopText",
    "TextContent",
    "ToolChoice",
    "ToolChoiceAuto",
    "ToolChoiceFunction",
    "ToolChoiceNone",
    "ToolChoiceRequired",
    "WireShape",
    "as_floats",
    "decode_content",
    "decode_embedding_input",
    "decode_embedding_vector",
    "decode_stop",
    "decode_tool_choice",
    "decode_variant",
    "encode_variant",
]
