"""Shape-based codec for polymorphic wire fields.

Several request and response fields have more than one legal JSON shape and
no discriminator tag (``stop`` may be a string or a list of strings, an
embedding may be a float array or a base64 string, and so on). Each such
field is modelled as a closed family of frozen dataclasses, one per shape.

Encoding is a direct tag-to-shape mapping (``to_wire``). Decoding walks an
explicit tuple of candidate :class:`Shape` entries and accepts the first one
whose structural probe matches. Candidate tuples must follow the global
:class:`WireShape` order below; this is checked when the module is imported.

Global shape priority::

    string -> number -> string_array -> number_array
           -> nested_number_array -> object_array -> object

Decoding raises :class:`UnrecognizedShape` when nothing matches. Values that
are already decoded variant instances pass through unchanged.
"""
from __future__ import annotations

import base64
import binascii
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Annotated, Any, Callable, Dict, List, Optional, Sequence, Tuple, Type, Union

from pydantic import PlainSerializer, PlainValidator, ValidationError

from ..base.errors import UnrecognizedShape
from .content import ContentPart


class WireShape(IntEnum):
    """Structural JSON shapes in decode priority order."""

    STRING = 1
    NUMBER = 2
    STRING_ARRAY = 3
    NUMBER_ARRAY = 4
    NESTED_NUMBER_ARRAY = 5
    OBJECT_ARRAY = 6
    OBJECT = 7


_MISMATCH = object()


@dataclass(frozen=True)
class Shape:
    """One decode candidate: a structural probe plus the variant it builds."""

    kind: WireShape
    probe: Callable[[Any], Any]
    build: Callable[[Any], Any]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _probe_string(value: Any) -> Any:
    return value if isinstance(value, str) else _MISMATCH


def _probe_string_array(value: Any) -> Any:
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return tuple(value)
    return _MISMATCH


def _probe_float_array(value: Any) -> Any:
    if isinstance(value, list) and all(_is_number(v) for v in value):
        return tuple(float(v) for v in value)
    return _MISMATCH


def _probe_integer_array(value: Any) -> Any:
    if isinstance(value, list) and all(_is_integer(v) for v in value):
        return tuple(value)
    return _MISMATCH


def _probe_nested_integer_array(value: Any) -> Any:
    if not isinstance(value, list):
        return _MISMATCH
    rows = []
    for row in value:
        inner = _probe_integer_array(row)
        if inner is _MISMATCH:
            return _MISMATCH
        rows.append(inner)
    return tuple(rows)


def _probe_content_parts(value: Any) -> Any:
    if not isinstance(value, list):
        return _MISMATCH
    parts = []
    for item in value:
        if isinstance(item, ContentPart):
            parts.append(item)
            continue
        if not isinstance(item, dict):
            return _MISMATCH
        try:
            parts.append(ContentPart.model_validate(item))
        except ValidationError:
            return _MISMATCH
    return tuple(parts)


def _observed(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _check_order(field: str, shapes: Sequence[Shape]) -> Tuple[Shape, ...]:
    kinds = [s.kind for s in shapes]
    if kinds != sorted(kinds):
        raise RuntimeError(f"shape candidates for {field!r} are out of priority order: {kinds}")
    return tuple(shapes)


def decode_variant(value: Any, *, field: str, variants: Tuple[Type, ...], shapes: Sequence[Shape]) -> Any:
    """Decode ``value`` against ``shapes`` in order.

    Raises:
        UnrecognizedShape: no candidate shape matches.
    """
    if isinstance(value, variants):
        return value
    for shape in shapes:
        payload = shape.probe(value)
        if payload is not _MISMATCH:
            return shape.build(payload)
    observed = _observed(value)
    raise UnrecognizedShape(
        f"{field}: no candidate shape matches a JSON {observed}",
        field=field,
        observed=observed,
    )


def encode_variant(value: Any) -> Any:
    """Return the JSON shape that corresponds to the variant's tag."""
    return value.to_wire()


def _tuple_field(instance: Any, name: str) -> None:
    value = getattr(instance, name)
    if not isinstance(value, tuple):
        object.__setattr__(instance, name, tuple(value))


# ---------------------------------------------------------------- content


@dataclass(frozen=True)
class TextContent:
    text: str

    def to_wire(self) -> str:
        return self.text


@dataclass(frozen=True)
class PartsContent:
    parts: Tuple[ContentPart, ...]

    def __post_init__(self) -> None:
        _tuple_field(self, "parts")

    def to_wire(self) -> List[Dict[str, Any]]:
        return [p.model_dump(mode="json", exclude_none=True) for p in self.parts]


ChatContent = Union[TextContent, PartsContent]

CONTENT_SHAPES = _check_order(
    "content",
    (
        Shape(WireShape.STRING, _probe_string, TextContent),
        Shape(WireShape.OBJECT_ARRAY, _probe_content_parts, PartsContent),
    ),
)


def decode_content(value: Any) -> ChatContent:
    return decode_variant(value, field="content", variants=(TextContent, PartsContent), shapes=CONTENT_SHAPES)


# ---------------------------------------------------------------- stop


@dataclass(frozen=True)
class StopText:
    value: str

    def to_wire(self) -> str:
        return self.value


@dataclass(frozen=True)
class StopList:
    values: Tuple[str, ...]

    def __post_init__(self) -> None:
        _tuple_field(self, "values")

    def to_wire(self) -> List[str]:
        return list(self.values)


StopSequence = Union[StopText, StopList]

STOP_SHAPES = _check_order(
    "stop",
    (
        Shape(WireShape.STRING, _probe_string, StopText),
        Shape(WireShape.STRING_ARRAY, _probe_string_array, StopList),
    ),
)


def decode_stop(value: Any) -> StopSequence:
    return decode_variant(value, field="stop", variants=(StopText, StopList), shapes=STOP_SHAPES)


# ---------------------------------------------------------------- tool choice


@dataclass(frozen=True)
class ToolChoiceNone:
    def to_wire(self) -> str:
        return "none"


@dataclass(frozen=True)
class ToolChoiceAuto:
    def to_wire(self) -> str:
        return "auto"


@dataclass(frozen=True)
class ToolChoiceRequired:
    def to_wire(self) -> str:
        return "required"


@dataclass(frozen=True)
class ToolChoiceFunction:
    name: str

    def to_wire(self) -> Dict[str, Any]:
        return {"type": "function", "function": {"name": self.name}}


ToolChoice = Union[ToolChoiceNone, ToolChoiceAuto, ToolChoiceRequired, ToolChoiceFunction]

_TOOL_CHOICE_KEYWORDS = {
    "none": ToolChoiceNone,
    "auto": ToolChoiceAuto,
    "required": ToolChoiceRequired,
}


def _probe_tool_choice_keyword(value: Any) -> Any:
    if isinstance(value, str) and value in _TOOL_CHOICE_KEYWORDS:
        return value
    return _MISMATCH


def _probe_named_function(value: Any) -> Any:
    if not isinstance(value, dict) or value.get("type") != "function":
        return _MISMATCH
    function = value.get("function")
    if not isinstance(function, dict) or not isinstance(function.get("name"), str):
        return _MISMATCH
    return function["name"]


TOOL_CHOICE_SHAPES = _check_order(
    "tool_choice",
    (
        Shape(WireShape.STRING, _probe_tool_choice_keyword, lambda kw: _TOOL_CHOICE_KEYWORDS[kw]()),
        Shape(WireShape.OBJECT, _probe_named_function, ToolChoiceFunction),
    ),
)


def decode_tool_choice(value: Any) -> ToolChoice:
    return decode_variant(
        value,
        field="tool_choice",
        variants=(ToolChoiceNone, ToolChoiceAuto, ToolChoiceRequired, ToolChoiceFunction),
        shapes=TOOL_CHOICE_SHAPES,
    )


# ---------------------------------------------------------------- embedding input


@dataclass(frozen=True)
class EmbeddingText:
    text: str

    def to_wire(self) -> str:
        return self.text


@dataclass(frozen=True)
class EmbeddingTextList:
    texts: Tuple[str, ...]

    def __post_init__(self) -> None:
        _tuple_field(self, "texts")

    def to_wire(self) -> List[str]:
        return list(self.texts)


@dataclass(frozen=True)
class EmbeddingTokens:
    tokens: Tuple[int, ...]

    def __post_init__(self) -> None:
        _tuple_field(self, "tokens")

    def to_wire(self) -> List[int]:
        return list(self.tokens)


@dataclass(frozen=True)
class EmbeddingTokenBatch:
    batches: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "batches", tuple(tuple(row) for row in self.batches))

    def to_wire(self) -> List[List[int]]:
        return [list(row) for row in self.batches]


EmbeddingInput = Union[EmbeddingText, EmbeddingTextList, EmbeddingTokens, EmbeddingTokenBatch]

# An empty array matches STRING_ARRAY first and decodes as an empty text list.
EMBEDDING_INPUT_SHAPES = _check_order(
    "input",
    (
        Shape(WireShape.STRING, _probe_string, EmbeddingText),
        Shape(WireShape.STRING_ARRAY, _probe_string_array, EmbeddingTextList),
        Shape(WireShape.NUMBER_ARRAY, _probe_integer_array, EmbeddingTokens),
        Shape(WireShape.NESTED_NUMBER_ARRAY, _probe_nested_integer_array, EmbeddingTokenBatch),
    ),
)


def decode_embedding_input(value: Any) -> EmbeddingInput:
    return decode_variant(
        value,
        field="input",
        variants=(EmbeddingText, EmbeddingTextList, EmbeddingTokens, EmbeddingTokenBatch),
        shapes=EMBEDDING_INPUT_SHAPES,
    )


# ---------------------------------------------------------------- embedding vector

# Base64 embeddings are packed IEEE-754 binary32 values, little-endian,
# regardless of host byte order.
_FLOAT32 = struct.Struct("<f")


@dataclass(frozen=True)
class Base64Vector:
    data: str

    def to_wire(self) -> str:
        return self.data

    def to_bytes(self) -> Optional[bytes]:
        """Return the decoded blob, or ``None`` when ``data`` is not valid base64."""
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError):
            return None

    def to_floats(self) -> Optional[List[float]]:
        """Unpack the blob as little-endian float32 values.

        Returns ``None`` when the payload is not valid base64 or its length
        is not a multiple of four bytes.
        """
        raw = self.to_bytes()
        if raw is None or len(raw) % _FLOAT32.size:
            return None
        return [v for (v,) in _FLOAT32.iter_unpack(raw)]

    @classmethod
    def from_floats(cls, values: Sequence[float]) -> "Base64Vector":
        raw = b"".join(_FLOAT32.pack(v) for v in values)
        return cls(base64.b64encode(raw).decode("ascii"))


@dataclass(frozen=True)
class FloatVector:
    values: Tuple[float, ...]

    def __post_init__(self) -> None:
        _tuple_field(self, "values")

    def to_wire(self) -> List[float]:
        return list(self.values)

    def to_floats(self) -> List[float]:
        return list(self.values)


EmbeddingVector = Union[Base64Vector, FloatVector]

EMBEDDING_VECTOR_SHAPES = _check_order(
    "embedding",
    (
        Shape(WireShape.STRING, _probe_string, Base64Vector),
        Shape(WireShape.NUMBER_ARRAY, _probe_float_array, FloatVector),
    ),
)


def decode_embedding_vector(value: Any) -> EmbeddingVector:
    return decode_variant(
        value, field="embedding", variants=(Base64Vector, FloatVector), shapes=EMBEDDING_VECTOR_SHAPES
    )


def as_floats(vector: EmbeddingVector) -> Optional[List[float]]:
    """Return the vector as floats, decoding base64 when necessary."""
    return vector.to_floats()


# ---------------------------------------------------------------- pydantic field types

ChatContentField = Annotated[ChatContent, PlainValidator(decode_content), PlainSerializer(encode_variant)]
StopSequenceField = Annotated[StopSequence, PlainValidator(decode_stop), PlainSerializer(encode_variant)]
ToolChoiceField = Annotated[ToolChoice, PlainValidator(decode_tool_choice), PlainSerializer(encode_variant)]
EmbeddingInputField = Annotated[
    EmbeddingInput, PlainValidator(decode_embedding_input), PlainSerializer(encode_variant)
]
EmbeddingVectorField = Annotated[
    EmbeddingVector, PlainValidator(decode_embedding_vector), PlainSerializer(encode_variant)
]


__all__ = [
    "WireShape",
    "Shape",
    "decode_variant",
    "encode_variant",
    "TextContent",
    "PartsContent",
    "ChatContent",
    "decode_content",
    "StopText",
    "StopList",
    "StopSequence",
    "decode_stop",
    "ToolChoiceNone",
    "ToolChoiceAuto",
    "ToolChoiceRequired",
    "ToolChoiceFunction",
    "ToolChoice",
    "decode_tool_choice",
    "EmbeddingText",
    "EmbeddingTextList",
    "EmbeddingTokens",
    "EmbeddingTokenBatch",
    "EmbeddingInput",
    "decode_embedding_input",
    "Base64Vector",
    "FloatVector",
    "EmbeddingVector",
    "decode_embedding_vector",
    "as_floats",
    "ChatContentField",
    "StopSequenceField",
    "ToolChoiceField",
    "EmbeddingInputField",
    "EmbeddingVectorField",
]
