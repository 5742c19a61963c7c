"""JSON Schema container for tool function parameters."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..base.errors import EncodingError, UnrecognizedShape
from .json_value import JsonObject, from_json_value, to_json_value


class FunctionParameters:
    """Immutable JSON Schema object describing a function's arguments.

    The schema is held as a :class:`JsonObject`, so it is validated once at
    construction and round-trips through JSON without type coercion.
    """

    __slots__ = ("_schema",)

    def __init__(self, schema: JsonObject) -> None:
        if not isinstance(schema, JsonObject):
            raise EncodingError("function parameters must be a JSON object")
        self._schema = schema

    @classmethod
    def build(
        cls,
        type: str = "object",
        properties: Optional[Mapping[str, Any]] = None,
        required: Optional[Sequence[str]] = None,
    ) -> "FunctionParameters":
        """Assemble a schema from the common ``type``/``properties``/``required`` keys."""
        schema: Dict[str, Any] = {"type": type}
        if properties is not None:
            schema["properties"] = dict(properties)
        if required is not None:
            schema["required"] = list(required)
        return cls.from_schema(schema)

    @classmethod
    def from_schema(cls, schema: Mapping[str, Any]) -> "FunctionParameters":
        """Wrap an arbitrary schema mapping.

        Raises:
            EncodingError: the mapping contains a value outside the JSON leaf set.
        """
        if not isinstance(schema, Mapping):
            raise EncodingError(f"function parameters must be a mapping, got {type(schema).__name__}")
        node = to_json_value(schema, "$.parameters")
        return cls(node)  # type: ignore[arg-type]

    @property
    def schema(self) -> JsonObject:
        return self._schema

    def to_dict(self) -> Dict[str, Any]:
        return from_json_value(self._schema)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionParameters):
            return NotImplemented
        return self._schema == other._schema

    def __hash__(self) -> int:
        return hash(self._schema)

    def __repr__(self) -> str:
        return f"FunctionParameters({self.to_dict()!r})"


def decode_function_parameters(value: Any) -> FunctionParameters:
    """Decode the wire value of ``function.parameters``; only objects are accepted."""
    if isinstance(value, FunctionParameters):
        return value
    if not isinstance(value, dict):
        raise UnrecognizedShape(
            "function parameters must be a JSON object",
            field="parameters",
            observed=type(value).__name__,
        )
    try:
        return FunctionParameters.from_schema(value)
    except EncodingError as exc:
        raise UnrecognizedShape(exc.message, field="parameters", observed="object") from exc


def encode_function_parameters(value: FunctionParameters) -> Dict[str, Any]:
    return value.to_dict()


__all__ = [
    "FunctionParameters",
    "decode_function_parameters",
    "encode_function_parameters",
]
