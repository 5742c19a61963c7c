"""
Tool definitions and tool calls for chat completions.

``FunctionDefinition.parameters`` is an open-ended JSON Schema carried as a
:class:`FunctionParameters` value, so nested numbers, booleans and nulls keep
their JSON types through a request/response round trip.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Mapping, Optional

from pydantic import PlainSerializer, PlainValidator

from ..codec.function_parameters import (
    FunctionParameters,
    decode_function_parameters,
    encode_function_parameters,
)
from .common import WireModel

FunctionParametersField = Annotated[
    FunctionParameters,
    PlainValidator(decode_function_parameters),
    PlainSerializer(encode_function_parameters),
]


class ToolType(str, Enum):
    FUNCTION = "function"


class FunctionDefinition(WireModel):
    name: str
    description: Optional[str] = None
    parameters: Optional[FunctionParametersField] = None


class Tool(WireModel):
    """A tool the model may call."""

    type: ToolType = ToolType.FUNCTION
    function: FunctionDefinition

    @classmethod
    def function_tool(
        cls,
        name: str,
        description: Optional[str] = None,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> "Tool":
        params = FunctionParameters.from_schema(parameters) if parameters is not None else None
        return cls(function=FunctionDefinition(name=name, description=description, parameters=params))


class FunctionCall(WireModel):
    """Function invocation produced by the model; ``arguments`` is a JSON string."""

    name: str
    arguments: str


class ToolCall(WireModel):
    id: str
    type: str = "function"
    function: FunctionCall


__all__ = [
    "FunctionParametersField",
    "ToolType",
    "FunctionDefinition",
    "Tool",
    "FunctionCall",
    "ToolCall",
]
