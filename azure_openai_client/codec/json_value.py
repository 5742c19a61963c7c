"""Closed JSON value tree for open-ended schemas.

Function-parameter schemas are arbitrary JSON documents. Instead of passing
untyped Python objects through the request models, they are converted into a
small sum type (``JsonNull | JsonBool | JsonNumber | JsonString | JsonArray |
JsonObject``) by :func:`to_json_value` and back by :func:`from_json_value`.

The supported leaf set is closed: anything else raises
:class:`EncodingError` with the JSON path of the offending value. Booleans
are matched before numbers because ``bool`` is an ``int`` subclass in Python;
without that ordering ``True`` would be emitted as ``1``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union

from ..base.errors import EncodingError


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    value: Union[int, float]


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: Tuple["JsonValue", ...] = ()


@dataclass(frozen=True)
class JsonObject:
    members: Tuple[Tuple[str, "JsonValue"], ...] = ()

    def get(self, key: str, default: "JsonValue | None" = None) -> "JsonValue | None":
        for name, value in self.members:
            if name == key:
                return value
        return default

    def keys(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.members)


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]


def to_json_value(value: Any, path: str = "$") -> JsonValue:
    """Convert a plain Python JSON-like object into a :data:`JsonValue` tree.

    Raises:
        EncodingError: a leaf is not None/bool/int/float/str, a float is not
            finite, or an object key is not a string.
    """
    if value is None:
        return JsonNull()
    if isinstance(value, bool):
        return JsonBool(value)
    if isinstance(value, int):
        return JsonNumber(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"non-finite number at {path}: {value!r}")
        return JsonNumber(value)
    if isinstance(value, str):
        return JsonString(value)
    if isinstance(value, (list, tuple)):
        return JsonArray(tuple(to_json_value(item, f"{path}[{i}]") for i, item in enumerate(value)))
    if isinstance(value, Mapping):
        members = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(f"object key at {path} is not a string: {key!r}")
            members.append((key, to_json_value(item, f"{path}.{key}")))
        return JsonObject(tuple(members))
    raise EncodingError(f"unsupported JSON value at {path}: {type(value).__name__}")


def from_json_value(node: JsonValue) -> Any:
    """Convert a :data:`JsonValue` tree back into plain Python objects."""
    if isinstance(node, JsonNull):
        return None
    if isinstance(node, (JsonBool, JsonNumber, JsonString)):
        return node.value
    if isinstance(node, JsonArray):
        return [from_json_value(item) for item in node.items]
    if isinstance(node, JsonObject):
        out: Dict[str, Any] = {}
        for key, item in node.members:
            out[key] = from_json_value(item)
        return out
    raise EncodingError(f"not a JSON value node: {type(node).__name__}")


__all__ = [
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "JsonValue",
    "to_json_value",
    "from_json_value",
]
