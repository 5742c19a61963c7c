"""
Shared wire-model base and the models common to every endpoint.

All request/response models derive from :class:`WireModel`. Field names are
declared in lower snake case, which is also the wire naming, so the JSON
mapping is the identity. Unset optional fields are omitted from request
bodies.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class WireModel(BaseModel):
    """Base class for JSON request and response bodies."""

    model_config = ConfigDict(arbitrary_types_allowed=True, use_enum_values=False)

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping sent on the wire."""
        return self.model_dump(mode="json", exclude_none=True)


class Usage(WireModel):
    """Token usage returned by most endpoints."""

    prompt_tokens: int
    completion_tokens: Optional[int] = None
    total_tokens: int


class ApiErrorDetail(WireModel):
    """The ``error`` object of a structured error body."""

    message: str
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[str] = None

    @field_validator("code", "param", mode="before")
    @classmethod
    def _stringify(cls, value: Union[str, int, None]) -> Optional[str]:
        # The service sometimes sends numeric codes ("code": 429).
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ErrorResponse(WireModel):
    """``{"error": {...}}`` body returned with non-success statuses."""

    error: ApiErrorDetail


__all__ = ["WireModel", "Usage", "ApiErrorDetail", "ErrorResponse"]
