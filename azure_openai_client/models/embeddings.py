"""Embedding request and response models."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from ..codec.variants import EmbeddingInputField, EmbeddingVectorField, as_floats
from .common import Usage, WireModel


class EncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


class EmbeddingRequest(WireModel):
    input: EmbeddingInputField
    user: Optional[str] = None
    encoding_format: Optional[EncodingFormat] = None
    dimensions: Optional[int] = None


class EmbeddingData(WireModel):
    object: str
    index: int
    embedding: EmbeddingVectorField

    def floats(self) -> Optional[List[float]]:
        """Embedding as floats; ``None`` when a base64 payload is malformed."""
        return as_floats(self.embedding)


class EmbeddingResponse(WireModel):
    object: str
    data: List[EmbeddingData]
    model: str
    usage: Usage


__all__ = ["EncodingFormat", "EmbeddingRequest", "EmbeddingData", "EmbeddingResponse"]
