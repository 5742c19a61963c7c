"""Multimodal message content parts."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ContentPartType(str, Enum):
    TEXT = "text"
    IMAGE_URL = "image_url"


class ImageDetail(str, Enum):
    AUTO = "auto"
    LOW = "low"
    HIGH = "high"


class ImageUrl(BaseModel):
    """Image reference for vision deployments (URL or ``data:`` URI)."""

    model_config = ConfigDict(frozen=True)

    url: str
    detail: Optional[ImageDetail] = None


class ContentPart(BaseModel):
    """One element of a multimodal ``content`` array."""

    model_config = ConfigDict(frozen=True)

    type: ContentPartType
    text: Optional[str] = None
    image_url: Optional[ImageUrl] = None

    @classmethod
    def of_text(cls, text: str) -> "ContentPart":
        return cls(type=ContentPartType.TEXT, text=text)

    @classmethod
    def of_image(cls, url: str, detail: Optional[ImageDetail] = None) -> "ContentPart":
        return cls(type=ContentPartType.IMAGE_URL, image_url=ImageUrl(url=url, detail=detail))


__all__ = ["ContentPart", "ContentPartType", "ImageUrl", "ImageDetail"]
