"""Image generation, variation and edit models."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from ..multipart.encoder import MultipartPart
from .common import WireModel


class ImageQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class ImageResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"


class ImageSize(str, Enum):
    SIZE_256 = "256x256"
    SIZE_512 = "512x512"
    SIZE_1024 = "1024x1024"
    SIZE_1792X1024 = "1792x1024"
    SIZE_1024X1792 = "1024x1792"


class ImageStyle(str, Enum):
    VIVID = "vivid"
    NATURAL = "natural"


class ImageGenerationRequest(WireModel):
    """JSON body for ``images/generations``."""

    prompt: str
    model: Optional[str] = None
    n: Optional[int] = None
    quality: Optional[ImageQuality] = None
    response_format: Optional[ImageResponseFormat] = None
    size: Optional[ImageSize] = None
    style: Optional[ImageStyle] = None
    user: Optional[str] = None


class ImageVariationRequest(WireModel):
    image: bytes
    image_filename: str
    model: Optional[str] = None
    n: Optional[int] = None
    response_format: Optional[ImageResponseFormat] = None
    size: Optional[ImageSize] = None
    user: Optional[str] = None

    def to_multipart_parts(self) -> List[MultipartPart]:
        parts = [MultipartPart.file("image", self.image, self.image_filename)]
        if self.model is not None:
            parts.append(MultipartPart.text("model", self.model))
        if self.n is not None:
            parts.append(MultipartPart.text("n", str(self.n)))
        if self.response_format is not None:
            parts.append(MultipartPart.text("response_format", self.response_format.value))
        if self.size is not None:
            parts.append(MultipartPart.text("size", self.size.value))
        if self.user is not None:
            parts.append(MultipartPart.text("user", self.user))
        return parts


class ImageEditRequest(WireModel):
    """Edit an image from a prompt, optionally restricted by a mask.

    The mask part is sent only when both ``mask`` and ``mask_filename`` are
    set.
    """

    image: bytes
    image_filename: str
    prompt: str
    size: ImageSize
    mask: Optional[bytes] = None
    mask_filename: Optional[str] = None
    model: Optional[str] = None
    n: Optional[int] = None

    def to_multipart_parts(self) -> List[MultipartPart]:
        parts = [
            MultipartPart.file("image", self.image, self.image_filename),
            MultipartPart.text("prompt", self.prompt),
        ]
        if self.mask is not None and self.mask_filename is not None:
            parts.append(MultipartPart.file("mask", self.mask, self.mask_filename))
        parts.append(MultipartPart.text("size", self.size.value))
        if self.model is not None:
            parts.append(MultipartPart.text("model", self.model))
        if self.n is not None:
            parts.append(MultipartPart.text("n", str(self.n)))
        return parts


class ImageData(WireModel):
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None


class ImageGenerationResponse(WireModel):
    created: int
    data: List[ImageData]


__all__ = [
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "ImageGenerationRequest",
    "ImageVariationRequest",
    "ImageEditRequest",
    "ImageData",
    "ImageGenerationResponse",
]
