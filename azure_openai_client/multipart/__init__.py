"""Multipart request encoder for file-upload endpoints."""

from .encoder import MultipartPart, content_type_header, encode_multipart, make_boundary
from .mime import DEFAULT_CONTENT_TYPE, mime_type_for

__all__ = [
    "MultipartPart",
    "content_type_header",
    "encode_multipart",
    "make_boundary",
    "mime_type_for",
    "DEFAULT_CONTENT_TYPE",
]
