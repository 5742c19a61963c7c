"""Content-type inference for uploaded files, by filename extension only."""
from __future__ import annotations

import posixpath
from typing import Dict

DEFAULT_CONTENT_TYPE = "application/octet-stream"

_EXTENSION_TYPES: Dict[str, str] = {
    "mp3": "audio/mpeg",
    "mp4": "audio/mp4",
    "m4a": "audio/mp4",
    "wav": "audio/wav",
    "webm": "audio/webm",
    "flac": "audio/flac",
    "ogg": "audio/ogg",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
}


def mime_type_for(filename: str) -> str:
    """Return the content type for ``filename``; unknown extensions map to octet-stream."""
    _, ext = posixpath.splitext(filename)
    return _EXTENSION_TYPES.get(ext[1:].lower(), DEFAULT_CONTENT_TYPE)


__all__ = ["mime_type_for", "DEFAULT_CONTENT_TYPE"]
