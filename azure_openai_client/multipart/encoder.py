"""multipart/form-data body assembly for file-upload endpoints.

Parts are written in the order given; the request models fix that order per
endpoint. Each part is framed as::

    --{boundary}\\r\\n
    Content-Disposition: form-data; name="{name}"[; filename="{filename}"]\\r\\n
    [Content-Type: {content_type}\\r\\n]
    \\r\\n
    {payload}\\r\\n

and the body ends with ``--{boundary}--\\r\\n``.

Every failure is reported as :class:`EncodingError`: text that is not valid
UTF-8 (lone surrogates), header values containing quotes or line breaks, an
invalid boundary, or a boundary that occurs inside a payload.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from ..base.constants import MAX_BOUNDARY_LENGTH, MULTIPART_CONTENT_TYPE
from ..base.errors import EncodingError
from .mime import mime_type_for

_CRLF = b"\r\n"
_FORBIDDEN_HEADER_CHARS = ('"', "\r", "\n")


@dataclass(frozen=True)
class MultipartPart:
    """One form field: text, or binary content with a filename."""

    name: str
    value: Union[str, bytes]
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def text(cls, name: str, value: str) -> "MultipartPart":
        return cls(name=name, value=value)

    @classmethod
    def file(cls, name: str, data: bytes, filename: str, content_type: Optional[str] = None) -> "MultipartPart":
        """Binary part; the content type is inferred from ``filename`` when not given."""
        return cls(name=name, value=data, filename=filename, content_type=content_type or mime_type_for(filename))


def make_boundary() -> str:
    return f"Boundary-{str(uuid.uuid4()).upper()}"


def content_type_header(boundary: str) -> str:
    return f"{MULTIPART_CONTENT_TYPE}; boundary={boundary}"


def _utf8(text: str, what: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"{what} is not encodable as UTF-8", cause=exc) from exc


def _header_value(value: str, what: str) -> str:
    if any(ch in value for ch in _FORBIDDEN_HEADER_CHARS):
        raise EncodingError(f"{what} contains a quote or line break: {value!r}")
    return value


def _check_boundary(boundary: str) -> bytes:
    if not boundary or len(boundary) > MAX_BOUNDARY_LENGTH:
        raise EncodingError(f"multipart boundary must be 1-{MAX_BOUNDARY_LENGTH} characters")
    _header_value(boundary, "boundary")
    return _utf8(boundary, "boundary")


def encode_multipart(parts: Iterable[MultipartPart], boundary: str) -> bytes:
    """Serialize ``parts`` into one multipart body framed by ``boundary``.

    Raises:
        EncodingError: see module docstring.
    """
    token = _check_boundary(boundary)
    delimiter = b"--" + token
    chunks: List[bytes] = []
    for part in parts:
        name = _header_value(part.name, "part name")
        disposition = f'Content-Disposition: form-data; name="{name}"'
        if part.filename is not None:
            disposition += f'; filename="{_header_value(part.filename, "filename")}"'
        payload = part.value if isinstance(part.value, bytes) else _utf8(part.value, f"part {name!r}")
        if token in payload:
            raise EncodingError(f"multipart boundary occurs inside part {name!r}")

        chunks.append(delimiter + _CRLF)
        chunks.append(_utf8(disposition, "part header") + _CRLF)
        if part.content_type is not None:
            chunks.append(_utf8(f"Content-Type: {_header_value(part.content_type, 'content type')}", "part header") + _CRLF)
        chunks.append(_CRLF)
        chunks.append(payload)
        chunks.append(_CRLF)
    chunks.append(delimiter + b"--" + _CRLF)
    return b"".join(chunks)


__all__ = ["MultipartPart", "make_boundary", "content_type_header", "encode_multipart"]
