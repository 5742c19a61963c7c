"""Multipart body framing, part order, and fallible encoding."""
from __future__ import annotations

import re

import pytest

from azure_openai_client.base.errors import EncodingError
from azure_openai_client.models import (
    AudioResponseFormat,
    AudioTranscriptionRequest,
    AudioTranslationRequest,
    ImageEditRequest,
    ImageResponseFormat,
    ImageSize,
    ImageVariationRequest,
)
from azure_openai_client.multipart import (
    MultipartPart,
    content_type_header,
    encode_multipart,
    make_boundary,
    mime_type_for,
)


def _names(parts):
    return [p.name for p in parts]


def test_exact_framing():
    body = encode_multipart(
        [MultipartPart.file("file", b"\x00\x01", "a.wav"), MultipartPart.text("model", "whisper-1")],
        "XYZ",
    )
    assert body == (  # nosec B101
        b"--XYZ\r\n"
        b'Content-Disposition: form-data; name="file"; filename="a.wav"\r\n'
        b"Content-Type: audio/wav\r\n"
        b"\r\n"
        b"\x00\x01\r\n"
        b"--XYZ\r\n"
        b'Content-Disposition: form-data; name="model"\r\n'
        b"\r\n"
        b"whisper-1\r\n"
        b"--XYZ--\r\n"
    )


def test_text_parts_are_utf8():
    body = encode_multipart([MultipartPart.text("prompt", "café")], "b")
    assert "café".encode("utf-8") in body  # nosec B101


def test_boundary_format_and_header():
    boundary = make_boundary()
    assert re.fullmatch(r"Boundary-[0-9A-F]{8}(-[0-9A-F]{4}){3}-[0-9A-F]{12}", boundary)  # nosec B101
    assert content_type_header(boundary) == f"multipart/form-data; boundary={boundary}"  # nosec B101
    assert make_boundary() != boundary  # nosec B101


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("a.mp3", "audio/mpeg"),
        ("a.MP4", "audio/mp4"),
        ("a.m4a", "audio/mp4"),
        ("a.webm", "audio/webm"),
        ("a.flac", "audio/flac"),
        ("a.ogg", "audio/ogg"),
        ("a.png", "image/png"),
        ("a.JPG", "image/jpeg"),
        ("a.jpeg", "image/jpeg"),
        ("a.gif", "image/gif"),
        ("a.webp", "image/webp"),
        ("a.bin", "application/octet-stream"),
        ("noext", "application/octet-stream"),
    ],
)
def test_mime_inference(filename, expected):
    assert mime_type_for(filename) == expected  # nosec B101


@pytest.mark.parametrize(
    "part",
    [
        MultipartPart.file("file", b"xx--B-1yy", "a.bin"),
        MultipartPart.text("prompt", "xx B-1 yy"),
        MultipartPart.file("file", b"B-1", "a.bin"),
    ],
)
def test_boundary_inside_payload_is_rejected(part):
    with pytest.raises(EncodingError, match="boundary occurs inside"):
        encode_multipart([part], "B-1")


@pytest.mark.parametrize("boundary", ["", "x" * 71, 'has"quote', "line\nbreak"])
def test_invalid_boundary_is_rejected(boundary):
    with pytest.raises(EncodingError):
        encode_multipart([MultipartPart.text("a", "b")], boundary)


@pytest.mark.parametrize(
    "part",
    [
        MultipartPart.text('na"me', "v"),
        MultipartPart.text("name\r\n", "v"),
        MultipartPart.file("file", b"x", 'evil".png'),
        MultipartPart.text("prompt", "lone \udc80 surrogate"),
    ],
)
def test_unencodable_parts_are_rejected(part):
    with pytest.raises(EncodingError):
        encode_multipart([part], "ok-boundary")


def test_transcription_part_order_full():
    req = AudioTranscriptionRequest(
        file=b"RIFF",
        filename="clip.wav",
        language="en",
        prompt="names",
        response_format=AudioResponseFormat.SRT,
        temperature=0.2,
    )
    parts = req.to_multipart_parts()
    assert _names(parts) == ["file", "model", "language", "prompt", "response_format", "temperature"]  # nosec B101
    assert parts[0].content_type == "audio/wav" and parts[0].filename == "clip.wav"  # nosec B101
    assert parts[1].value == "whisper-1"  # nosec B101
    assert parts[4].value == "srt" and parts[5].value == "0.2"  # nosec B101


def test_transcription_omits_unset_parts():
    req = AudioTranscriptionRequest(file=b"x", filename="a.mp3")
    assert _names(req.to_multipart_parts()) == ["file", "model"]  # nosec B101


def test_translation_part_order():
    req = AudioTranslationRequest(file=b"x", filename="a.mp3", prompt="p", response_format="json", temperature=0)
    assert _names(req.to_multipart_parts()) == ["file", "model", "prompt", "response_format", "temperature"]  # nosec B101


def test_image_variation_part_order():
    req = ImageVariationRequest(
        image=b"png",
        image_filename="in.png",
        model="dall-e-2",
        n=2,
        response_format=ImageResponseFormat.B64_JSON,
        size=ImageSize.SIZE_512,
        user="u1",
    )
    parts = req.to_multipart_parts()
    assert _names(parts) == ["image", "model", "n", "response_format", "size", "user"]  # nosec B101
    assert parts[2].value == "2" and parts[4].value == "512x512"  # nosec B101


def test_image_edit_part_order_with_mask():
    req = ImageEditRequest(
        image=b"png",
        image_filename="in.png",
        prompt="add a hat",
        mask=b"mask",
        mask_filename="mask.png",
        model="dall-e-2",
        n=1,
        size=ImageSize.SIZE_1024,
    )
    assert _names(req.to_multipart_parts()) == ["image", "prompt", "mask", "size", "model", "n"]  # nosec B101


def test_image_edit_mask_needs_both_bytes_and_filename():
    req = ImageEditRequest(image=b"png", image_filename="in.png", prompt="p", mask=b"mask", size="256x256")
    assert _names(req.to_multipart_parts()) == ["image", "prompt", "size"]  # nosec B101
