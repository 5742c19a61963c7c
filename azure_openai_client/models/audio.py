"""
Audio transcription and translation models.

Requests are sent as multipart bodies; :meth:`to_multipart_parts` fixes the
part order the service expects. Responses are JSON unless the requested
``response_format`` is one of the plain-text formats.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from ..multipart.encoder import MultipartPart
from .common import WireModel

DEFAULT_AUDIO_MODEL = "whisper-1"


class AudioResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"

    @property
    def is_plain_text(self) -> bool:
        return self in (AudioResponseFormat.TEXT, AudioResponseFormat.SRT, AudioResponseFormat.VTT)


class _AudioRequest(WireModel):
    file: bytes
    filename: str
    model: str = DEFAULT_AUDIO_MODEL
    prompt: Optional[str] = None
    response_format: Optional[AudioResponseFormat] = None
    temperature: Optional[float] = None

    def _optional_tail(self) -> List[MultipartPart]:
        parts: List[MultipartPart] = []
        if self.prompt is not None:
            parts.append(MultipartPart.text("prompt", self.prompt))
        if self.response_format is not None:
            parts.append(MultipartPart.text("response_format", self.response_format.value))
        if self.temperature is not None:
            parts.append(MultipartPart.text("temperature", str(self.temperature)))
        return parts


class AudioTranscriptionRequest(_AudioRequest):
    """Speech-to-text in the spoken language."""

    language: Optional[str] = None

    def to_multipart_parts(self) -> List[MultipartPart]:
        parts = [
            MultipartPart.file("file", self.file, self.filename),
            MultipartPart.text("model", self.model),
        ]
        if self.language is not None:
            parts.append(MultipartPart.text("language", self.language))
        return parts + self._optional_tail()


class AudioTranslationRequest(_AudioRequest):
    """Speech-to-text translated into English."""

    def to_multipart_parts(self) -> List[MultipartPart]:
        return [
            MultipartPart.file("file", self.file, self.filename),
            MultipartPart.text("model", self.model),
        ] + self._optional_tail()


class TranscriptionResponse(WireModel):
    text: str


class TranscriptionSegment(WireModel):
    id: int
    seek: int
    start: float
    end: float
    text: str
    tokens: List[int]
    temperature: float
    avg_logprob: float
    compression_ratio: float
    no_speech_prob: float


class VerboseTranscriptionResponse(TranscriptionResponse):
    """``verbose_json`` result with timing segments."""

    task: str
    language: str
    duration: float
    segments: Optional[List[TranscriptionSegment]] = None


__all__ = [
    "DEFAULT_AUDIO_MODEL",
    "AudioResponseFormat",
    "AudioTranscriptionRequest",
    "AudioTranslationRequest",
    "TranscriptionResponse",
    "TranscriptionSegment",
    "VerboseTranscriptionResponse",
]
