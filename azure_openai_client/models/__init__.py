"""Typed request and response models for every endpoint."""

from ..codec.content import ContentPart, ContentPartType, ImageDetail, ImageUrl
from .audio import (
    DEFAULT_AUDIO_MODEL,
    AudioResponseFormat,
    AudioTranscriptionRequest,
    AudioTranslationRequest,
    TranscriptionResponse,
    TranscriptionSegment,
    VerboseTranscriptionResponse,
)
from .chat import (
    ChatChoice,
    ChatChunkChoice,
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatDelta,
    ChatMessage,
    ChatRole,
    FinishReason,
    FunctionCallDelta,
    LogProbContent,
    LogProbs,
    ResponseFormat,
    ResponseFormatType,
    StreamOptions,
    ToolCallDelta,
    TopLogProb,
)
from .common import ApiErrorDetail, ErrorResponse, Usage, WireModel
from .embeddings import EmbeddingData, EmbeddingRequest, EmbeddingResponse, EncodingFormat
from .images import (
    ImageData,
    ImageEditRequest,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
    ImageVariationRequest,
)
from .tools import FunctionCall, FunctionDefinition, FunctionParametersField, Tool, ToolCall, ToolType

__all__ = [
    "ContentPart",
    "ContentPartType",
    "ImageDetail",
    "ImageUrl",
    "DEFAULT_AUDIO_MODEL",
    "AudioResponseFormat",
    "AudioTranscriptionRequest",
    "AudioTranslationRequest",
    "TranscriptionResponse",
    "TranscriptionSegment",
    "VerboseTranscriptionResponse",
    "ChatChoice",
    "ChatChunkChoice",
    "ChatCompletionChunk",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatDelta",
    "ChatMessage",
    "ChatRole",
    "FinishReason",
    "FunctionCallDelta",
    "LogProbContent",
    "LogProbs",
    "ResponseFormat",
    "ResponseFormatType",
    "StreamOptions",
    "ToolCallDelta",
    "TopLogProb",
    "ApiErrorDetail",
    "ErrorResponse",
    "Usage",
    "WireModel",
    "EmbeddingData",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EncodingFormat",
    "ImageData",
    "ImageEditRequest",
    "ImageGenerationRequest",
    "ImageGenerationResponse",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "ImageVariationRequest",
    "FunctionCall",
    "FunctionDefinition",
    "FunctionParametersField",
    "Tool",
    "ToolCall",
    "ToolType",
]
