"""azure_openai_client package

Typed client for the Azure OpenAI REST service.

Purpose:
    Encode typed requests for chat, embedding, audio and image deployments,
    send them over ``httpx``, and decode responses, including streamed chat
    completions, back into typed models.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`AzureOpenAIClient`, :class:`ChatCompletionStream`
    - Configuration: :class:`AzureOpenAIConfiguration`
    - Errors: :class:`ClientError` and its subclasses
    - Models: everything in :mod:`azure_openai_client.models`
    - Codec variants for polymorphic fields (``TextContent``, ``StopList``,
      ``ToolChoiceAuto``, ``Base64Vector``, ...)
"""

from .azure import AzureOpenAIClient, ChatCompletionStream
from .base.errors import (
    ApiError,
    ClientError,
    EncodingError,
    ErrorCategory,
    ErrorCode,
    HttpError,
    InvalidResponse,
    StreamingError,
    TransportFailure,
    UnrecognizedShape,
)
from .codec import (
    Base64Vector,
    EmbeddingText,
    EmbeddingTextList,
    EmbeddingTokenBatch,
    EmbeddingTokens,
    FloatVector,
    FunctionParameters,
    PartsContent,
    StopList,
    StopText,
    TextContent,
    ToolChoiceAuto,
    ToolChoiceFunction,
    ToolChoiceNone,
    ToolChoiceRequired,
)
from .config import AzureOpenAIConfiguration
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .streaming import ChatStreamAccumulator, EventStreamDecoder, accumulate_chunks

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AzureOpenAIClient",
    "ChatCompletionStream",
    "AzureOpenAIConfiguration",
    "ApiError",
    "ClientError",
    "EncodingError",
    "ErrorCategory",
    "ErrorCode",
    "HttpError",
    "InvalidResponse",
    "StreamingError",
    "TransportFailure",
    "UnrecognizedShape",
    "Base64Vector",
    "EmbeddingText",
    "EmbeddingTextList",
    "EmbeddingTokenBatch",
    "EmbeddingTokens",
    "FloatVector",
    "FunctionParameters",
    "PartsContent",
    "StopList",
    "StopText",
    "TextContent",
    "ToolChoiceAuto",
    "ToolChoiceFunction",
    "ToolChoiceNone",
    "ToolChoiceRequired",
    "ChatStreamAccumulator",
    "EventStreamDecoder",
    "accumulate_chunks",
    *_models_all,
]
