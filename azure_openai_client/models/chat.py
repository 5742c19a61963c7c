"""
Chat completion request, response, and streaming chunk models.

Polymorphic fields (``content``, ``stop``, ``tool_choice``) are carried as
variant values from :mod:`azure_openai_client.codec.variants`. Plain Python
values (a string, a list of strings, ``"auto"``) are accepted on construction
and decoded into their variant.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from ..codec.content import ContentPart
from ..codec.variants import (
    ChatContentField,
    PartsContent,
    StopSequenceField,
    TextContent,
    ToolChoiceField,
)
from .common import Usage, WireModel
from .tools import Tool, ToolCall


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ChatMessage(WireModel):
    """One message in a conversation."""

    role: ChatRole
    content: Optional[ChatContentField] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=ChatRole.SYSTEM, content=TextContent(content))

    @classmethod
    def user(cls, content: Union[str, Sequence[ContentPart]]) -> "ChatMessage":
        if isinstance(content, str):
            return cls(role=ChatRole.USER, content=TextContent(content))
        return cls(role=ChatRole.USER, content=PartsContent(tuple(content)))

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=ChatRole.ASSISTANT, content=TextContent(content))

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "ChatMessage":
        return cls(role=ChatRole.TOOL, content=TextContent(content), tool_call_id=tool_call_id)

    @property
    def text(self) -> Optional[str]:
        """Text of the message; text parts are joined for multimodal content."""
        if self.content is None:
            return None
        if isinstance(self.content, TextContent):
            return self.content.text
        return "".join(p.text or "" for p in self.content.parts)


class ResponseFormatType(str, Enum):
    TEXT = "text"
    JSON_OBJECT = "json_object"


class ResponseFormat(WireModel):
    type: ResponseFormatType


class StreamOptions(WireModel):
    include_usage: Optional[bool] = None


class ChatCompletionRequest(WireModel):
    messages: List[ChatMessage]
    model: Optional[str] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None
    max_tokens: Optional[int] = None
    n: Optional[int] = None
    presence_penalty: Optional[float] = None
    response_format: Optional[ResponseFormat] = None
    seed: Optional[int] = None
    stop: Optional[StopSequenceField] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[ToolChoiceField] = None
    user: Optional[str] = None
    stream: Optional[bool] = None
    stream_options: Optional[StreamOptions] = None


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"


class TopLogProb(WireModel):
    token: str
    logprob: float
    bytes: Optional[List[int]] = None


class LogProbContent(WireModel):
    token: str
    logprob: float
    bytes: Optional[List[int]] = None
    top_logprobs: Optional[List[TopLogProb]] = None


class LogProbs(WireModel):
    content: Optional[List[LogProbContent]] = None


class ChatChoice(WireModel):
    index: int
    message: ChatMessage
    logprobs: Optional[LogProbs] = None
    finish_reason: Optional[FinishReason] = None


class ChatCompletionResponse(WireModel):
    id: str
    object: str
    created: int
    model: str
    choices: List[ChatChoice]
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None


# ---- streaming ----


class FunctionCallDelta(WireModel):
    name: Optional[str] = None
    arguments: Optional[str] = None


class ToolCallDelta(WireModel):
    """Fragment of one tool call; ``index`` identifies the call across chunks."""

    index: int
    id: Optional[str] = None
    type: Optional[str] = None
    function: Optional[FunctionCallDelta] = None


class ChatDelta(WireModel):
    role: Optional[ChatRole] = None
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCallDelta]] = None


class ChatChunkChoice(WireModel):
    index: int
    delta: ChatDelta
    logprobs: Optional[LogProbs] = None
    finish_reason: Optional[FinishReason] = None


class ChatCompletionChunk(WireModel):
    """One streamed event of a chat completion."""

    id: str
    object: str
    created: int
    model: str
    system_fingerprint: Optional[str] = None
    choices: List[ChatChunkChoice]
    usage: Optional[Usage] = None


__all__ = [
    "ChatRole",
    "ChatMessage",
    "ResponseFormatType",
    "ResponseFormat",
    "StreamOptions",
    "ChatCompletionRequest",
    "FinishReason",
    "TopLogProb",
    "LogProbContent",
    "LogProbs",
    "ChatChoice",
    "ChatCompletionResponse",
    "FunctionCallDelta",
    "ToolCallDelta",
    "ChatDelta",
    "ChatChunkChoice",
    "ChatCompletionChunk",
]
