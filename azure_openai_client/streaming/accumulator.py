"""Fold streamed chat chunks back into a complete chat completion.

- Delta text is concatenated per choice index in arrival order.
- The first role seen for a choice wins.
- Tool-call fragments merge by their ``index``: ``id``, ``type`` and the
  function name are set once, ``arguments`` are concatenated.
- The last non-null finish reason and the last usage block win.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..codec.variants import TextContent
from ..models.chat import (
    ChatChoice,
    ChatCompletionChunk,
    ChatCompletionResponse,
    ChatMessage,
    ChatRole,
    FinishReason,
    ToolCallDelta,
)
from ..models.common import Usage
from ..models.tools import FunctionCall, ToolCall

COMPLETION_OBJECT = "chat.completion"


@dataclass
class _ToolCallParts:
    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    arguments: List[str] = field(default_factory=list)

    def merge(self, delta: ToolCallDelta) -> None:
        if self.id is None and delta.id is not None:
            self.id = delta.id
        if self.type is None and delta.type is not None:
            self.type = delta.type
        if delta.function is not None:
            if self.name is None and delta.function.name is not None:
                self.name = delta.function.name
            if delta.function.arguments:
                self.arguments.append(delta.function.arguments)

    def build(self) -> ToolCall:
        return ToolCall(
            id=self.id or "",
            type=self.type or "function",
            function=FunctionCall(name=self.name or "", arguments="".join(self.arguments)),
        )


@dataclass
class _ChoiceParts:
    role: Optional[ChatRole] = None
    text: List[str] = field(default_factory=list)
    tool_calls: Dict[int, _ToolCallParts] = field(default_factory=dict)
    finish_reason: Optional[FinishReason] = None


class ChatStreamAccumulator:
    """Collects :class:`ChatCompletionChunk` values as they arrive."""

    def __init__(self) -> None:
        self._first: Optional[ChatCompletionChunk] = None
        self._choices: Dict[int, _ChoiceParts] = {}
        self._usage: Optional[Usage] = None
        self.chunks = 0

    def add(self, chunk: ChatCompletionChunk) -> None:
        if self._first is None:
            self._first = chunk
        self.chunks += 1
        if chunk.usage is not None:
            self._usage = chunk.usage
        for choice in chunk.choices:
            parts = self._choices.setdefault(choice.index, _ChoiceParts())
            delta = choice.delta
            if parts.role is None and delta.role is not None:
                parts.role = delta.role
            if delta.content:
                parts.text.append(delta.content)
            for tc in delta.tool_calls or ():
                parts.tool_calls.setdefault(tc.index, _ToolCallParts()).merge(tc)
            if choice.finish_reason is not None:
                parts.finish_reason = choice.finish_reason

    def result(self) -> ChatCompletionResponse:
        """Build the accumulated response.

        Raises:
            ValueError: no chunk has been added yet.
        """
        if self._first is None:
            raise ValueError("no chunks to accumulate")
        choices = []
        for index in sorted(self._choices):
            parts = self._choices[index]
            text = "".join(parts.text)
            tool_calls = [parts.tool_calls[i].build() for i in sorted(parts.tool_calls)] or None
            message = ChatMessage(
                role=parts.role or ChatRole.ASSISTANT,
                content=TextContent(text) if text or tool_calls is None else None,
                tool_calls=tool_calls,
            )
            choices.append(ChatChoice(index=index, message=message, finish_reason=parts.finish_reason))
        return ChatCompletionResponse(
            id=self._first.id,
            object=COMPLETION_OBJECT,
            created=self._first.created,
            model=self._first.model,
            choices=choices,
            usage=self._usage,
            system_fingerprint=self._first.system_fingerprint,
        )


def accumulate_chunks(chunks: Iterable[ChatCompletionChunk]) -> ChatCompletionResponse:
    acc = ChatStreamAccumulator()
    for chunk in chunks:
        acc.add(chunk)
    return acc.result()


__all__ = ["ChatStreamAccumulator", "accumulate_chunks"]
