"""Azure OpenAI client and streaming handle."""

from .client import AzureOpenAIClient
from .stream_helpers import ChatCompletionStream

__all__ = ["AzureOpenAIClient", "ChatCompletionStream"]
