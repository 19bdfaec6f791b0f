"""LLM abstraction layer: the completion boundary, unified via litellm."""

from reactloop.llm.message import Message
from reactloop.llm.provider import (
    CompletionProvider,
    LiteLLMProvider,
    ProviderConfig,
    create_provider,
)

__all__ = [
    "Message",
    "CompletionProvider",
    "LiteLLMProvider",
    "ProviderConfig",
    "create_provider",
]
