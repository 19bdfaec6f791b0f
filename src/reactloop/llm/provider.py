"""Completion boundary: one request, one text reply, via litellm.

litellm handles provider detection from the model string prefix
(e.g. "openai/gpt-4o-mini", "anthropic/claude-...") and normalizes the
response to the OpenAI chat-completion shape. The API key is passed in
explicitly from configuration rather than read from the environment here.

Failures are mapped to :class:`UpstreamFailure`. Connection errors, timeouts,
rate limits and 5xx responses are marked retryable; tenacity retries them up
to ``max_attempts`` (default 1, i.e. no retry).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from reactloop.errors import UpstreamFailure
from reactloop.llm.message import Message

if TYPE_CHECKING:
    from litellm import ModelResponse

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 409, 429, 500, 502, 503, 504})


@dataclass
class ProviderConfig:
    """Configuration for an LLM provider."""

    model: str
    api_key: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    request_timeout: float | None = 60.0
    max_attempts: int = 1


@runtime_checkable
class CompletionProvider(Protocol):
    """Protocol for completion endpoints."""

    @property
    def config(self) -> ProviderConfig: ...

    async def complete(self, system: str, messages: list[Message]) -> str:
        """Send one request and return the reply text."""
        ...


# ---------------------------------------------------------------------------
# litellm provider
# ---------------------------------------------------------------------------


@dataclass
class LiteLLMProvider:
    """Unified completion provider using litellm."""

    _config: ProviderConfig

    @property
    def config(self) -> ProviderConfig:
        return self._config

    async def complete(self, system: str, messages: list[Message]) -> str:
        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "messages": [
                Message.system(system).to_openai_dict(),
                *(m.to_openai_dict() for m in messages),
            ],
        }

        if self._config.api_key:
            kwargs["api_key"] = self._config.api_key

        if self._config.temperature is not None:
            kwargs["temperature"] = self._config.temperature

        if self._config.max_tokens is not None:
            kwargs["max_tokens"] = self._config.max_tokens

        if self._config.request_timeout is not None:
            kwargs["timeout"] = self._config.request_timeout

        async for attempt in AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(max(1, self._config.max_attempts)),
            wait=wait_exponential(multiplier=1, min=1, max=30),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                response = await _acompletion(**kwargs)

        return _extract_text(response)


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, UpstreamFailure) and exc.retryable


async def _acompletion(**kwargs: Any) -> ModelResponse:
    """Call litellm.acompletion, mapping every failure to UpstreamFailure."""
    import litellm

    try:
        return await litellm.acompletion(**kwargs)
    except OSError as e:
        raise UpstreamFailure(
            f"Completion endpoint unreachable: {e}", retryable=True
        ) from e
    except Exception as e:
        status_code = getattr(e, "status_code", None)
        retryable = status_code in RETRYABLE_STATUS_CODES
        raise UpstreamFailure(
            f"Completion request failed: {e}",
            retryable=retryable,
            status_code=status_code,
        ) from e


def _extract_text(response: Any) -> str:
    """Pull ``choices[0].message.content`` out of a chat-completion response."""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError) as e:
        raise UpstreamFailure(f"Malformed completion response: {e}") from e

    if not isinstance(content, str):
        raise UpstreamFailure("Malformed completion response: no text content")
    return content


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def create_provider(
    model: str,
    api_key: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    request_timeout: float | None = 60.0,
    max_attempts: int = 1,
) -> CompletionProvider:
    """Create a LiteLLM provider.

    Args:
        model: Model name with provider prefix (e.g. "openai/gpt-4o-mini").
        api_key: Credential for the endpoint. ``None`` lets litellm fall back
            to its own environment lookup.
        temperature: Sampling temperature.
        max_tokens: Max output tokens.
        request_timeout: Per-call timeout in seconds.
        max_attempts: Total attempts for retryable failures.

    Returns:
        A CompletionProvider instance.
    """
    config = ProviderConfig(
        model=model,
        api_key=api_key,
        temperature=temperature,
        max_tokens=max_tokens,
        request_timeout=request_timeout,
        max_attempts=max_attempts,
    )
    return LiteLLMProvider(_config=config)
