"""Shared fixtures: a scripted completion provider and a counting tool."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from reactloop.llm.message import Message
from reactloop.llm.provider import ProviderConfig
from reactloop.tool.base import BaseTool


class ScriptedProvider:
    """Completion provider that replays canned replies in order."""

    def __init__(self, replies: Iterable[str]) -> None:
        self._replies = list(replies)
        self._config = ProviderConfig(model="test/scripted")
        self.calls: list[tuple[str, list[Message]]] = []

    @property
    def config(self) -> ProviderConfig:
        return self._config

    async def complete(self, system: str, messages: list[Message]) -> str:
        self.calls.append((system, list(messages)))
        if len(self.calls) > len(self._replies):
            raise AssertionError("provider called more times than scripted")
        return self._replies[len(self.calls) - 1]

    @property
    def prompts(self) -> list[str]:
        return [messages[-1].content for _, messages in self.calls]


class CountingSearch(BaseTool):
    """Search stand-in that records every input."""

    name = "search"
    description = "Look things up"

    def __init__(self, answer: str = "Paris") -> None:
        self.answer = answer
        self.inputs: list[str] = []

    async def run(self, tool_input: str) -> str:
        self.inputs.append(tool_input)
        return self.answer


@pytest.fixture
def search_tool() -> CountingSearch:
    return CountingSearch()


@pytest.fixture
def scripted():
    """Factory: ``scripted("reply 1", "reply 2")``."""

    def _make(*replies: str) -> ScriptedProvider:
        return ScriptedProvider(replies)

    return _make
