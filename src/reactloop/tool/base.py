"""Tool interface: one string in, one string out, awaited."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Callable, ClassVar, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Tool(Protocol):
    """Anything the agent loop can invoke by name.

    Implementations may do real I/O; the loop only awaits the call.
    """

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    async def __call__(self, tool_input: str) -> str: ...


class BaseTool(ABC):
    """Base class for class-based tools.

    Usage:
        class WeatherTool(BaseTool):
            name = "weather"
            description = "Current weather for a city"

            async def run(self, tool_input: str) -> str:
                return await fetch_weather(tool_input)
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""

    async def __call__(self, tool_input: str) -> str:
        logger.debug("Tool %s called with %r", self.name, tool_input[:200])
        return await self.run(tool_input)

    @abstractmethod
    async def run(self, tool_input: str) -> str:
        """Handle one input and return the observation text."""
        ...


class FunctionTool:
    """Adapt a plain ``async def f(text) -> str`` into a tool."""

    def __init__(
        self,
        name: str,
        fn: Callable[[str], Awaitable[str]],
        description: str = "",
    ) -> None:
        self._name = name
        self._fn = fn
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    async def __call__(self, tool_input: str) -> str:
        return await self._fn(tool_input)

    def __repr__(self) -> str:
        return f"FunctionTool(name={self._name!r})"
