"""Tool registry: exact-name lookup of the capabilities offered to the model."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from reactloop.tool.base import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry of available tools.

    Lookup is exact and case-sensitive. The loop only ever reads from the
    registry, so one registry can back many concurrent sessions as long as
    the tools themselves are safe to call concurrently.
    """

    def __init__(self, tools: Iterable[Tool] | None = None) -> None:
        self._tools: dict[str, Tool] = {}
        if tools is not None:
            self.register_many(tools)

    def register(self, tool: Tool) -> None:
        """Register a tool instance."""
        if tool.name in self._tools:
            logger.warning("Tool %s already registered, overwriting", tool.name)
        self._tools[tool.name] = tool

    def register_many(self, tools: Iterable[Tool]) -> None:
        for tool in tools:
            self.register(tool)

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        """Get all registered tool names, in registration order."""
        return list(self._tools.keys())

    def describe(self) -> list[str]:
        """One ``- name(input: string)`` line per tool, for the system prompt."""
        lines = []
        for tool in self._tools.values():
            line = f"- {tool.name}(input: string)"
            if tool.description:
                line += f": {tool.description}"
            lines.append(line)
        return lines

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
