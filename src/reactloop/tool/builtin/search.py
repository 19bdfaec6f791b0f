"""Mock search tool. Stand-in for a real search backend."""

from __future__ import annotations

from typing import ClassVar

from reactloop.tool.base import BaseTool


class SearchTool(BaseTool):
    """Return a canned result for any query."""

    name: ClassVar[str] = "search"
    description: ClassVar[str] = "Look up a query and return a short result"

    async def run(self, tool_input: str) -> str:
        return f"mock result for : {tool_input}"
