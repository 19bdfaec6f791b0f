"""Built-in tools."""

from reactloop.tool.base import Tool
from reactloop.tool.builtin.search import SearchTool

__all__ = ["SearchTool", "default_tools"]


def default_tools() -> list[Tool]:
    """Tools registered by the CLI."""
    return [SearchTool()]
