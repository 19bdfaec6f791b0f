"""Tool system: interface, registry, and output truncation."""

from reactloop.tool.base import BaseTool, FunctionTool, Tool
from reactloop.tool.registry import ToolRegistry
from reactloop.tool.truncation import truncate_observation

__all__ = [
    "BaseTool",
    "FunctionTool",
    "Tool",
    "ToolRegistry",
    "truncate_observation",
]
