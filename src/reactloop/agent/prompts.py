"""System instruction describing the reply protocol."""

from __future__ import annotations

from reactloop.tool.registry import ToolRegistry

SYSTEM_PROMPT_TEMPLATE = """\
You are a ReAct agent.

You must respond ONLY in this format:

Thought: <your reasoning>
Action: <tool_name>("input")

OR, if finished:

Thought: <your reasoning>
Final: <final answer>

Available tools:
{tools}
"""


def build_system_prompt(tools: ToolRegistry) -> str:
    """Render the fixed protocol description with the registry's tool names."""
    listing = "\n".join(tools.describe()) or "(none)"
    return SYSTEM_PROMPT_TEMPLATE.format(tools=listing)
