"""Agent definition: per-session settings and the system instruction."""

from __future__ import annotations

from dataclasses import dataclass

from reactloop.agent.prompts import build_system_prompt
from reactloop.tool.registry import ToolRegistry
from reactloop.tool.truncation import MAX_OBSERVATION_CHARS

DEFAULT_MAX_STEPS = 5


@dataclass
class AgentConfig:
    """Settings for one agent session."""

    max_steps: int = DEFAULT_MAX_STEPS
    record_thoughts: bool = True  # drop to keep prompts shorter
    max_observation_chars: int | None = MAX_OBSERVATION_CHARS


@dataclass
class Agent:
    """A configured agent: its settings, tools and system instruction."""

    config: AgentConfig
    tools: ToolRegistry

    @property
    def system_prompt(self) -> str:
        # Lists the registry as it is now, including late registrations.
        return build_system_prompt(self.tools)

    @property
    def max_steps(self) -> int:
        return self.config.max_steps

    @classmethod
    def create(
        cls, tools: ToolRegistry, config: AgentConfig | None = None
    ) -> Agent:
        """Build an agent whose system prompt lists ``tools``."""
        return cls(config=config or AgentConfig(), tools=tools)
