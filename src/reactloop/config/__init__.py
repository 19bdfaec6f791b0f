"""Configuration: Pydantic models for reactloop settings."""

from __future__ import annotations

import json
import os
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, SecretStr

from reactloop.agent.agent import DEFAULT_MAX_STEPS, AgentConfig
from reactloop.tool.truncation import MAX_OBSERVATION_CHARS

API_KEY_ENV_VARS = ("REACTLOOP_API_KEY", "OPENAI_API_KEY")


class LLMConfig(BaseModel):
    """Completion endpoint configuration.

    Model names use litellm's provider-prefix format, e.g. "openai/gpt-4o-mini".
    """

    model: str = Field(default="openai/gpt-4o-mini")
    api_key: SecretStr | None = Field(
        default=None, description="Credential for the completion endpoint"
    )
    temperature: float | None = Field(default=None)
    max_tokens: int | None = Field(default=None)
    request_timeout: float | None = Field(
        default=60.0, description="Per-call timeout in seconds"
    )
    max_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per completion call; retries only transient failures",
    )


class AgentSettings(BaseModel):
    """Agent loop configuration."""

    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1)
    record_thoughts: bool = Field(
        default=True, description="Append Thought lines to the transcript"
    )
    max_observation_chars: int | None = Field(
        default=MAX_OBSERVATION_CHARS,
        description="Truncate tool output beyond this many characters",
    )

    def to_agent_config(self) -> AgentConfig:
        return AgentConfig(
            max_steps=self.max_steps,
            record_thoughts=self.record_thoughts,
            max_observation_chars=self.max_observation_chars,
        )


class ReactLoopConfig(BaseModel):
    """Top-level reactloop configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    agent: AgentSettings = Field(default_factory=AgentSettings)

    @property
    def api_key(self) -> str | None:
        if self.llm.api_key is None:
            return None
        return self.llm.api_key.get_secret_value()

    @classmethod
    def load(cls, config_path: str | None = None) -> ReactLoopConfig:
        """Load config from file, env vars, or defaults.

        Priority: env vars > config file > defaults. A ``.env`` file in the
        working directory is loaded first without overriding the shell.

        Env vars:
            REACTLOOP_API_KEY    - Endpoint credential (preferred)
            OPENAI_API_KEY       - Endpoint credential (fallback)
            REACTLOOP_MODEL      - Override model (litellm format)
            REACTLOOP_MAX_STEPS  - Override step budget
        """
        load_dotenv(find_dotenv(usecwd=True))

        config_data: dict[str, Any] = {}

        if config_path and os.path.exists(config_path):
            with open(config_path) as f:
                config_data = json.load(f)

        llm = config_data.get("llm", {})
        agent = config_data.get("agent", {})

        for var in API_KEY_ENV_VARS:
            key = os.environ.get(var)
            if key:
                llm["api_key"] = key
                break

        env_model = os.environ.get("REACTLOOP_MODEL")
        if env_model:
            llm["model"] = env_model

        env_max_steps = os.environ.get("REACTLOOP_MAX_STEPS")
        if env_max_steps:
            agent["max_steps"] = int(env_max_steps)

        if llm:
            config_data["llm"] = llm
        if agent:
            config_data["agent"] = agent

        return cls.model_validate(config_data)
