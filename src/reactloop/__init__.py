"""reactloop: a minimal Reason+Act prompting loop."""

from reactloop.agent import AgentConfig, AgentResult, run_agent
from reactloop.errors import (
    ProtocolViolation,
    ReactError,
    StepBudgetExceeded,
    ToolFailure,
    UnknownTool,
    UpstreamFailure,
)

__version__ = "0.1.0"

__all__ = [
    "AgentConfig",
    "AgentResult",
    "run_agent",
    "ReactError",
    "ProtocolViolation",
    "StepBudgetExceeded",
    "ToolFailure",
    "UnknownTool",
    "UpstreamFailure",
]
