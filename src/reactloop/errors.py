"""Error taxonomy for agent sessions.

Every failure raised out of :func:`reactloop.agent.loop.run_agent` derives
from :class:`ReactError`. A session either returns a final answer with its
full transcript, or raises one of these.
"""

from __future__ import annotations


class ReactError(Exception):
    """Base class for all session failures."""

    retryable: bool = False


class ProtocolViolation(ReactError):
    """The model reply contained neither a Final nor a well-formed Action."""

    def __init__(self, reply: str) -> None:
        self.reply = reply
        super().__init__("LLM did not return Action or Final")


class UnknownTool(ReactError):
    """The model asked for a tool that is not in the registry."""

    def __init__(self, tool: str, available: list[str] | None = None) -> None:
        self.tool = tool
        self.available = list(available or [])
        message = f"Unknown tool: {tool}"
        if self.available:
            message += f". Available tools: {', '.join(self.available)}"
        super().__init__(message)


class StepBudgetExceeded(ReactError):
    """The loop ran out of steps before the model produced a Final."""

    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps
        super().__init__(f"Max steps reached ({max_steps}) without a Final answer")


class ToolFailure(ReactError):
    """A tool raised while handling its input."""

    def __init__(self, tool: str, cause: BaseException) -> None:
        self.tool = tool
        super().__init__(f"Tool {tool} failed: {cause}")


class UpstreamFailure(ReactError):
    """The completion endpoint was unreachable or returned something unusable.

    ``retryable`` marks transient conditions (connection errors, timeouts,
    rate limits, 5xx) that a caller may try again.
    """

    def __init__(
        self,
        message: str,
        retryable: bool = False,
        status_code: int | None = None,
    ) -> None:
        self.retryable = retryable
        self.status_code = status_code
        super().__init__(message)
