"""Agent system: reply parser, transcript, definition and loop."""

from reactloop.agent.agent import DEFAULT_MAX_STEPS, Agent, AgentConfig
from reactloop.agent.loop import AgentResult, agent_loop, run_agent
from reactloop.agent.parser import Action, ParsedTurn, TurnKind, parse_response
from reactloop.agent.transcript import LineKind, Transcript, TranscriptLine

__all__ = [
    "DEFAULT_MAX_STEPS",
    "Agent",
    "AgentConfig",
    "AgentResult",
    "agent_loop",
    "run_agent",
    "Action",
    "ParsedTurn",
    "TurnKind",
    "parse_response",
    "LineKind",
    "Transcript",
    "TranscriptLine",
]
