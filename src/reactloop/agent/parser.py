"""Response parser for the Thought/Action/Final reply format.

The grammar has three line-prefixed productions, each matched independently
against the whole reply (first match of each wins):

    Thought: <rest of line>
    Action: <identifier>("<argument>")
    Final: <rest of line>

Arguments are double-quoted with no escape support; the closing ``")`` is the
last one on the line.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_THOUGHT_RE = re.compile(r"^[ \t]*Thought:[ \t]*(\S.*?)[ \t\r]*$", re.MULTILINE)
_ACTION_RE = re.compile(r'^[ \t]*Action:[ \t]*(\w+)\("(.*)"\)', re.MULTILINE)
_FINAL_RE = re.compile(r"^[ \t]*Final:[ \t]*(\S.*?)[ \t\r]*$", re.MULTILINE)


class TurnKind(enum.Enum):
    """What the loop should do with a parsed reply."""

    FINAL = "final"
    ACTION = "action"
    INVALID = "invalid"  # neither Final nor Action


@dataclass(frozen=True)
class Action:
    """A single tool invocation requested by the model."""

    tool: str
    input: str

    def render(self) -> str:
        return f'{self.tool}("{self.input}")'


@dataclass(frozen=True)
class ParsedTurn:
    """Fields extracted from one model reply. Absent fields are ``None``."""

    thought: str | None = None
    action: Action | None = None
    final: str | None = None

    @property
    def kind(self) -> TurnKind:
        # Final wins when a reply carries both.
        if self.final is not None:
            return TurnKind.FINAL
        if self.action is not None:
            return TurnKind.ACTION
        return TurnKind.INVALID

    @property
    def is_well_formed(self) -> bool:
        return self.kind is not TurnKind.INVALID


def parse_response(text: str) -> ParsedTurn:
    """Extract thought, action and final answer from raw model text."""
    thought_match = _THOUGHT_RE.search(text)
    action_match = _ACTION_RE.search(text)
    final_match = _FINAL_RE.search(text)

    return ParsedTurn(
        thought=thought_match.group(1) if thought_match else None,
        action=(
            Action(tool=action_match.group(1), input=action_match.group(2))
            if action_match
            else None
        ),
        final=final_match.group(1) if final_match else None,
    )
