"""Append-only transcript of a ReAct session.

The rendered transcript is the only state sent to the model on each turn:

    Question: <question>
    Thought: <thought>
    Action: <tool>("<input>")
    Observation: <tool output>
    Final: <answer>
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from reactloop.agent.parser import Action

logger = logging.getLogger(__name__)


class LineKind(enum.Enum):
    """Tag of a transcript line. The value is the rendered prefix."""

    QUESTION = "Question"
    THOUGHT = "Thought"
    ACTION = "Action"
    OBSERVATION = "Observation"
    FINAL = "Final"


_PREFIXES = {f"{kind.value}: ": kind for kind in LineKind}


@dataclass(frozen=True)
class TranscriptLine:
    """One tagged entry. ``text`` may span several lines (observations)."""

    kind: LineKind
    text: str

    def render(self) -> str:
        return f"{self.kind.value}: {self.text}\n"


@dataclass
class Transcript:
    """Ordered, append-only record of a session."""

    _lines: list[TranscriptLine] = field(default_factory=list)

    @property
    def lines(self) -> tuple[TranscriptLine, ...]:
        return tuple(self._lines)

    def _append(self, kind: LineKind, text: str) -> TranscriptLine:
        line = TranscriptLine(kind=kind, text=text)
        self._lines.append(line)
        return line

    # --- Appenders ---

    def question(self, text: str) -> TranscriptLine:
        return self._append(LineKind.QUESTION, text)

    def thought(self, text: str) -> TranscriptLine:
        return self._append(LineKind.THOUGHT, text)

    def action(self, action: Action) -> TranscriptLine:
        return self._append(LineKind.ACTION, action.render())

    def observation(self, text: str) -> TranscriptLine:
        return self._append(LineKind.OBSERVATION, text)

    def final(self, text: str) -> TranscriptLine:
        return self._append(LineKind.FINAL, text)

    # --- Serialization ---

    def render(self) -> str:
        """Render in the exact text format sent to the model."""
        return "".join(line.render() for line in self._lines)

    @classmethod
    def from_text(cls, text: str) -> Transcript:
        """Rebuild a transcript from its rendered form.

        A line that does not start with a known tag continues the previous
        entry, so multi-line observations survive the round trip. A
        continuation line that does start with a tag (``"Final: ..."`` inside
        an observation) is read as a new entry; the rendered text still
        matches, but the entry structure does not.
        """
        transcript = cls()
        rows = text.split("\n")
        if rows and rows[-1] == "":
            rows.pop()
        for raw in rows:
            kind = next(
                (k for prefix, k in _PREFIXES.items() if raw.startswith(prefix)),
                None,
            )
            if kind is not None:
                transcript._append(kind, raw[len(kind.value) + 2 :])
            elif transcript._lines:
                prev = transcript._lines.pop()
                transcript._lines.append(
                    TranscriptLine(kind=prev.kind, text=f"{prev.text}\n{raw}")
                )
            else:
                logger.warning("Dropping untagged transcript line: %s", raw[:200])
        return transcript

    def __len__(self) -> int:
        return len(self._lines)

    def __str__(self) -> str:
        return self.render()
