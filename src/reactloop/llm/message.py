"""Message types sent to the completion endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class Message:
    """A single chat message with plain-text content."""

    role: Literal["system", "user", "assistant"]
    content: str = ""

    @classmethod
    def system(cls, text: str) -> Message:
        return cls(role="system", content=text)

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(role="user", content=text)

    def to_openai_dict(self) -> dict[str, Any]:
        """Convert to OpenAI API format."""
        return {"role": self.role, "content": self.content}
