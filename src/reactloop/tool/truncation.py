"""Observation truncation: bound tool output before it enters the transcript."""

from __future__ import annotations

MAX_OBSERVATION_CHARS = 4000


def truncate_observation(
    text: str, max_chars: int | None = MAX_OBSERVATION_CHARS
) -> str:
    """Keep the head of ``text`` and note how much was dropped.

    ``max_chars=None`` disables truncation.
    """
    if max_chars is None or len(text) <= max_chars:
        return text

    skipped = len(text) - max_chars
    return f"{text[:max_chars]} [Output truncated: {skipped} chars skipped]"
