"""Tests for reactloop.agent.transcript."""

from __future__ import annotations

from reactloop.agent.parser import Action
from reactloop.agent.transcript import LineKind, Transcript, TranscriptLine


class TestRender:
    def test_question_only(self) -> None:
        t = Transcript()
        t.question("Where is the money?")
        assert t.render() == "Question: Where is the money?\n"

    def test_full_session_format(self) -> None:
        t = Transcript()
        t.question("capital of France?")
        t.thought("I will check.")
        t.action(Action(tool="search", input="capital of France"))
        t.observation("mock result for : capital of France")
        t.final("Paris")
        assert t.render() == (
            "Question: capital of France?\n"
            "Thought: I will check.\n"
            'Action: search("capital of France")\n'
            "Observation: mock result for : capital of France\n"
            "Final: Paris\n"
        )

    def test_lines_are_tagged_in_order(self) -> None:
        t = Transcript()
        t.question("q")
        t.action(Action(tool="search", input=""))
        t.observation("o")
        assert [line.kind for line in t.lines] == [
            LineKind.QUESTION,
            LineKind.ACTION,
            LineKind.OBSERVATION,
        ]
        assert t.lines[1] == TranscriptLine(LineKind.ACTION, 'search("")')
        assert len(t) == 3

    def test_lines_snapshot_is_immutable(self) -> None:
        t = Transcript()
        t.question("q")
        snapshot = t.lines
        t.final("a")
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)


class TestRoundTrip:
    def test_question_action_observation_final(self) -> None:
        t = Transcript()
        t.question("q")
        t.action(Action(tool="search", input="x"))
        t.observation("result")
        t.final("done")
        text = t.render()

        again = Transcript.from_text(text)
        assert again.render() == text
        assert again.lines == t.lines

    def test_multiline_observation(self) -> None:
        t = Transcript()
        t.question("q")
        t.observation("line one\nline two")
        again = Transcript.from_text(t.render())
        assert again.lines == t.lines

    def test_empty_text(self) -> None:
        assert len(Transcript.from_text("")) == 0

    def test_tagged_line_inside_observation_splits_entry(self) -> None:
        t = Transcript()
        t.question("q")
        t.observation("a\nFinal: fake")
        text = t.render()

        again = Transcript.from_text(text)
        assert again.render() == text
        assert [line.kind for line in again.lines] == [
            LineKind.QUESTION,
            LineKind.OBSERVATION,
            LineKind.FINAL,
        ]
        assert again.lines[1].text == "a"
        assert again.lines[2].text == "fake"
