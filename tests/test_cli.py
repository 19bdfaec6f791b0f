"""Tests for reactloop.cli."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from reactloop import cli
from tests.conftest import ScriptedProvider

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("REACTLOOP_MAX_STEPS", raising=False)


def _use_provider(monkeypatch, *replies: str) -> ScriptedProvider:
    provider = ScriptedProvider(replies)
    monkeypatch.setattr(cli, "build_provider", lambda config: provider)
    return provider


class TestAsk:
    def test_prints_transcript_and_final(self, monkeypatch) -> None:
        _use_provider(
            monkeypatch,
            'Thought: look it up\nAction: search("capital of France")',
            "Final: Paris",
        )
        result = runner.invoke(cli.app, ["ask", "capital of France?"])

        assert result.exit_code == 0, result.output
        assert "STEP 1" in result.output
        assert "STEP 2" in result.output
        assert 'Observation: mock result for : capital of France' in result.output
        assert result.output.rstrip().endswith("[FINAL]\nParis")

    def test_step_budget_exits_nonzero(self, monkeypatch) -> None:
        provider = _use_provider(monkeypatch, 'Action: search("x")')
        result = runner.invoke(cli.app, ["ask", "q", "--max-steps", "1"])

        assert result.exit_code == 1
        assert "Max steps reached" in result.output
        assert len(provider.calls) == 1

    def test_protocol_violation_exits_nonzero(self, monkeypatch) -> None:
        _use_provider(monkeypatch, "I refuse to follow the format.")
        result = runner.invoke(cli.app, ["ask", "q"])

        assert result.exit_code == 1
        assert "did not return Action or Final" in result.output

    def test_no_thoughts_flag(self, monkeypatch) -> None:
        provider = _use_provider(
            monkeypatch, 'Thought: hidden\nAction: search("x")', "Final: y"
        )
        result = runner.invoke(cli.app, ["ask", "q", "--no-thoughts"])

        assert result.exit_code == 0, result.output
        assert "Thought:" not in provider.prompts[1]

    def test_rejects_zero_steps(self) -> None:
        result = runner.invoke(cli.app, ["ask", "q", "--max-steps", "0"])
        assert result.exit_code != 0


class TestTools:
    def test_lists_search(self) -> None:
        result = runner.invoke(cli.app, ["tools"])
        assert result.exit_code == 0
        assert "- search(input: string)" in result.output


class TestBadConfig:
    def test_non_numeric_max_steps_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REACTLOOP_MAX_STEPS", "abc")
        result = runner.invoke(cli.app, ["ask", "q"])

        assert result.exit_code == 1
        assert "Error: invalid configuration" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_zero_max_steps_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REACTLOOP_MAX_STEPS", "0")
        result = runner.invoke(cli.app, ["ask", "q"])

        assert result.exit_code == 1
        assert "Error: invalid configuration" in result.output
