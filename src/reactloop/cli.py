"""CLI entry point for reactloop."""

from __future__ import annotations

import asyncio
import logging

import typer

from reactloop import __version__
from reactloop.agent.agent import Agent
from reactloop.agent.loop import AgentResult, agent_loop
from reactloop.agent.parser import Action
from reactloop.config import ReactLoopConfig
from reactloop.errors import ReactError
from reactloop.llm.provider import CompletionProvider, create_provider
from reactloop.tool.builtin import default_tools
from reactloop.tool.registry import ToolRegistry

app = typer.Typer(
    name="reactloop",
    help="Answer a question with a Thought/Action/Final ReAct loop.",
    no_args_is_help=True,
)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_provider(config: ReactLoopConfig) -> CompletionProvider:
    return create_provider(
        model=config.llm.model,
        api_key=config.api_key,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        request_timeout=config.llm.request_timeout,
        max_attempts=config.llm.max_attempts,
    )


def build_registry() -> ToolRegistry:
    return ToolRegistry(default_tools())


@app.command()
def ask(
    question: str = typer.Argument(help="The question to answer."),
    max_steps: int | None = typer.Option(
        None,
        "--max-steps",
        "-n",
        min=1,
        help="Maximum model calls before giving up (default: 5).",
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="LLM model to use (default: from env/config).",
    ),
    no_thoughts: bool = typer.Option(
        False,
        "--no-thoughts",
        help="Leave Thought lines out of the transcript sent to the model.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="Config file path."
    ),
) -> None:
    """Run one ReAct session and print its transcript and answer."""
    setup_logging(verbose)

    try:
        config = ReactLoopConfig.load(config_file)
    except ValueError as e:
        # pydantic.ValidationError and json.JSONDecodeError are ValueErrors
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1)
    if model:
        config.llm.model = model
    if max_steps is not None:
        config.agent.max_steps = max_steps
    if no_thoughts:
        config.agent.record_thoughts = False

    if config.api_key is None:
        typer.echo(
            "WARNING: no API key set (REACTLOOP_API_KEY or OPENAI_API_KEY).",
            err=True,
        )

    typer.echo(f"reactloop v{__version__}")
    typer.echo(f"Model: {config.llm.model}")
    typer.echo(f"Max steps: {config.agent.max_steps}")

    agent = Agent.create(build_registry(), config.agent.to_agent_config())
    provider = build_provider(config)

    try:
        result = asyncio.run(_run_session(agent, question, provider))
    except ReactError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("\n[TRANSCRIPT]")
    typer.echo(result.transcript.render(), nl=False)
    typer.echo("\n[FINAL]")
    typer.echo(result.final_answer)


@app.command()
def tools() -> None:
    """List the tools offered to the model."""
    for line in build_registry().describe():
        typer.echo(line)


async def _run_session(
    agent: Agent, question: str, provider: CompletionProvider
) -> AgentResult:
    def _on_step_begin(step_no: int, prompt: str) -> None:
        typer.echo(f"\n============= STEP {step_no} =============")
        typer.echo("\n[HISTORY SENT TO LLM]")
        typer.echo(prompt, nl=False)

    def _on_reply(step_no: int, reply: str) -> None:
        typer.echo("\n[LLM OUTPUT]")
        typer.echo(reply)

    def _on_observation(step_no: int, action: Action, observation: str) -> None:
        typer.echo(f"\n> {action.render()}")
        typer.echo(f"< {observation}")

    return await agent_loop(
        agent,
        question,
        provider,
        on_step_begin=_on_step_begin,
        on_reply=_on_reply,
        on_observation=_on_observation,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
