"""The ReAct control loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from reactloop.agent.agent import Agent, AgentConfig
from reactloop.agent.parser import Action, TurnKind, parse_response
from reactloop.agent.transcript import Transcript
from reactloop.errors import (
    ProtocolViolation,
    StepBudgetExceeded,
    ToolFailure,
    UnknownTool,
)
from reactloop.llm.message import Message
from reactloop.llm.provider import CompletionProvider
from reactloop.tool.registry import ToolRegistry
from reactloop.tool.truncation import truncate_observation

logger = logging.getLogger(__name__)

OnStepBegin = Callable[[int, str], None] | None  # (step, rendered transcript)
OnReply = Callable[[int, str], None] | None  # (step, raw reply)
OnObservation = Callable[[int, Action, str], None] | None  # (step, action, output)


@dataclass
class AgentResult:
    """Outcome of a successful session."""

    final_answer: str
    transcript: Transcript
    steps: int


async def agent_loop(
    agent: Agent,
    question: str,
    provider: CompletionProvider,
    on_step_begin: OnStepBegin = None,
    on_reply: OnReply = None,
    on_observation: OnObservation = None,
) -> AgentResult:
    """Run one session until the model gives a Final answer.

    Each step:
    1. Send the rendered transcript (plus the system instruction)
    2. Parse the reply
    3. Record the thought, if enabled
    4. Return on Final (Final wins over Action in the same reply)
    5. Otherwise invoke the named tool and record its observation

    Raises:
        ProtocolViolation: reply had neither Final nor Action.
        UnknownTool: the Action named a tool absent from the registry.
        ToolFailure: the tool raised.
        StepBudgetExceeded: ``max_steps`` replies without a Final.
        UpstreamFailure: the completion call failed.
    """
    transcript = Transcript()
    transcript.question(question)

    for step_no in range(1, agent.max_steps + 1):
        logger.info("Step %d/%d", step_no, agent.max_steps)

        prompt = transcript.render()
        if on_step_begin:
            on_step_begin(step_no, prompt)

        reply = await provider.complete(agent.system_prompt, [Message.user(prompt)])
        if on_reply:
            on_reply(step_no, reply)

        turn = parse_response(reply)

        if turn.thought is not None and agent.config.record_thoughts:
            transcript.thought(turn.thought)

        if turn.kind is TurnKind.FINAL:
            if turn.action is not None:
                logger.warning(
                    "Reply had both Final and Action; ignoring Action %s",
                    turn.action.render(),
                )
            transcript.final(turn.final)
            logger.info("Final answer after %d steps", step_no)
            return AgentResult(
                final_answer=turn.final, transcript=transcript, steps=step_no
            )

        if turn.kind is TurnKind.INVALID:
            logger.error("No Action or Final in reply: %s", reply[:200])
            raise ProtocolViolation(reply)

        action = turn.action
        transcript.action(action)

        tool = agent.tools.get(action.tool)
        if tool is None:
            raise UnknownTool(action.tool, agent.tools.names())

        logger.info("Invoking %s", action.render())
        try:
            output = await tool(action.input)
        except Exception as e:
            logger.error("Tool %s raised: %s", action.tool, e, exc_info=True)
            raise ToolFailure(action.tool, e) from e

        observation = truncate_observation(
            str(output), agent.config.max_observation_chars
        )
        transcript.observation(observation)
        if on_observation:
            on_observation(step_no, action, observation)

    logger.warning("Hit max steps (%d)", agent.max_steps)
    raise StepBudgetExceeded(agent.max_steps)


async def run_agent(
    question: str,
    provider: CompletionProvider,
    tools: ToolRegistry,
    config: AgentConfig | None = None,
    on_step_begin: OnStepBegin = None,
    on_reply: OnReply = None,
    on_observation: OnObservation = None,
) -> AgentResult:
    """Build an agent over ``tools`` and run a single session."""
    agent = Agent.create(tools, config)
    return await agent_loop(
        agent,
        question,
        provider,
        on_step_begin=on_step_begin,
        on_reply=on_reply,
        on_observation=on_observation,
    )
