"""Agent options and the event stream adapter over the Claude Agent SDK."""

import os
import uuid
from collections.abc import AsyncIterator, Mapping
from contextlib import aclosing
from dataclasses import dataclass, field
from typing import Any, Optional

from claude_agent_sdk import AssistantMessage, ClaudeAgentOptions, TextBlock, ToolUseBlock, query

from .browser import chrome_devtools_server_config
from .config import AppSettings, DeploymentMode, detect_deployment_mode, get_settings
from .events import AgentEvent, DoneEvent, ResultEvent, TextEvent, ToolEvent, UsageEvent
from .observability import get_logger
from .prompts import SYSTEM_PROMPT
from .tools import ALLOWED_TOOLS, CHROME_DEVTOOLS_SERVER

logger = get_logger(__name__)


def get_options(
    standalone: bool = False,
    *,
    mode: Optional[DeploymentMode] = None,
    env: Optional[Mapping[str, str]] = None,
    model: Optional[str] = None,
    max_turns: Optional[int] = None,
    settings: Optional[AppSettings] = None,
) -> ClaudeAgentOptions:
    """Build the agent runtime options for a recipe search session.

    Args:
        standalone: Register the DevTools MCP server here. When False the caller
            is expected to have registered a server named ``chrome-devtools``.
        mode: Deployment mode for the tool server launch spec (default: detected
            from ``CHROME_PATH`` in ``env``, falling back to settings).
        env: Environment passed to the runtime (default: copy of ``os.environ``
            taken at call time).
        model: Model override (default from settings).
        max_turns: Turn limit override (default from settings).
        settings: Settings to read defaults from (default: ``get_settings()``).

    Returns:
        A fresh options record; nothing is shared between calls.
    """
    settings = settings or get_settings()
    env = dict(os.environ if env is None else env)
    if mode is None:
        mode = detect_deployment_mode(env.get("CHROME_PATH", settings.browser.chrome_path))

    mcp_servers: dict[str, Any] = {}
    if standalone:
        mcp_servers[CHROME_DEVTOOLS_SERVER] = chrome_devtools_server_config(
            mode,
            command=settings.browser.runner,
            package=settings.browser.devtools_package,
        )

    return ClaudeAgentOptions(
        env=env,
        system_prompt=SYSTEM_PROMPT,
        model=model or settings.agent.model,
        allowed_tools=list(ALLOWED_TOOLS),
        max_turns=max_turns if max_turns is not None else settings.agent.max_turns,
        mcp_servers=mcp_servers,
    )


def _usage_count(usage: Any, key: str) -> int:
    value = usage.get(key) if isinstance(usage, Mapping) else getattr(usage, key, None)
    return value or 0


def events_from_message(message: Any) -> list[AgentEvent]:
    """Translate one runtime message into normalized events.

    Order within a message: text fragments, tool invocations (each in block
    order), usage report, final result.
    """
    texts: list[AgentEvent] = []
    tools: list[AgentEvent] = []
    if isinstance(message, AssistantMessage):
        for block in message.content or ():
            if isinstance(block, TextBlock):
                if block.text:
                    texts.append(TextEvent(text=block.text))
            elif isinstance(block, ToolUseBlock):
                tools.append(ToolEvent(name=block.name))

    events = texts + tools

    usage = getattr(message, "usage", None)
    if usage is not None:
        events.append(
            UsageEvent(
                input_tokens=_usage_count(usage, "input_tokens"),
                output_tokens=_usage_count(usage, "output_tokens"),
            )
        )

    result = getattr(message, "result", None)
    if result:
        events.append(ResultEvent(text=result))

    return events


async def stream_agent(prompt: str, options: Optional[ClaudeAgentOptions] = None) -> AsyncIterator[AgentEvent]:
    """Run one agent session for ``prompt`` and yield normalized events.

    Messages are relayed one at a time in runtime order; a single ``DoneEvent``
    follows once the runtime's stream ends. Runtime errors propagate as-is.
    Closing this iterator early closes the runtime session.
    """
    if options is None:
        options = get_options(standalone=True)

    log = logger.bind(run_id=uuid.uuid4().hex[:12], model=options.model)
    log.info("agent_stream_started", prompt_preview=prompt[:100])

    message_count = 0
    async with aclosing(query(prompt=prompt, options=options)) as messages:
        async for message in messages:
            message_count += 1
            for event in events_from_message(message):
                if isinstance(event, ToolEvent):
                    log.debug("agent_tool_invoked", tool=event.name)
                yield event

    log.info("agent_stream_finished", messages=message_count)
    yield DoneEvent()


@dataclass
class AgentRunSummary:
    """Everything a completed run produced, collected from its event stream."""

    text: list[str] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    usage: Optional[UsageEvent] = None
    result: Optional[str] = None

    def add(self, event: AgentEvent) -> None:
        if isinstance(event, TextEvent):
            self.text.append(event.text)
        elif isinstance(event, ToolEvent):
            self.tools.append(event.name)
        elif isinstance(event, UsageEvent):
            self.usage = event
        elif isinstance(event, ResultEvent):
            self.result = event.text


async def run_agent(prompt: str, options: Optional[ClaudeAgentOptions] = None) -> AgentRunSummary:
    """Drain ``stream_agent`` and return the collected summary."""
    summary = AgentRunSummary()
    async for event in stream_agent(prompt, options):
        summary.add(event)
    return summary
