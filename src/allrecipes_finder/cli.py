"""CLI interface for the AllRecipes finder agent."""

import asyncio
import json
import sys
from typing import Optional

import typer

from .agent import get_options, run_agent, stream_agent
from .browser import chrome_devtools_server_config
from .config import DeploymentMode, get_settings
from .events import ResultEvent, TextEvent, ToolEvent, UsageEvent
from .exceptions import AgentRunError, ConfigurationError
from .observability import setup_logging
from .tools import ALLOWED_TOOLS, CHROME_DEVTOOLS_SERVER

app = typer.Typer(help="Find recipes on AllRecipes.com with a browser-driving agent")


@app.command()
def run(
    prompt: str = typer.Argument(..., help="What to look for, e.g. 'vegan pasta recipes'"),
    json_output: bool = typer.Option(False, "--json", help="Print one JSON object per event"),
    result_only: bool = typer.Option(False, "--result-only", "-r", help="Wait for the run to finish and print only the result"),
    model: Optional[str] = typer.Option(None, "--model", help="Model override"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", "-t", help="Maximum agent turns"),
) -> None:
    """Search AllRecipes and stream the agent's progress."""
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.json_output)

    if max_turns is not None and max_turns < 1:
        raise ConfigurationError(f"--max-turns must be at least 1, got {max_turns}")
    options = get_options(standalone=True, model=model, max_turns=max_turns, settings=settings)

    async def _run() -> None:
        usage: Optional[UsageEvent] = None
        try:
            if result_only:
                summary = await run_agent(prompt, options)
                print(summary.result or "\n".join(summary.text))
                return
            async for event in stream_agent(prompt, options):
                if json_output:
                    print(json.dumps(event.to_dict()), flush=True)
                elif isinstance(event, TextEvent):
                    print(event.text, flush=True)
                elif isinstance(event, ToolEvent):
                    print(f"[tool] {event.name}", file=sys.stderr, flush=True)
                elif isinstance(event, UsageEvent):
                    usage = event
                elif isinstance(event, ResultEvent):
                    print(f"\n{event.text}", flush=True)
        except Exception as e:
            raise AgentRunError(f"Recipe search failed: {e}") from e

        if usage is not None and not json_output:
            print(f"[usage] input={usage.input_tokens} output={usage.output_tokens}", file=sys.stderr)

    asyncio.run(_run())


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = get_settings()
    mode = settings.browser.deployment_mode
    server = chrome_devtools_server_config(mode, command=settings.browser.runner, package=settings.browser.devtools_package)
    print(f"Model: {settings.agent.model}")
    print(f"Max Turns: {settings.agent.max_turns}")
    print(f"Deployment Mode: {mode.value}")
    print(f"Chrome Path: {settings.browser.chrome_path or '(auto-detect)'}")
    print(f"Tool Server: {server['command']} {' '.join(server['args'])}")


@app.command()
def tools() -> None:
    """List the browser tools the agent may call."""
    for name in ALLOWED_TOOLS:
        print(name)


@app.command("mcp-config")
def mcp_config(
    mode: Optional[DeploymentMode] = typer.Option(None, "--mode", help="Deployment mode (default: detected from CHROME_PATH)"),
) -> None:
    """Print the mcpServers block for registering the DevTools server yourself."""
    settings = get_settings()
    server = chrome_devtools_server_config(
        mode or settings.browser.deployment_mode,
        command=settings.browser.runner,
        package=settings.browser.devtools_package,
    )
    print(json.dumps({"mcpServers": {CHROME_DEVTOOLS_SERVER: server}}, indent=2))


if __name__ == "__main__":
    app()
