"""AllRecipes finder: a browser-driving recipe search agent."""

from .agent import AgentRunSummary, events_from_message, get_options, run_agent, stream_agent
from .config import DeploymentMode, detect_deployment_mode, get_settings
from .events import AgentEvent, DoneEvent, ResultEvent, TextEvent, ToolEvent, UsageEvent
from .exceptions import AgentRunError, ConfigurationError, RecipeFinderError
from .tools import ALLOWED_TOOLS

__all__ = [
    "ALLOWED_TOOLS",
    "AgentEvent",
    "AgentRunError",
    "AgentRunSummary",
    "ConfigurationError",
    "DeploymentMode",
    "DoneEvent",
    "RecipeFinderError",
    "ResultEvent",
    "TextEvent",
    "ToolEvent",
    "UsageEvent",
    "detect_deployment_mode",
    "events_from_message",
    "get_options",
    "get_settings",
    "run_agent",
    "stream_agent",
]
