"""Configuration management using Pydantic settings."""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "allrecipes-finder"

# Chromium location in the container image; any other CHROME_PATH means a local install
CONTAINER_CHROME_PATH = "/usr/bin/chromium"

DEFAULT_DEVTOOLS_PACKAGE = "chrome-devtools-mcp@latest"


class DeploymentMode(str, Enum):
    """Where the browser tool server runs."""

    LOCAL = "local"
    CONTAINER = "container"


def detect_deployment_mode(chrome_path: Optional[str]) -> DeploymentMode:
    """Pick the deployment mode from the configured browser binary path.

    Only the container image's Chromium path selects container mode; a missing
    or unrecognized path falls back to local so the tool server can find an
    installed Chrome on its own.
    """
    if chrome_path == CONTAINER_CHROME_PATH:
        return DeploymentMode.CONTAINER
    return DeploymentMode.LOCAL


class AgentSettings(BaseSettings):
    """Agent runtime configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_AGENT_")

    model: str = Field(default="haiku", description="Model alias passed to the agent runtime")
    max_turns: int = Field(default=50, ge=1, description="Upper bound on agent reasoning/tool-call turns")


class BrowserSettings(BaseSettings):
    """Browser tool server configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_BROWSER_", populate_by_name=True)

    chrome_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("CHROME_PATH", "RECIPE_BROWSER_CHROME_PATH"),
        description="Browser binary path; the container image sets /usr/bin/chromium",
    )
    devtools_package: str = Field(default=DEFAULT_DEVTOOLS_PACKAGE, description="npm package spec of the DevTools MCP server")
    runner: str = Field(default="npx", description="Package runner used to launch the tool server")

    @property
    def deployment_mode(self) -> DeploymentMode:
        return detect_deployment_mode(self.chrome_path)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_LOG_", populate_by_name=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=True, validation_alias=AliasChoices("RECIPE_LOG_JSON", "RECIPE_LOG_JSON_OUTPUT"))


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="RECIPE_", extra="ignore")

    agent: AgentSettings = Field(default_factory=AgentSettings)
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load settings once per process; call ``get_settings.cache_clear()`` to reload."""
    return AppSettings()
