"""Launch spec for the Chrome DevTools MCP server."""

from typing import Any

from .config import CONTAINER_CHROME_PATH, DEFAULT_DEVTOOLS_PACKAGE, DeploymentMode

# Emulation, performance and network tools are never offered to the agent
BASE_FLAGS = (
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
)

# Chromium cannot use its sandbox or /dev/shm inside the container
CONTAINER_CHROME_FLAGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
)


def build_chrome_devtools_args(
    mode: DeploymentMode,
    *,
    package: str = DEFAULT_DEVTOOLS_PACKAGE,
    executable_path: str = CONTAINER_CHROME_PATH,
) -> list[str]:
    """Build the runner arguments that start the DevTools MCP server.

    Args:
        mode: Deployment mode. Local lets the server auto-detect Chrome.
        package: npm package spec to run.
        executable_path: Browser binary used in container mode.

    Returns:
        Ordered argument list for the package runner.
    """
    args = ["-y", package, *BASE_FLAGS]
    if mode == DeploymentMode.CONTAINER:
        args.append(f"--executable-path={executable_path}")
        args.extend(f"--chrome-arg={flag}" for flag in CONTAINER_CHROME_FLAGS)
    return args


def chrome_devtools_server_config(
    mode: DeploymentMode,
    *,
    command: str = "npx",
    package: str = DEFAULT_DEVTOOLS_PACKAGE,
) -> dict[str, Any]:
    """MCP stdio server registration for the DevTools server."""
    return {
        "type": "stdio",
        "command": command,
        "args": build_chrome_devtools_args(mode, package=package),
    }
