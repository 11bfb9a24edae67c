"""Browser tools the agent is allowed to call through the DevTools MCP server."""

CHROME_DEVTOOLS_SERVER = "chrome-devtools"


def mcp_tool_name(server: str, tool: str) -> str:
    """Qualified tool name as the agent runtime sees it (``mcp__<server>__<tool>``)."""
    return f"mcp__{server}__{tool}"


# Short names, grouped by DevTools MCP category
INPUT_TOOLS = ("click", "fill", "fill_form", "hover", "press_key", "handle_dialog")
NAVIGATION_TOOLS = ("navigate_page", "new_page", "list_pages", "select_page", "close_page", "wait_for")
DEBUGGING_TOOLS = ("take_screenshot", "take_snapshot", "evaluate_script", "list_console_messages")

BROWSER_TOOLS: tuple[str, ...] = INPUT_TOOLS + NAVIGATION_TOOLS + DEBUGGING_TOOLS

ALLOWED_TOOLS: tuple[str, ...] = tuple(mcp_tool_name(CHROME_DEVTOOLS_SERVER, tool) for tool in BROWSER_TOOLS)
