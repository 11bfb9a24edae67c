"""Tests for the tool allow-list and system prompt."""

from allrecipes_finder.prompts import SYSTEM_PROMPT
from allrecipes_finder.tools import ALLOWED_TOOLS, BROWSER_TOOLS, CHROME_DEVTOOLS_SERVER, mcp_tool_name

EXPECTED_TOOLS = {
    "mcp__chrome-devtools__click",
    "mcp__chrome-devtools__fill",
    "mcp__chrome-devtools__fill_form",
    "mcp__chrome-devtools__hover",
    "mcp__chrome-devtools__press_key",
    "mcp__chrome-devtools__handle_dialog",
    "mcp__chrome-devtools__navigate_page",
    "mcp__chrome-devtools__new_page",
    "mcp__chrome-devtools__list_pages",
    "mcp__chrome-devtools__select_page",
    "mcp__chrome-devtools__close_page",
    "mcp__chrome-devtools__wait_for",
    "mcp__chrome-devtools__take_screenshot",
    "mcp__chrome-devtools__take_snapshot",
    "mcp__chrome-devtools__evaluate_script",
    "mcp__chrome-devtools__list_console_messages",
}


class TestAllowedTools:
    """Test the allow-list contents."""

    def test_exactly_sixteen(self):
        """The allow-list holds exactly the sixteen browser operations."""
        assert len(ALLOWED_TOOLS) == 16
        assert set(ALLOWED_TOOLS) == EXPECTED_TOOLS

    def test_no_duplicates(self):
        """Every name appears once."""
        assert len(set(ALLOWED_TOOLS)) == len(ALLOWED_TOOLS)

    def test_immutable(self):
        """The allow-list is a tuple."""
        assert isinstance(ALLOWED_TOOLS, tuple)

    def test_no_disabled_categories(self):
        """Emulation, performance and network tools are not offered."""
        for name in ALLOWED_TOOLS:
            assert "emulate" not in name
            assert "performance" not in name
            assert "network" not in name

    def test_mcp_tool_name(self):
        """Qualified names follow the mcp__<server>__<tool> convention."""
        assert mcp_tool_name(CHROME_DEVTOOLS_SERVER, "click") == "mcp__chrome-devtools__click"


class TestSystemPrompt:
    """Test the instruction text against the allow-list."""

    def test_mentions_every_tool(self):
        """Every allowed tool is described to the agent."""
        for tool in BROWSER_TOOLS:
            assert f"- {tool}:" in SYSTEM_PROMPT

    def test_targets_allrecipes(self):
        """The agent starts from the AllRecipes home page."""
        assert "https://www.allrecipes.com" in SYSTEM_PROMPT
