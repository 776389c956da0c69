"""Tool filtering helpers driven by the ENABLED_TOOLS environment variable."""

import logging
import os

logger = logging.getLogger(__name__)


def get_enabled_tools() -> list[str] | None:
    """Get the list of enabled tools from the environment.

    ``ENABLED_TOOLS`` holds a comma-separated list of tool names; whitespace
    around each name is ignored.

    Returns:
        The enabled tool names, or None when every tool should be exposed.

    Examples:
        ENABLED_TOOLS="jira_search,jira_update_progress" -> ["jira_search", "jira_update_progress"]
        ENABLED_TOOLS=" , " -> None
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        logger.debug("ENABLED_TOOLS environment variable not set or empty.")
        return None

    tools = [tool.strip() for tool in enabled_tools_str.split(",") if tool.strip()]
    logger.debug(f"Parsed enabled tools from environment: {tools}")
    return tools or None


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check if a tool should be listed given the enabled tools filter."""
    if enabled_tools is None:
        return True
    should_include = tool_name in enabled_tools
    logger.debug(
        f"Tool '{tool_name}' included: {should_include} (based on enabled_tools: {enabled_tools})"
    )
    return should_include
