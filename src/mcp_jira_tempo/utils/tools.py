"""Tool-related utility functions for MCP Jira Tempo."""

import logging
import os

logger = logging.getLogger("mcp-jira-tempo.utils.tools")


def get_enabled_tools() -> list[str] | None:
    """Get the list of enabled tools from the ENABLED_TOOLS environment variable.

    Returns:
        List of enabled tool names, or None when the variable is unset or
        contains no names.

    Examples:
        ENABLED_TOOLS="log_time,plans" -> ["log_time", "plans"]
        ENABLED_TOOLS=" , " -> None
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        logger.debug("ENABLED_TOOLS environment variable not set or empty.")
        return None

    tools = [tool.strip() for tool in enabled_tools_str.split(",")]
    tools = [tool for tool in tools if tool]
    logger.debug(f"Parsed enabled tools from environment: {tools}")
    return tools or None


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check if a tool should be included based on the enabled tools list."""
    if enabled_tools is None:
        return True
    should_include = tool_name in enabled_tools
    logger.debug(f"Tool '{tool_name}' included: {should_include}")
    return should_include
