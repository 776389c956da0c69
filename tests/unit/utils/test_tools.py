"""Tests for tool utility functions."""

import os
from unittest.mock import patch

from mcp_jira_progress.utils.tools import get_enabled_tools, should_include_tool


def test_get_enabled_tools_not_set():
    """Test get_enabled_tools when ENABLED_TOOLS is not set."""
    with patch.dict(os.environ, {}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_empty_string():
    """Test get_enabled_tools with empty string."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": ""}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_only_whitespace():
    """Test get_enabled_tools with string containing only whitespace."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": "   "}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_only_commas():
    """Test get_enabled_tools with string containing only commas."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": ",,,,"}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_whitespace_and_commas():
    """Test get_enabled_tools with string containing whitespace and commas."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": " , , , "}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_single_tool():
    """Test get_enabled_tools with a single tool."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": "jira_search"}, clear=True):
        assert get_enabled_tools() == ["jira_search"]


def test_get_enabled_tools_multiple_tools():
    """Test get_enabled_tools with multiple tools."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": "jira_search,jira_get_issue,jira_update_progress"}, clear=True):
        assert get_enabled_tools() == ["jira_search", "jira_get_issue", "jira_update_progress"]


def test_get_enabled_tools_with_whitespace():
    """Test get_enabled_tools with whitespace around tool names."""
    with patch.dict(
        os.environ, {"ENABLED_TOOLS": " jira_search , jira_get_issue , jira_update_progress "}, clear=True
    ):
        assert get_enabled_tools() == ["jira_search", "jira_get_issue", "jira_update_progress"]


def test_should_include_tool_none_enabled():
    """Test should_include_tool when enabled_tools is None."""
    assert should_include_tool("jira_update_labels", None) is True


def test_should_include_tool_tool_enabled():
    """Test should_include_tool when tool is in enabled list."""
    enabled_tools = ["jira_search", "jira_get_issue", "jira_update_progress"]
    assert should_include_tool("jira_get_issue", enabled_tools) is True


def test_should_include_tool_tool_not_enabled():
    """Test should_include_tool when tool is not in enabled list."""
    enabled_tools = ["jira_search", "jira_get_issue", "jira_update_progress"]
    assert should_include_tool("jira_add_comment", enabled_tools) is False
