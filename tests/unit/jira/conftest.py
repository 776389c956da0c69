"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira_progress.jira.client import CurrentUserCache, JiraClient
from mcp_jira_progress.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance for a Cloud site."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test_username",
        api_token="test_token",
        team_members=["alice@example.com", "bob@example.com"],
        default_project="TSSE",
        default_labels=["EngProd", "TSSP"],
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = lambda resource: f"rest/api/3/{resource}"
    mock_jira.myself.return_value = {"accountId": "test-account-id"}
    mock_jira._session = MagicMock()
    yield mock_jira


@pytest.fixture
def current_user_cache():
    return CurrentUserCache()


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira, current_user_cache):
    """Create a JiraClient instance with mocked dependencies."""
    with patch("mcp_jira_progress.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        client = JiraClient(config=mock_config, current_user_cache=current_user_cache)
        yield client


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira, current_user_cache):
    """Create a JiraFetcher instance with mocked dependencies."""
    from mcp_jira_progress.jira import JiraFetcher

    with patch("mcp_jira_progress.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=mock_config, current_user_cache=current_user_cache)
        yield fetcher
