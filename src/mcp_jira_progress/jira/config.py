"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

from ..utils.urls import is_atlassian_cloud_url
from .constants import CURRENT_USER_JQL

logger = logging.getLogger("mcp-jira-progress.jira.config")

DEFAULT_TIMEOUT = 75
DEFAULT_DUE_DAYS = 30


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class JiraConfig:
    """Jira API configuration.

    Handles authentication for Jira Cloud and Server/Data Center:
    - Cloud: username/API token (basic auth)
    - Server/DC: personal access token or basic auth

    Also carries the team and issue-creation defaults used by the tools.
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Email or username (Cloud)
    api_token: str | None = None  # API token (Cloud)
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: int = DEFAULT_TIMEOUT  # Per-request timeout in seconds
    current_user: str = CURRENT_USER_JQL  # JQL user expression for "my" queries
    team_members: list[str] = field(default_factory=list)  # Users for team activity
    default_project: str | None = None  # Project that receives creation defaults
    default_labels: list[str] = field(default_factory=list)
    default_due_days: int = DEFAULT_DUE_DAYS

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        if is_atlassian_cloud_url(url):
            if username and api_token:
                auth_type = "basic"
            else:
                error_msg = "Cloud authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(error_msg)
        else:  # Server/Data Center
            if personal_token:
                auth_type = "token"
            elif username and api_token:
                auth_type = "basic"
            else:
                error_msg = "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN or JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=ssl_verify,
            timeout=_int_from_env("JIRA_TIMEOUT", DEFAULT_TIMEOUT),
            current_user=os.getenv("JIRA_CURRENT_USER") or CURRENT_USER_JQL,
            team_members=_split_csv(os.getenv("JIRA_TEAM_MEMBERS")),
            default_project=os.getenv("JIRA_DEFAULT_PROJECT") or None,
            default_labels=_split_csv(os.getenv("JIRA_DEFAULT_LABELS")),
            default_due_days=_int_from_env("JIRA_DEFAULT_DUE_DAYS", DEFAULT_DUE_DAYS),
        )

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        if self.auth_type == "token":
            return bool(self.personal_token)
        elif self.auth_type == "basic":
            return bool(self.username and self.api_token)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in JiraConfig"
        )
        return False

    def is_default_project(self, project_key: str) -> bool:
        """Whether issue-creation defaults apply to this project."""
        return bool(
            self.default_project
            and project_key.upper() == self.default_project.upper()
        )


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={value!r}, using {default}")
        return default
