from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mcp_jira_progress.jira.client import CurrentUserCache

if TYPE_CHECKING:
    from mcp_jira_progress.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the fully configured Jira configuration loaded from
    environment variables at server startup.

    ``current_user_cache`` is shared by every JiraFetcher created for this
    server, so the current user's account ID is looked up once per process.
    """

    full_jira_config: JiraConfig | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
    current_user_cache: CurrentUserCache = field(default_factory=CurrentUserCache)
