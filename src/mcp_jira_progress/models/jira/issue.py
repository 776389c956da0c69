"""
Jira issue models.

``JiraIssueSummary`` is the compact row returned by searches;
``JiraIssue`` is the full detail view including comments and parent.
"""

import logging
from typing import Any

from mcp_jira_progress.preprocessing.adf import extract_text
from mcp_jira_progress.utils import format_timestamp

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_KEY, UNKNOWN
from .comment import JiraComment
from .common import display_name_or_none, nested_name, priority_name
from .project import JiraProjectRef

logger = logging.getLogger(__name__)

# Number of most recent comments included in issue details
RECENT_COMMENT_LIMIT = 5


class JiraIssueSummary(ApiModel):
    """
    Compact issue row returned by JQL searches.
    """

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: str = UNKNOWN
    priority: str = UNKNOWN
    updated: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueSummary":
        if not data or not isinstance(data, dict):
            return cls()
        fields = data.get("fields") or {}
        return cls(
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=nested_name(fields.get("status")),
            priority=priority_name(fields),
            updated=format_timestamp(fields.get("updated")),
        )


class JiraIssueParent(ApiModel):
    """
    The parent (epic or story) of an issue.
    """

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: str = UNKNOWN
    priority: str = UNKNOWN
    issue_type: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueParent | None":
        if not data or not isinstance(data, dict):
            return None
        fields = data.get("fields") or {}
        return cls(
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=nested_name(fields.get("status")),
            priority=priority_name(fields),
            issue_type=nested_name(fields.get("issuetype")),
        )


class JiraIssue(ApiModel):
    """
    Full issue details with a plain-text description and recent comments.
    """

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: str = UNKNOWN
    priority: str = UNKNOWN
    updated: str | None = None
    description: str = EMPTY_STRING
    assignee: str | None = None
    reporter: str | None = None
    created: str | None = None
    comments: list[JiraComment] = []
    project: JiraProjectRef | None = None
    parent: JiraIssueParent | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a ``GET /issue/{key}`` response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``comment_limit`` overrides how many trailing comments are kept

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received non-dictionary issue data, returning default")
            return cls()

        fields = data.get("fields") or {}
        comment_limit = kwargs.get("comment_limit", RECENT_COMMENT_LIMIT)

        comment_block = fields.get("comment") or {}
        raw_comments = (
            comment_block.get("comments", []) if isinstance(comment_block, dict) else []
        )
        recent = raw_comments[-comment_limit:] if comment_limit > 0 else []

        return cls(
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=nested_name(fields.get("status")),
            priority=priority_name(fields),
            updated=format_timestamp(fields.get("updated")),
            description=extract_text(fields.get("description")),
            assignee=display_name_or_none(fields.get("assignee")),
            reporter=display_name_or_none(fields.get("reporter")),
            created=format_timestamp(fields.get("created")),
            comments=[JiraComment.from_api_response(c) for c in recent],
            project=JiraProjectRef.from_api_response(fields.get("project")),
            parent=JiraIssueParent.from_api_response(fields.get("parent")),
        )
