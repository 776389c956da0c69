"""
Models for activity-oriented search results.
"""

from typing import Any

from mcp_jira_progress.utils import format_timestamp

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_KEY, UNASSIGNED, UNKNOWN
from .common import display_name_or_none, nested_name


class JiraWorkSummaryItem(ApiModel):
    """An issue the current user touched within a date range."""

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: str = UNKNOWN
    last_activity_type: str = "updated"

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraWorkSummaryItem":
        if not data or not isinstance(data, dict):
            return cls()
        fields = data.get("fields") or {}
        return cls(
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=nested_name(fields.get("status")),
        )


class JiraActivityItem(ApiModel):
    """A recent update on an issue owned by a team member."""

    issue_key: str = JIRA_DEFAULT_KEY
    team_member: str = UNASSIGNED
    activity_type: str = "issue_updated"
    timestamp: str | None = None
    summary: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraActivityItem":
        if not data or not isinstance(data, dict):
            return cls()
        fields = data.get("fields") or {}
        return cls(
            issue_key=str(data.get("key", JIRA_DEFAULT_KEY)),
            team_member=display_name_or_none(fields.get("assignee")) or UNASSIGNED,
            timestamp=format_timestamp(fields.get("updated")),
            summary=fields.get("summary"),
        )
