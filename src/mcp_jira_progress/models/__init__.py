"""
Pydantic models for the Jira progress MCP server.
"""

from .base import ApiModel
from .jira import (
    JiraActivityItem,
    JiraComment,
    JiraIssue,
    JiraIssueParent,
    JiraIssueSummary,
    JiraProjectComponent,
    JiraWorkSummaryItem,
    ProgressTemplate,
    ProgressUpdateResult,
    SprintTask,
    SprintTasksResult,
)

__all__ = [
    "ApiModel",
    "JiraActivityItem",
    "JiraComment",
    "JiraIssue",
    "JiraIssueParent",
    "JiraIssueSummary",
    "JiraProjectComponent",
    "JiraWorkSummaryItem",
    "ProgressTemplate",
    "ProgressUpdateResult",
    "SprintTask",
    "SprintTasksResult",
]
