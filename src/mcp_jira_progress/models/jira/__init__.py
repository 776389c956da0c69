"""
Jira data models, organized by entity type.
"""

from .agile import SprintTask, SprintTasksResult, SprintWeek
from .comment import JiraComment
from .common import JiraUser
from .issue import JiraIssue, JiraIssueParent, JiraIssueSummary
from .progress import ProgressTemplate, ProgressUpdateResult
from .project import JiraProjectComponent, JiraProjectRef
from .search import JiraActivityItem, JiraWorkSummaryItem

__all__ = [
    "JiraActivityItem",
    "JiraComment",
    "JiraIssue",
    "JiraIssueParent",
    "JiraIssueSummary",
    "JiraProjectComponent",
    "JiraProjectRef",
    "JiraUser",
    "JiraWorkSummaryItem",
    "ProgressTemplate",
    "ProgressUpdateResult",
    "SprintTask",
    "SprintTasksResult",
    "SprintWeek",
]
